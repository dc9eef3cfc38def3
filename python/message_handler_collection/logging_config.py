"""Logging configuration for the message handler collection."""

import logging
import os
import sys
from typing import Union

from .config import MessageHandlerDefaults, MessageHandlerEnvVars


def parse_level(level: str) -> Union[int, str]:
    """Convert a log level string into something `Logger.setLevel` accepts.

    Integer strings (including negative ones) become ints, names are
    upper-cased.
    """
    try:
        return int(level)
    except ValueError:
        return level.upper()


def _resolve_level(level: str) -> Union[int, str]:
    parsed = parse_level(level)
    # getLevelName only maps registered names back to ints
    if isinstance(parsed, str) and not isinstance(logging.getLevelName(parsed), int):
        return MessageHandlerDefaults.LOG_LEVEL
    return parsed


def get_logger(name: str = MessageHandlerDefaults.LOGGER_NAME) -> logging.Logger:
    """Get a configured logger for the package.

    The logger uses MESSAGE_HANDLER_LOG_LEVEL (or LOG_LEVEL) to determine the log
    level. If neither is set, or the value is not a known level, defaults to
    ERROR, which effectively disables most package logging.

    Returns:
        Configured logger instance for the package.
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        level = os.getenv(
            MessageHandlerEnvVars.LOG_LEVEL,
            os.getenv(
                MessageHandlerEnvVars.FALLBACK_LOG_LEVEL,
                MessageHandlerDefaults.LOG_LEVEL,
            ),
        )

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(MessageHandlerDefaults.LOG_FORMAT))
        logger.addHandler(handler)

        logger.setLevel(_resolve_level(level))

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

    return logger


# Package logger instance
logger = get_logger()
