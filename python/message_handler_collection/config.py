"""Environment configuration for the message handler collection."""


class MessageHandlerEnvVars:
    """Environment variable names read by the package."""

    LOG_LEVEL = "MESSAGE_HANDLER_LOG_LEVEL"
    FALLBACK_LOG_LEVEL = "LOG_LEVEL"


class MessageHandlerDefaults:
    """Default values used when the environment is silent."""

    LOG_LEVEL = "ERROR"
    LOGGER_NAME = "message_handler_collection"
    LOG_FORMAT = "[%(levelname)s] %(name)s - %(filename)s:%(lineno)d: %(message)s"

