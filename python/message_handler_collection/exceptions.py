"""Exceptions raised by the message handler collection."""

from typing import Optional


class MessageHandlingError(Exception):
    """Base exception for all message handler collection errors."""

    pass


class InvalidArgumentError(MessageHandlingError, ValueError):
    """Raised when a builder call is given a missing or invalid argument.

    This is a programming error on the caller's side and is raised at the point
    of the call, before the registry is touched.
    """

    def __init__(self, argument_name: str, message: Optional[str] = None) -> None:
        self.argument_name = argument_name
        super().__init__(message or f"Argument '{argument_name}' must not be None")


class UnknownMessageTypeError(MessageHandlingError, LookupError):
    """Raised when a message has no registered handler and no fallback is set."""

    def __init__(self, message_type: str) -> None:
        self.message_type = message_type
        super().__init__(f"No handler registered for message type '{message_type}'")
