"""Fluent builder for message handler collections."""

from typing import Any, Callable, Optional, Union

from ..exceptions import InvalidArgumentError
from ..logging_config import logger
from .adapters import HandlerFunc, MessageHandler, as_message_handler
from .registry import HandlerRegistry, MessageHandlerCollection


def _require_message_type(message_type: Optional[str]) -> str:
    if message_type is None:
        raise InvalidArgumentError("message_type")
    if not isinstance(message_type, str):
        raise InvalidArgumentError(
            "message_type",
            f"Argument 'message_type' must be a string, got {type(message_type).__name__}",
        )
    return message_type


class MessageHandlerCollectionBuilder:
    """Builds a `MessageHandlerCollection` through chained calls.

    Every mutator returns the builder. The last call for a given message type
    (or for the fallback slot) wins. Arguments are validated before the
    registry is touched, so a rejected call leaves it unchanged.

    Example:
        collection = (
            MessageHandlerCollectionBuilder.create()
            .set_handler("ping", on_ping)
            .set_default_handler(on_unknown)
            .build()
        )
        await collection.handle_message(Message(type="ping"))
    """

    def __init__(self) -> None:
        self._registry = HandlerRegistry()

    @classmethod
    def create(cls) -> "MessageHandlerCollectionBuilder":
        """Create a builder holding a new, empty registry."""
        return cls()

    def set_default_handler(
        self, handler: Union[MessageHandler, HandlerFunc]
    ) -> "MessageHandlerCollectionBuilder":
        """Set the handler used when a message type has no registered handler.

        Args:
            handler: Sync or async callable taking a Message

        Raises:
            InvalidArgumentError: If handler is None or not callable
        """
        message_handler = as_message_handler(handler)
        self._registry.set_fallback_handler(message_handler)
        logger.debug("Default handler set: %s", message_handler.name)
        return self

    def remove_default_handler(self) -> "MessageHandlerCollectionBuilder":
        """Clear the default handler so unknown types raise again."""
        self._registry.remove_fallback_handler()
        logger.debug("Default handler removed")
        return self

    def set_handler(
        self, message_type: str, handler: Union[MessageHandler, HandlerFunc]
    ) -> "MessageHandlerCollectionBuilder":
        """Register a handler for a message type, overwriting any existing one.

        Args:
            message_type: The message type to set the handler for
            handler: Sync or async callable taking a Message

        Raises:
            InvalidArgumentError: If message_type or handler is None or invalid
        """
        message_type = _require_message_type(message_type)
        message_handler = as_message_handler(handler)
        self._registry.set_handler(message_type, message_handler)
        logger.debug(
            "[%s] Handler registered: %s", message_type, message_handler.name
        )
        return self

    def remove_handler(self, message_type: str) -> "MessageHandlerCollectionBuilder":
        """Unregister the handler for a message type, if any.

        Raises:
            InvalidArgumentError: If message_type is None or not a string
        """
        message_type = _require_message_type(message_type)
        self._registry.remove_handler(message_type)
        logger.debug("[%s] Handler removed", message_type)
        return self

    def handler(self, message_type: str) -> Callable[[Any], Any]:
        """Decorator form of `set_handler`.

        The decorated function is registered and returned unchanged.
        """
        message_type = _require_message_type(message_type)

        def decorator(func: Any) -> Any:
            self.set_handler(message_type, func)
            return func

        return decorator

    def default_handler(self, func: Any) -> Any:
        """Decorator form of `set_default_handler`."""
        self.set_default_handler(func)
        return func

    def build(self) -> MessageHandlerCollection:
        """Return the collection built so far.

        The same live registry is returned on every call, so later builder
        calls remain visible through previously built collections.
        """
        logger.debug(
            "Built handler collection: types=%s, fallback=%s",
            self._registry.list_message_types(),
            self._registry.fallback_handler is not None,
        )
        return self._registry
