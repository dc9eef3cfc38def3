"""Handler registry mapping message type tags to handlers.

The registry is split into two capabilities over one storage object:

- `MessageHandlerCollection`: resolution and dispatch, handed to consumers
- `MutableMessageHandlerCollection`: mutation, used only by the builder

## Resolution order

1. Handler registered for the message type
2. Fallback handler (if any)
3. `UnknownMessageTypeError`
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..exceptions import UnknownMessageTypeError
from ..logging_config import logger
from ..message import Message
from .adapters import MessageHandler


class MessageHandlerCollection(ABC):
    """Read-only view of a handler registry: lookup and dispatch."""

    @abstractmethod
    def get_handler(self, message_type: str) -> Optional[MessageHandler]:
        """Get the handler registered for a message type, ignoring the fallback."""
        pass

    @property
    @abstractmethod
    def fallback_handler(self) -> Optional[MessageHandler]:
        """Handler used when no type-specific handler is registered."""
        pass

    @abstractmethod
    def list_message_types(self) -> List[str]:
        """List all message types with a registered handler."""
        pass

    def has_handler(self, message_type: str) -> bool:
        """Check if a type-specific handler is registered."""
        return self.get_handler(message_type) is not None

    def resolve(self, message_type: str) -> MessageHandler:
        """Resolve the handler for a message type.

        Args:
            message_type: Type tag of the incoming message

        Returns:
            The registered handler, or the fallback handler if none is registered

        Raises:
            UnknownMessageTypeError: If neither applies
        """
        handler = self.get_handler(message_type)
        if handler is not None:
            logger.debug("Resolved '%s' to handler: %s", message_type, handler.name)
            return handler

        fallback = self.fallback_handler
        if fallback is not None:
            logger.debug(
                "No handler for '%s', using fallback handler: %s",
                message_type,
                fallback.name,
            )
            return fallback

        logger.warning("No handler or fallback for message type '%s'", message_type)
        raise UnknownMessageTypeError(message_type)

    async def handle_message(self, message: Message) -> None:
        """Dispatch a message to exactly one handler.

        Exceptions raised by the handler propagate unchanged.
        """
        handler = self.resolve(message.type)
        await handler.handle(message)

    def __contains__(self, message_type: object) -> bool:
        return isinstance(message_type, str) and self.has_handler(message_type)

    def __len__(self) -> int:
        return len(self.list_message_types())


class MutableMessageHandlerCollection(MessageHandlerCollection):
    """Mutation capability over a handler registry."""

    @abstractmethod
    def set_handler(self, message_type: str, handler: MessageHandler) -> None:
        pass

    @abstractmethod
    def remove_handler(self, message_type: str) -> None:
        pass

    @abstractmethod
    def set_fallback_handler(self, handler: MessageHandler) -> None:
        pass

    @abstractmethod
    def remove_fallback_handler(self) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class HandlerRegistry(MutableMessageHandlerCollection):
    """Dictionary-backed registry with a single fallback slot."""

    def __init__(self) -> None:
        self._handlers: Dict[str, MessageHandler] = {}
        self._fallback_handler: Optional[MessageHandler] = None

    def set_handler(self, message_type: str, handler: MessageHandler) -> None:
        """Set a handler by message type, replacing any existing one.

        Args:
            message_type: The message type tag (e.g., 'ping')
            handler: The handler to invoke for that type
        """
        if message_type in self._handlers:
            logger.debug(
                "Replacing handler for '%s': %s -> %s",
                message_type,
                self._handlers[message_type].name,
                handler.name,
            )
        self._handlers[message_type] = handler

    def get_handler(self, message_type: str) -> Optional[MessageHandler]:
        return self._handlers.get(message_type)

    def remove_handler(self, message_type: str) -> None:
        """Remove a handler by message type. Missing types are ignored."""
        self._handlers.pop(message_type, None)

    @property
    def fallback_handler(self) -> Optional[MessageHandler]:
        return self._fallback_handler

    def set_fallback_handler(self, handler: MessageHandler) -> None:
        self._fallback_handler = handler

    def remove_fallback_handler(self) -> None:
        self._fallback_handler = None

    def list_message_types(self) -> List[str]:
        """List all registered message types."""
        return list(self._handlers.keys())

    def clear(self) -> None:
        """Clear all registered handlers and the fallback."""
        self._handlers.clear()
        self._fallback_handler = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message_types={self.list_message_types()!r}, "
            f"fallback={self._fallback_handler!r})"
        )
