"""Handler adapters, registry and builder."""

from .adapters import (
    AsyncMessageHandler,
    MessageHandler,
    SyncMessageHandler,
    as_message_handler,
)
from .builder import MessageHandlerCollectionBuilder
from .registry import (
    HandlerRegistry,
    MessageHandlerCollection,
    MutableMessageHandlerCollection,
)

__all__ = [
    "AsyncMessageHandler",
    "HandlerRegistry",
    "MessageHandler",
    "MessageHandlerCollection",
    "MessageHandlerCollectionBuilder",
    "MutableMessageHandlerCollection",
    "SyncMessageHandler",
    "as_message_handler",
]
