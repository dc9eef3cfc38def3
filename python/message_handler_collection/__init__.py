"""Message handler collection.

Build a registry of message handlers keyed by message type:
- Builder: from message_handler_collection import MessageHandlerCollectionBuilder
- Dispatch: await collection.handle_message(Message(type="ping"))
"""

from .exceptions import (
    InvalidArgumentError,
    MessageHandlingError,
    UnknownMessageTypeError,
)
from .handler import (
    MessageHandler,
    MessageHandlerCollection,
    MessageHandlerCollectionBuilder,
)
from .message import Message

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "Message",
    "MessageHandler",
    "MessageHandlerCollection",
    "MessageHandlerCollectionBuilder",
    "MessageHandlingError",
    "UnknownMessageTypeError",
]
