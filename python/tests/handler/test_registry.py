"""Unit tests for HandlerRegistry and resolution."""

from unittest.mock import AsyncMock, Mock

import pytest

from message_handler_collection.exceptions import UnknownMessageTypeError
from message_handler_collection.handler.adapters import (
    AsyncMessageHandler,
    SyncMessageHandler,
)
from message_handler_collection.handler.registry import (
    HandlerRegistry,
    MessageHandlerCollection,
)
from message_handler_collection.message import Message


class TestHandlerRegistry:
    """Test HandlerRegistry set, get and remove methods."""

    def test_set_get_handler(self):
        """Test set/get handler by message type."""
        registry = HandlerRegistry()
        handler = SyncMessageHandler(Mock())

        registry.set_handler("ping", handler)

        assert registry.get_handler("ping") is handler
        assert registry.has_handler("ping")
        assert "ping" in registry
        assert len(registry) == 1

    def test_set_handler_overwrites(self):
        """Test that setting a handler twice keeps the last one."""
        registry = HandlerRegistry()
        first = SyncMessageHandler(Mock())
        second = SyncMessageHandler(Mock())

        registry.set_handler("ping", first)
        registry.set_handler("ping", second)

        assert registry.get_handler("ping") is second
        assert registry.list_message_types() == ["ping"]

    def test_get_missing_handler_returns_none(self):
        registry = HandlerRegistry()

        assert registry.get_handler("ping") is None
        assert not registry.has_handler("ping")
        assert "ping" not in registry

    def test_remove_handler(self):
        """Test that remove_handler drops the registration."""
        registry = HandlerRegistry()
        registry.set_handler("ping", SyncMessageHandler(Mock()))

        registry.remove_handler("ping")

        assert registry.get_handler("ping") is None
        assert len(registry) == 0

    def test_remove_missing_handler_is_noop(self):
        """Test that removing an unregistered type does not raise."""
        registry = HandlerRegistry()
        handler = SyncMessageHandler(Mock())
        registry.set_handler("ping", handler)

        registry.remove_handler("pong")

        assert registry.list_message_types() == ["ping"]
        assert registry.get_handler("ping") is handler

    def test_fallback_slot(self):
        """Test that the fallback slot is replaced and cleared."""
        registry = HandlerRegistry()
        first = SyncMessageHandler(Mock())
        second = SyncMessageHandler(Mock())

        registry.set_fallback_handler(first)
        registry.set_fallback_handler(second)
        assert registry.fallback_handler is second

        registry.remove_fallback_handler()
        assert registry.fallback_handler is None

    def test_fallback_not_counted_as_handler(self):
        registry = HandlerRegistry()
        registry.set_fallback_handler(SyncMessageHandler(Mock()))

        assert not registry.has_handler("ping")
        assert len(registry) == 0

    def test_clear(self):
        """Test that clear removes all handlers and the fallback."""
        registry = HandlerRegistry()
        registry.set_handler("ping", SyncMessageHandler(Mock()))
        registry.set_fallback_handler(SyncMessageHandler(Mock()))

        registry.clear()

        assert registry.list_message_types() == []
        assert registry.fallback_handler is None

    def test_non_string_not_contained(self):
        registry = HandlerRegistry()

        assert 1 not in registry

    def test_is_message_handler_collection(self):
        assert isinstance(HandlerRegistry(), MessageHandlerCollection)


class TestResolve:
    """Test resolution order: specific handler, fallback, error."""

    def test_specific_handler_wins_over_fallback(self):
        registry = HandlerRegistry()
        specific = SyncMessageHandler(Mock())
        registry.set_handler("ping", specific)
        registry.set_fallback_handler(SyncMessageHandler(Mock()))

        assert registry.resolve("ping") is specific

    def test_fallback_used_for_unknown_type(self):
        registry = HandlerRegistry()
        fallback = SyncMessageHandler(Mock())
        registry.set_fallback_handler(fallback)

        assert registry.resolve("pong") is fallback

    def test_unknown_type_without_fallback_raises(self):
        """Test that an empty registry raises with the offending type."""
        registry = HandlerRegistry()

        with pytest.raises(UnknownMessageTypeError) as exc_info:
            registry.resolve("ping")

        assert exc_info.value.message_type == "ping"
        assert "ping" in str(exc_info.value)


class TestHandleMessage:
    """Test handle_message dispatch."""

    @pytest.mark.asyncio
    async def test_dispatches_to_registered_handler(self):
        """Test that the registered handler receives the message."""
        registry = HandlerRegistry()
        func = AsyncMock()
        registry.set_handler("ping", AsyncMessageHandler(func))
        message = Message(type="ping", payload="hello")

        await registry.handle_message(message)

        func.assert_awaited_once_with(message)

    @pytest.mark.asyncio
    async def test_dispatches_once_to_fallback(self):
        """Test that only the fallback runs for an unregistered type."""
        registry = HandlerRegistry()
        specific = Mock()
        fallback = Mock()
        registry.set_handler("ping", SyncMessageHandler(specific))
        registry.set_fallback_handler(SyncMessageHandler(fallback))
        message = Message(type="pong")

        await registry.handle_message(message)

        fallback.assert_called_once_with(message)
        specific.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_type_raises(self):
        registry = HandlerRegistry()

        with pytest.raises(UnknownMessageTypeError) as exc_info:
            await registry.handle_message(Message(type="ping"))

        assert exc_info.value.message_type == "ping"

    @pytest.mark.asyncio
    async def test_handler_exception_propagates_unchanged(self):
        """Test that handler failures are not wrapped by the registry."""
        registry = HandlerRegistry()
        error = RuntimeError("handler failed")
        registry.set_handler("ping", AsyncMessageHandler(AsyncMock(side_effect=error)))

        with pytest.raises(RuntimeError) as exc_info:
            await registry.handle_message(Message(type="ping"))

        assert exc_info.value is error
