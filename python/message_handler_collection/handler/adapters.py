"""Adapters unifying synchronous and asynchronous message handlers.

Every registered handler is stored as a `MessageHandler`, whose single
`handle` coroutine is the only way the collection invokes it. Plain functions
are wrapped in `SyncMessageHandler`, coroutine functions in
`AsyncMessageHandler`.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Union

from ..exceptions import InvalidArgumentError
from ..message import Message

AsyncHandlerFunc = Callable[[Message], Awaitable[Any]]
SyncHandlerFunc = Callable[[Message], Any]
HandlerFunc = Union[AsyncHandlerFunc, SyncHandlerFunc]


class MessageHandler(ABC):
    """Asynchronous handler capability shared by every registered handler."""

    @abstractmethod
    async def handle(self, message: Message) -> None:
        """Process a message, suspending if the underlying handler does."""
        pass

    @property
    def name(self) -> str:
        return type(self).__name__

    async def __call__(self, message: Message) -> None:
        await self.handle(message)


class _FunctionMessageHandler(MessageHandler):
    def __init__(self, func: Callable[..., Any]) -> None:
        self.func = func

    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", repr(self.func))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


class AsyncMessageHandler(_FunctionMessageHandler):
    """Wraps a coroutine function."""

    async def handle(self, message: Message) -> None:
        await self.func(message)


class SyncMessageHandler(_FunctionMessageHandler):
    """Wraps a plain function.

    A function that returns a value runs to completion inside `handle` without
    awaiting anything, so the returned coroutine finishes on its first step.
    If the function returns an awaitable (a lambda calling a coroutine
    function, a wrapped async function), that awaitable is awaited.
    """

    async def handle(self, message: Message) -> None:
        result = self.func(message)
        if inspect.isawaitable(result):
            await result


def _is_coroutine_callable(func: Any) -> bool:
    if inspect.iscoroutinefunction(func):
        return True
    # Classes are constructors, even when their instances are async callables
    if inspect.isclass(func):
        return False
    call = getattr(func, "__call__", None)
    return call is not None and inspect.iscoroutinefunction(call)


def as_message_handler(
    func: Union[MessageHandler, HandlerFunc], argument_name: str = "handler"
) -> MessageHandler:
    """Adapt a handler of either shape to the `MessageHandler` capability.

    Args:
        func: A `MessageHandler`, a coroutine function, or a plain function
        argument_name: Name reported if the argument is rejected

    Returns:
        The handler itself, or an adapter wrapping it

    Raises:
        InvalidArgumentError: If func is None or not callable
    """
    if func is None:
        raise InvalidArgumentError(argument_name)
    if isinstance(func, MessageHandler):
        return func
    if not callable(func):
        raise InvalidArgumentError(
            argument_name,
            f"Argument '{argument_name}' must be callable, got {type(func).__name__}",
        )
    if _is_coroutine_callable(func):
        return AsyncMessageHandler(func)
    return SyncMessageHandler(func)
