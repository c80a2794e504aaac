"""Method decorators that adopt arguments and raise events after a call."""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable, TypeVar

from bubbletree.errors import InvalidDecoratorArguments, InvalidWrapperTarget
from bubbletree.model.event import Event
from bubbletree.model.node import Node

F = TypeVar("F", bound=Callable[..., Any])


def _check_method(fn: Any, name: str) -> None:
    if not inspect.isfunction(fn):
        raise InvalidWrapperTarget(f'"{name}" must be passed a method, not {type(fn).__name__}')


def _check_type_args(type_: Any, arg_index: Any, name: str) -> None:
    bad_index = arg_index is not None and (
        isinstance(arg_index, bool) or not isinstance(arg_index, int) or arg_index < 0
    )
    if not isinstance(type_, str) or bad_index:
        raise InvalidDecoratorArguments(f'"{name}()" must be passed a type and an optional argument index')


def _arg(args: tuple, index: int) -> Any:
    return args[index] if index < len(args) else None


def _adopt(receiver: Any, arg: Any) -> None:
    if isinstance(receiver, Node) and isinstance(arg, Node):
        arg.inject(receiver)


def _handle_typed(receiver: Any, type_: str, value: Any) -> None:
    if isinstance(receiver, Node):
        receiver.handle(Event(receiver, type_, value=value), local=True)


def inject(fn: F) -> F:
    """Adopt a node passed as the first argument, then raise an event after the call."""
    _check_method(fn, "inject")

    @wraps(fn)
    def wrapper(self, *args, **kwargs):
        _adopt(self, _arg(args, 0))
        result = fn(self, *args, **kwargs)
        if isinstance(self, Node):
            self.handle()
        return result

    return wrapper  # type: ignore[return-value]


def inject_type(type_: str, arg_index: int | None = None) -> Callable[[F], F]:
    """Like inject, but adopt args[arg_index] and raise a typed event carrying it."""
    _check_type_args(type_, arg_index, "inject_type")
    index = arg_index or 0

    def decorator(fn: F) -> F:
        _check_method(fn, "inject_type()")

        @wraps(fn)
        def wrapper(self, *args, **kwargs):
            arg = _arg(args, index)
            _adopt(self, arg)
            result = fn(self, *args, **kwargs)
            _handle_typed(self, type_, arg)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def handle(fn: F) -> F:
    """Raise a generic event on the receiver after the call."""
    _check_method(fn, "handle")

    @wraps(fn)
    def wrapper(self, *args, **kwargs):
        result = fn(self, *args, **kwargs)
        if isinstance(self, Node):
            self.handle()
        return result

    return wrapper  # type: ignore[return-value]


def handle_type(type_: str, arg_index: int | None = None) -> Callable[[F], F]:
    """Raise a typed event on the receiver after the call.

    With arg_index, the event's value is the positional argument at that index.
    """
    _check_type_args(type_, arg_index, "handle_type")

    def decorator(fn: F) -> F:
        _check_method(fn, "handle_type()")

        @wraps(fn)
        def wrapper(self, *args, **kwargs):
            result = fn(self, *args, **kwargs)
            value = _arg(args, arg_index) if arg_index is not None else None
            _handle_typed(self, type_, value)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
