"""Intercepted fields that raise "change" events when written."""

from __future__ import annotations

from typing import Any, Callable

from bubbletree.errors import InvalidDecoratorArguments, InvalidWrapperTarget
from bubbletree.model.event import Event
from bubbletree.model.node import Node

CHANGE = "change"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _emit_change(node: Node, name: str, value: Any) -> None:
    node.handle(Event(node, CHANGE, name, value), local=True)


class Field:
    """Descriptor backing one model field with hidden storage.

    Reading an unset field stores and returns its default (or the result
    of default_factory) without raising an event. Every write raises a
    local "change" event on the owning node, even when the value is
    unchanged. propagate=False hides the field from injection.
    """

    def __init__(
        self,
        default: Any = MISSING,
        *,
        default_factory: Callable[[], Any] | None = None,
        propagate: bool = True,
    ) -> None:
        if default is not MISSING and default_factory is not None:
            raise InvalidDecoratorArguments("Field takes a default or a default_factory, not both")
        if default_factory is not None and not callable(default_factory):
            raise InvalidDecoratorArguments("Field default_factory must be callable")
        self.default = default
        self.default_factory = default_factory
        self.propagate = propagate
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        if not issubclass(owner, Node):
            raise InvalidWrapperTarget(f"Field {name!r} must be declared on a Node subclass, not {owner.__name__}")
        self.name = name

    def __get__(self, instance: Node | None, owner: type | None = None) -> Any:
        if instance is None:
            # dataclasses read this as the field default
            return self if self.default is MISSING else self.default
        values = instance._values
        if self.name in values:
            return values[self.name]
        if self.default_factory is not None:
            value = self.default_factory()
        elif self.default is not MISSING:
            value = self.default
        else:
            raise AttributeError(f"{instance.model_type} field {self.name!r} has no value")
        values[self.name] = value
        return value

    def __set__(self, instance: Node, value: Any) -> None:
        if value is self:
            # dataclass __init__ passing through a field with no plain default
            return
        instance._values[self.name] = value
        _emit_change(instance, self.name, value)

    def __repr__(self) -> str:
        return f"<Field {self.name}>"


class HandledProperty(property):
    """A property whose setter raises a "change" event after it runs."""

    name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __set__(self, instance: Any, value: Any) -> None:
        super().__set__(instance, value)
        if isinstance(instance, Node):
            _emit_change(instance, self.name, value)


def handle_prop(prop: property) -> HandledProperty:
    """Wrap a property so writes through its setter raise change events."""
    if not isinstance(prop, property):
        raise InvalidWrapperTarget(f"handle_prop() must be passed a property, not {type(prop).__name__}")
    if prop.fset is None:
        raise InvalidWrapperTarget("handle_prop() must be passed a property with a setter")
    return HandledProperty(prop.fget, prop.fset, prop.fdel, prop.__doc__)


class Accessor:
    """Explicit get/set handle on one intercepted field of a node."""

    __slots__ = ("node", "name")

    def __init__(self, node: Node, name: str) -> None:
        for klass in type(node).__mro__:
            target = klass.__dict__.get(name)
            if target is not None:
                break
        if not isinstance(target, (Field, HandledProperty)):
            raise AttributeError(f"{node.model_type} has no intercepted field {name!r}")
        self.node = node
        self.name = name

    def get(self) -> Any:
        return getattr(self.node, self.name)

    def set(self, value: Any) -> None:
        setattr(self.node, self.name, value)

    def __repr__(self) -> str:
        return f"<Accessor {self.node.model_type}.{self.name}>"
