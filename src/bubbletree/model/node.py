"""Observable model nodes with parent injection and event bubbling."""

from __future__ import annotations

import logging
import weakref
from typing import Any, Callable, ClassVar, Iterable, Iterator

from bubbletree.config import get_settings
from bubbletree.errors import InvalidListenerSpec
from bubbletree.model.event import Event
from bubbletree.model.listeners import Bin, Disposer, Listener, ListenerRegistry

logger = logging.getLogger(__name__)


def _is_predicate(matcher: Any) -> bool:
    return callable(matcher) and not isinstance(matcher, (str, list, tuple))


def _filtered(predicate: Callable[[Event], Any], callback: Listener) -> Listener:
    def listener(event: Event) -> None:
        if predicate(event):
            callback(event)

    return listener


def _fan_out(register: Callable[[Any], Disposer], items: Iterable[Any]) -> Disposer:
    """Register each item, returning one disposer for all of them.

    If any registration fails the ones already made are undone.
    """
    disposers: list[Disposer] = []
    try:
        for item in items:
            disposers.append(register(item))
    except InvalidListenerSpec:
        for dispose in disposers:
            dispose()
        raise

    def dispose_all() -> None:
        for dispose in disposers:
            dispose()

    return dispose_all


def _emit(node: Node, event: Event) -> None:
    """Dispatch event on node, then on every ancestor up to the root."""
    debug = get_settings().debug_dispatch
    current: Node | None = node
    while current is not None:
        if current is not node:
            event.path.append(current.model_type)
        if debug:
            logger.debug("dispatch %s at %s path=%s", event.kind, current.model_type, event.path)
        current._listeners.dispatch(event)
        current = current.parent


class Node:
    """Base class for observable model objects.

    Subclasses declare fields (see ``bubbletree.model.schema``) and pick a
    model type name with ``class Foo(Node, model_type="foo")``; the class
    name is used otherwise. Internal state is set up in ``__new__`` so
    dataclass subclasses work without calling ``Node.__init__``.
    """

    model_type: ClassVar[str] = "Node"

    def __init_subclass__(cls, model_type: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if model_type is not None:
            cls.model_type = model_type
        elif "model_type" not in cls.__dict__:
            cls.model_type = cls.__name__

    def __new__(cls, *args: Any, **kwargs: Any) -> Node:
        self = super().__new__(cls)
        object.__setattr__(self, "_parent_ref", None)
        object.__setattr__(self, "_listeners", ListenerRegistry())
        object.__setattr__(self, "_values", {})
        return self

    @property
    def parent(self) -> Node | None:
        """The enclosing node, or None for a root (or a collected parent)."""
        ref = self._parent_ref
        return ref() if ref is not None else None

    def _set_parent(self, parent: Node | None) -> None:
        object.__setattr__(self, "_parent_ref", weakref.ref(parent) if parent is not None else None)

    @property
    def listeners(self) -> ListenerRegistry:
        return self._listeners

    def ancestors(self) -> Iterator[Node]:
        """Yield parent, grandparent, ... up to the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    @property
    def root(self) -> Node:
        top = self
        for top in self.ancestors():
            pass
        return top

    def inject(self, parent: Node | None = None) -> None:
        """Attach this node under parent and wire every node found below it."""
        from bubbletree.model.walk import inject

        inject(self, parent)

    def handle(self, event: Event | None = None, local: bool = False) -> None:
        """Raise event on this node and bubble it to the root.

        Does nothing unless this node has a parent. With no event a generic
        one originating here is created. A supplied event gets this node's
        model type appended to its path unless local is set.
        """
        if self.parent is None:
            return
        if event is None:
            event = Event(self)
        elif not local:
            event.path.append(self.model_type)
        _emit(self, event)

    def listen(self, matcher: Any = None, prop: Any = None, callback: Listener | None = None) -> Disposer:
        """Subscribe to events bubbling through this node. Returns a disposer.

        - ``listen(None, None, cb)``: every event
        - ``listen(None, "name", cb)``: events for property "name"
        - ``listen(None, ["a", "b"], cb)``: events for either property
        - ``listen("change", callback=cb)``: events whose type is "change"
        - ``listen(["a", pred], prop, cb)``: each matcher in turn
        - ``listen(pred, callback=cb)``: cb(event) whenever pred(event) is true
        - ``listen(fn)``: fn(event) for every event
        """
        if callback is None:
            if not _is_predicate(matcher):
                raise InvalidListenerSpec('Invalid listener passed: "callback" is not callable')
            return self._listeners.add(Bin.PREDICATE, matcher)
        if not callable(callback):
            raise InvalidListenerSpec('Invalid listener passed: "callback" is not callable')
        return self._listen(matcher, prop, callback)

    def _listen(self, matcher: Any, prop: Any, callback: Listener) -> Disposer:
        registry = self._listeners
        if matcher is None:
            if prop is None:
                return registry.add(Bin.ALL, callback)
            if isinstance(prop, str):
                return registry.add(Bin.PROPERTY, callback, prop)
            if isinstance(prop, (list, tuple)):
                return _fan_out(lambda name: self._listen_prop(name, callback), prop)
            raise InvalidListenerSpec(f'Invalid listener passed: "prop" is {type(prop).__name__}')
        if isinstance(matcher, str):
            return registry.add(Bin.TYPE, callback, matcher)
        if isinstance(matcher, (list, tuple)):
            return _fan_out(lambda item: self._listen(item, prop, callback), matcher)
        if callable(matcher):
            return registry.add(Bin.PREDICATE, _filtered(matcher, callback))
        raise InvalidListenerSpec(f'Invalid listener passed: "matcher" is {type(matcher).__name__}')

    def _listen_prop(self, name: Any, callback: Listener) -> Disposer:
        if not isinstance(name, str):
            raise InvalidListenerSpec(f'Invalid listener passed: property name {name!r} is not a string')
        return self._listeners.add(Bin.PROPERTY, callback, name)

    def __repr__(self) -> str:
        parent = self.parent
        label = f"{parent.model_type}>{self.model_type}" if parent is not None else self.model_type
        return f"<Node {label}>"
