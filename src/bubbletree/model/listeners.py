"""Per-node listener storage, split into bins by matching strategy."""

from __future__ import annotations

import logging
from enum import Enum
from itertools import count
from typing import TYPE_CHECKING, Any, Callable

from bubbletree.config import get_settings

if TYPE_CHECKING:
    from bubbletree.model.event import Event

logger = logging.getLogger(__name__)

Listener = Callable[["Event"], Any]
Disposer = Callable[[], None]


class Bin(Enum):
    TYPE = "type"
    PROPERTY = "property"
    PREDICATE = "predicate"
    ALL = "all"


class ListenerRegistry:
    """Subscribers for one node.

    Type and property listeners are bucketed by key. Predicate and
    catch-all listeners see every event. Ids come from a counter owned by
    the registry, so they are unique across bins and ascend in
    registration order.
    """

    def __init__(self) -> None:
        self._ids = count()
        self._types: dict[str, dict[int, Listener]] = {}
        self._props: dict[str, dict[int, Listener]] = {}
        self._predicates: dict[int, Listener] = {}
        self._all: dict[int, Listener] = {}

    def _bucket(self, bin: Bin, key: str | None, create: bool = False) -> dict[int, Listener] | None:
        if bin is Bin.PREDICATE:
            return self._predicates
        if bin is Bin.ALL:
            return self._all
        keyed = self._types if bin is Bin.TYPE else self._props
        if create:
            return keyed.setdefault(key, {})
        return keyed.get(key)

    def add(self, bin: Bin, callback: Listener, key: str | None = None) -> Disposer:
        """Store callback in bin (under key for keyed bins). Returns a disposer."""
        listener_id = next(self._ids)
        self._bucket(bin, key, create=True)[listener_id] = callback

        def dispose() -> None:
            self.remove(bin, listener_id, key)

        return dispose

    def remove(self, bin: Bin, listener_id: int, key: str | None = None) -> None:
        """Remove one listener. Missing ids are ignored."""
        bucket = self._bucket(bin, key)
        if bucket is None:
            return
        bucket.pop(listener_id, None)
        if not bucket and bin in (Bin.TYPE, Bin.PROPERTY):
            keyed = self._types if bin is Bin.TYPE else self._props
            keyed.pop(key, None)

    def matching(self, event: Event) -> list[Listener]:
        """Listeners for event: property, type, predicate, then catch-all."""
        found: list[Listener] = []
        if event.property is not None:
            found.extend(self._props.get(event.property, {}).values())
        if event.type is not None:
            found.extend(self._types.get(event.type, {}).values())
        found.extend(self._predicates.values())
        found.extend(self._all.values())
        return found

    def dispatch(self, event: Event) -> None:
        """Call every matching listener with event."""
        isolate = get_settings().isolate_listener_errors
        for callback in self.matching(event):
            if not isolate:
                callback(event)
                continue
            try:
                callback(event)
            except Exception:
                logger.exception("listener %r failed on %s event", callback, event.kind)

    def __len__(self) -> int:
        return (
            sum(len(b) for b in self._types.values())
            + sum(len(b) for b in self._props.values())
            + len(self._predicates)
            + len(self._all)
        )
