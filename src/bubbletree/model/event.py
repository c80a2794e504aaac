"""Mutation events carried up the node tree."""

from __future__ import annotations

import builtins
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bubbletree.model.node import Node

MUTATION = "mutation"


@dataclass(eq=False)
class Event:
    """One state change, bubbling from its origin towards the root.

    ``path`` starts with the origin's model type and grows by one entry
    for every ancestor the event is handed to. ``cancelled`` is advisory:
    listeners may set it, but bubbling always continues.
    """

    origin: Node
    type: str | None = None
    property: str | None = None
    value: Any = None
    path: list[str] = field(init=False)
    cancelled: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.path = [self.origin.model_type]

    @builtins.property
    def kind(self) -> str:
        """The event type, or "mutation" for untyped events."""
        return self.type if self.type is not None else MUTATION

    def stop_propagation(self) -> None:
        """Mark the event handled. Ancestors still receive it."""
        self.cancelled = True
