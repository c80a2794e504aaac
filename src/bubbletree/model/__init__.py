"""Observable model tree."""

from bubbletree.model.event import Event
from bubbletree.model.fields import CHANGE, Accessor, Field, HandledProperty, handle_prop
from bubbletree.model.listeners import Bin, ListenerRegistry
from bubbletree.model.node import Node
from bubbletree.model.walk import iter_children
from bubbletree.model.wrappers import handle, handle_type, inject, inject_type

__all__ = [
    "Accessor",
    "Bin",
    "CHANGE",
    "Event",
    "Field",
    "HandledProperty",
    "ListenerRegistry",
    "Node",
    "handle",
    "handle_prop",
    "handle_type",
    "inject",
    "inject_type",
    "iter_children",
]
