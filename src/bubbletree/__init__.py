"""Event bubbling for trees of model objects."""

from bubbletree.config import Settings, configure, get_settings, reset_settings
from bubbletree.errors import (
    BubbleTreeError,
    InjectionCycleError,
    InvalidDecoratorArguments,
    InvalidListenerSpec,
    InvalidWrapperTarget,
)
from bubbletree.model import (
    CHANGE,
    Accessor,
    Event,
    Field,
    Node,
    handle,
    handle_prop,
    handle_type,
    inject,
    inject_type,
    iter_children,
)
from bubbletree.render import print_tree, render_tree

__all__ = [
    "Accessor",
    "BubbleTreeError",
    "CHANGE",
    "Event",
    "Field",
    "InjectionCycleError",
    "InvalidDecoratorArguments",
    "InvalidListenerSpec",
    "InvalidWrapperTarget",
    "Node",
    "Settings",
    "configure",
    "get_settings",
    "handle",
    "handle_prop",
    "handle_type",
    "inject",
    "inject_type",
    "iter_children",
    "print_tree",
    "render_tree",
    "reset_settings",
]
