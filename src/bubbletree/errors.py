"""Exceptions raised by bubbletree."""


class BubbleTreeError(Exception):
    """Base class for all bubbletree errors."""


class InvalidListenerSpec(BubbleTreeError, TypeError):
    """A listen() call had a bad matcher, property or callback."""


class InvalidWrapperTarget(BubbleTreeError, TypeError):
    """A wrapper was applied to something it cannot wrap."""


class InvalidDecoratorArguments(BubbleTreeError, ValueError):
    """A typed wrapper was given a bad type or argument index."""


class InjectionCycleError(BubbleTreeError):
    """A node was found inside its own subtree during injection."""

    def __init__(self, node, parent) -> None:
        super().__init__(f"cannot inject {node!r} under {parent!r}: reference cycle")
        self.node = node
        self.parent = parent
