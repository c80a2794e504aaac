"""Find nodes nested in a node's fields and wire their parent references."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence, Set
from typing import Any, Iterator

from bubbletree.config import get_settings
from bubbletree.errors import InjectionCycleError
from bubbletree.model.node import Node
from bubbletree.model.schema import declared_fields, is_binary_leaf, is_suppressed

logger = logging.getLogger(__name__)

FieldPath = tuple[Any, ...]


def _scan(value: Any, path: FieldPath, seen: set[int]) -> Iterator[tuple[FieldPath, Node]]:
    """Yield nodes inside value. Containers are descended into, nodes are not."""
    if value is None or isinstance(value, str) or is_binary_leaf(value):
        return
    if isinstance(value, Node):
        yield path, value
        return
    if isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, (Sequence, Set)):
        items = enumerate(value)
    else:
        return
    if id(value) in seen:
        return
    seen.add(id(value))
    for key, item in items:
        yield from _scan(item, path + (key,), seen)


def iter_children(node: Node) -> Iterator[tuple[FieldPath, Node]]:
    """Yield (field_path, child) for each node directly owned by node.

    field_path starts with the field name followed by any container keys
    or indexes, e.g. ("items", 2, "owner"). Suppressed fields and binary
    leaves are skipped.
    """
    cls = type(node)
    seen: set[int] = set()
    for name in declared_fields(cls):
        if is_suppressed(cls, name):
            continue
        yield from _scan(getattr(node, name, None), (name,), seen)


def _cycle(node: Node, parent: Node | None) -> None:
    if get_settings().on_cycle == "raise":
        raise InjectionCycleError(node, parent)
    logger.warning("skipping %s under %s: reference cycle", node.model_type, parent.model_type if parent else None)


def _collect(node: Node, parent: Node | None, stack: set[int], edges: list[tuple[Node, Node | None]]) -> None:
    """Record (node, parent) edges below node without touching any parent."""
    edges.append((node, parent))
    stack.add(id(node))
    try:
        for _, child in iter_children(node):
            if id(child) in stack:
                _cycle(child, node)
                continue
            _collect(child, node, stack, edges)
    finally:
        stack.discard(id(node))


def _chain_into(targets: set[int], parent: Node) -> list[Node] | None:
    """Nodes from parent upwards until one in targets is met, or None if none is."""
    chain: list[Node] = []
    current: Node | None = parent
    while current is not None:
        if id(current) in targets:
            return chain
        chain.append(current)
        current = current.parent
    return None


def _stale_link(chain: list[Node]) -> Node | None:
    """First node in chain whose parent no longer holds it in a field."""
    for link in chain:
        if not any(found is link for _, found in iter_children(link.parent)):
            return link
    return None


def inject(node: Node, parent: Node | None = None) -> None:
    """Set node's parent, then recursively parent every node below it.

    Nodes found at any depth inside lists, tuples, sets or mappings are
    parented to the node owning the field, never to the container. A node
    met again on the way down is a reference cycle and is handled according
    to the on_cycle setting. Cycles are found before any parent is changed.

    When parent's own parent references lead back into the nodes being
    attached, each link is checked against the fields. A link no longer
    backed by a field is stale and gets cleared; if there is none the
    attach is a cycle.
    """
    if parent is not None:
        chain = _chain_into({id(node)}, parent)
        if chain is not None and _stale_link(chain) is None:
            _cycle(node, parent)
            return

    edges: list[tuple[Node, Node | None]] = []
    _collect(node, parent, {id(parent)} if parent is not None else set(), edges)

    stale: Node | None = None
    if parent is not None:
        chain = _chain_into({id(child) for child, _ in edges}, parent)
        if chain is not None:
            stale = _stale_link(chain)
            if stale is None:
                _cycle(node, parent)
                return

    if stale is not None:
        stale._set_parent(None)
    debug = get_settings().debug_dispatch
    for child, owner in edges:
        child._set_parent(owner)
        if debug:
            logger.debug("inject %s under %s", child.model_type, owner.model_type if owner else None)
