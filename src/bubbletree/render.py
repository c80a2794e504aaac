"""Render an injected node tree for debugging."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from bubbletree.model.node import Node
from bubbletree.model.walk import FieldPath, iter_children


def _label(node: Node, path: FieldPath | None = None) -> Text:
    label = Text()
    if path:
        label.append(".".join(str(part) for part in path), style="cyan")
        label.append(": ")
    label.append(node.model_type, style="bold")
    count = len(node.listeners)
    if count:
        label.append(f" ({count} listener{'s' if count != 1 else ''})", style="dim")
    if node.parent is None:
        label.append(" [root]", style="yellow")
    return label


def _add_children(tree: Tree, node: Node, seen: frozenset[int]) -> None:
    for path, child in iter_children(node):
        label = _label(child, path)
        if id(child) in seen:
            label.append(" (cycle)", style="red")
            tree.add(label)
            continue
        if child.parent is not node:
            label.append(" (not injected)", style="red")
        _add_children(tree.add(label), child, seen | {id(child)})


def render_tree(node: Node) -> Tree:
    """Build a rich Tree of node and every node reachable through its fields.

    Children whose parent reference does not point back at their owner
    are flagged, which shows where inject() has not been called.
    """
    tree = Tree(_label(node))
    _add_children(tree, node, frozenset({id(node)}))
    return tree


def print_tree(node: Node, console: Console | None = None) -> None:
    (console or Console()).print(render_tree(node))
