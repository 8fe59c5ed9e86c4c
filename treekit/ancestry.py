"""Lowest common ancestor lookup using parent links."""

from __future__ import annotations

from typing import Iterator, Optional

from treekit.node import Node


def _lineage(node: Node) -> Iterator[Node]:
    current: Optional[Node] = node
    while current is not None:
        yield current
        current = current.parent


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes (a node counts as its own).

    Returns None if either node is None or the nodes belong to different trees.
    """
    if first is None or second is None:
        return None
    ancestors = {id(node) for node in _lineage(first)}
    return next((node for node in _lineage(second) if id(node) in ancestors), None)