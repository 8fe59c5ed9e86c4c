"""Left and right rotations that keep parent links consistent."""

from __future__ import annotations

from typing import Optional

from treekit.node import Node


def _replace_in_parent(parent: Optional[Node], old: Node, new: Node) -> None:
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate left around ``tree`` and return the new subtree root.

    Returns None if ``tree`` is None or has no right child.
    """
    if tree is None or tree.right is None:
        return None
    pivot = tree.right
    inner = pivot.left
    pivot.left = tree
    tree.right = inner
    if inner is not None:
        inner.parent = tree
    parent = tree.parent
    tree.parent = pivot
    pivot.parent = parent
    _replace_in_parent(parent, tree, pivot)
    return pivot


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate right around ``tree`` and return the new subtree root.

    Returns None if ``tree`` is None or has no left child.
    """
    if tree is None or tree.left is None:
        return None
    pivot = tree.left
    inner = pivot.right
    pivot.right = tree
    tree.left = inner
    if inner is not None:
        inner.parent = tree
    parent = tree.parent
    tree.parent = pivot
    pivot.parent = parent
    _replace_in_parent(parent, tree, pivot)
    return pivot