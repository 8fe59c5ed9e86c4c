"""AVL tree checks, insertion, removal and construction."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from treekit.bst import bst_remove, bst_search, is_bst
from treekit.node import Node
from treekit.properties import balance
from treekit.rotation import rotate_left, rotate_right


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a binary search tree whose every node is height balanced.

    An empty tree is not considered an AVL tree.
    """
    if not is_bst(tree):
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        if abs(balance(node)) > 1:
            return False
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return True


def _insert(node: Optional[Node], parent: Optional[Node], value: int) -> tuple[Node, Node]:
    if node is None:
        new = Node(value, parent)
        return new, new
    if value < node.value:
        node.left, new = _insert(node.left, node, value)
    elif value > node.value:
        node.right, new = _insert(node.right, node, value)
    else:
        raise ValueError(f"value {value} is already in the tree")

    factor = balance(node)
    if factor > 1 and value < node.left.value:
        node = rotate_right(node)
    elif factor < -1 and value > node.right.value:
        node = rotate_left(node)
    elif factor > 1 and value > node.left.value:
        node.left = rotate_left(node.left)
        node = rotate_right(node)
    elif factor < -1 and value < node.right.value:
        node.right = rotate_right(node.right)
        node = rotate_left(node)
    return node, new


def avl_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the AVL tree, rebalancing on the way up; return the new root.

    Raises ValueError if the value is already present.
    """
    new_root, _ = _insert(root, None, value)
    return new_root


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting ``values`` in order, skipping repeats."""
    root: Optional[Node] = None
    seen: set[int] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        root = avl_insert(root, value)
    return root


def _rebalance(node: Optional[Node]) -> Optional[Node]:
    if node is None or node.is_leaf():
        return node
    node.left = _rebalance(node.left)
    node.right = _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        return rotate_right(node)
    if factor < -1:
        return rotate_left(node)
    return node


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the AVL tree, rebalance, and return the new root.

    A value that is not present leaves the tree's contents unchanged.
    """
    if root is None:
        return None
    if bst_search(root, value) is not None:
        root = bst_remove(root, value)
    return _rebalance(root)


def _build(values: Sequence[int], low: int, high: int, parent: Optional[Node]) -> Optional[Node]:
    if low >= high:
        return None
    middle = low + (high - low - 1) // 2
    node = Node(values[middle], parent)
    node.left = _build(values, low, middle, node)
    node.right = _build(values, middle + 1, high, node)
    return node


def sorted_array_to_avl(values: Sequence[int]) -> Optional[Node]:
    """Build an AVL tree from sorted ``values`` by taking middles (lower middle for even sizes)."""
    return _build(values, 0, len(values), None)