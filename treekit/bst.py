"""Binary search tree checks, insertion, lookup and removal."""

from __future__ import annotations

from typing import Iterable, Optional

from treekit.node import Node


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a binary search tree with strictly ordered, unique values.

    An empty tree is not considered a binary search tree.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def bst_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the tree rooted at ``root`` and return the new node.

    With ``root`` None the new node is the root of a new tree.
    Raises ValueError if the value is already present.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value, node)
                return node.left
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value, node)
                return node.right
            node = node.right
        else:
            raise ValueError(f"value {value} is already in the tree")


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a binary search tree by inserting ``values`` in order, skipping repeats."""
    root: Optional[Node] = None
    seen: set[int] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        node = bst_insert(root, value)
        if root is None:
            root = node
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value``, or None if it is absent."""
    node = tree
    while node is not None:
        if node.value == value:
            return node
        node = node.left if value < node.value else node.right
    return None


def _minimum(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(root: Node, node: Node) -> Optional[Node]:
    if node.left is not None and node.right is not None:
        successor = _minimum(node.right)
        node.value = successor.value
        return _delete(root, successor)
    child = node.right if node.left is None else node.left
    parent = node.parent
    if parent is not None:
        if parent.left is node:
            parent.left = child
        else:
            parent.right = child
    if child is not None:
        child.parent = parent
    node.parent = node.left = node.right = None
    return child if parent is None else root


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the tree and return the new root.

    A node with two children takes the value of its in-order successor,
    which is removed in its place. Raises KeyError if the value is absent.
    """
    node = bst_search(root, value)
    if root is None or node is None:
        raise KeyError(value)
    return _delete(root, node)