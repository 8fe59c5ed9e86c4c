"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from treekit.node import Node


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(tree: Optional[Node]) -> Iterator[list[Node]]:
    level = [tree] if tree is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def _level_count(tree: Optional[Node]) -> int:
    return sum(1 for _ in _levels(tree))


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for None."""
    return max(_level_count(tree) - 1, 0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _walk(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the balance factor: levels on the left minus levels on the right."""
    if tree is None:
        return 0
    return _level_count(tree.left) - _level_count(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _walk(tree)
    )


def _first_leaf_depth(tree: Node) -> int:
    depth = 0
    node = tree
    while not node.is_leaf():
        node = node.left if node.left is not None else node.right
        depth += 1
    return depth


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every inner node has two children and all leaves share a level."""
    if tree is None:
        return False
    leaf_depth = _first_leaf_depth(tree)
    for level, nodes in enumerate(_levels(tree)):
        for node in nodes:
            if node.is_leaf():
                if level != leaf_depth:
                    return False
            elif node.left is None or node.right is None:
                return False
    return True


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except possibly the last, packed left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True