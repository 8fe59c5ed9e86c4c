"""Max binary heaps stored as linked, complete binary trees."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from treekit.node import Node
from treekit.properties import is_complete, size


def _children(node: Node) -> Iterator[Node]:
    return (child for child in (node.left, node.right) if child is not None)


def _is_max_ordered(tree: Node) -> bool:
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in _children(node):
            if node.value <= child.value:
                return False
            stack.append(child)
    return True


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is complete and every parent is strictly greater than its children.

    An empty tree is not considered a heap.
    """
    if tree is None:
        return False
    return is_complete(tree) and _is_max_ordered(tree)


def _sift_up(node: Node) -> Node:
    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return node


def heap_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the heap rooted at ``root``; return the node that ends up holding it.

    With ``root`` None the new node is the root of a new heap.
    """
    if root is None:
        return Node(value)
    # The 1-based level-order position of the new node spells its path:
    # after the leading 1 bit, 0 means left and 1 means right.
    path = bin(size(root) + 1)[3:]
    parent = root
    for step in path[:-1]:
        parent = parent.right if step == "1" else parent.left
    new = Node(value, parent)
    if path[-1] == "1":
        parent.right = new
    else:
        parent.left = new
    return _sift_up(new)


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting ``values`` in order."""
    root: Optional[Node] = None
    for value in values:
        node = heap_insert(root, value)
        if root is None:
            root = node
    return root


def _last_node(root: Node) -> Node:
    level = [root]
    while True:
        below = [child for node in level for child in _children(node)]
        if not below:
            return level[-1]
        level = below


def _sift_down(root: Node) -> None:
    node = root
    while node.left is not None:
        if node.right is None or node.left.value > node.right.value:
            larger = node.left
        else:
            larger = node.right
        if node.value > larger.value:
            break
        node.value, larger.value = larger.value, node.value
        node = larger


def heap_extract(root: Optional[Node]) -> tuple[int, Optional[Node]]:
    """Remove the root value of the heap.

    Returns the extracted value and the root of what remains (None once the
    heap is empty). Raises IndexError if the heap is empty.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    value = root.value
    if root.is_leaf():
        return value, None
    last = _last_node(root)
    root.value = last.value
    parent = last.parent
    if parent.right is last:
        parent.right = None
    else:
        parent.left = None
    last.parent = None
    _sift_down(root)
    return value, root


def heap_to_sorted_array(heap: Optional[Node]) -> list[int]:
    """Empty the heap, returning its values in descending order."""
    result: list[int] = []
    while heap is not None:
        value, heap = heap_extract(heap)
        result.append(value)
    return result