"""Linked binary trees with traversals, checks, rotations, search trees, AVL trees and max heaps."""

__version__ = "0.1.0"

__all__ = [
    "node",
    "traversal",
    "printing",
    "properties",
    "ancestry",
    "rotation",
    "bst",
    "avl",
    "heap",
]