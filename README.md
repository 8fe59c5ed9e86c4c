# treekit

Linked binary trees in plain Python. Each node knows its parent and its
children. The package provides traversals, structural checks, rotations,
and three ordered trees built on the nodes: binary search trees, AVL trees
and max binary heaps.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Nodes

`treekit.node.Node(value, parent=None)` holds an integer `value` and the
links `parent`, `left` and `right`.

```python
from treekit.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)

left.depth()        # 1
left.sibling()      # the node holding 402
left.right.uncle()  # the node holding 402
right.is_leaf()     # True
root.is_root()      # True
```

- `insert_left` and `insert_right` return the new node. If the parent
  already had a child on that side, that child moves one level down and
  becomes the new node's child on the same side.
- `delete` detaches the node from its parent and clears every link in its
  subtree.
- `sibling` and `uncle` return `None` when no such node exists.

## Traversals and printing

`treekit.traversal` has `preorder`, `inorder`, `postorder` and `levelorder`.
Each is a generator of node values. Each yields nothing for `None`.

```python
from treekit.traversal import inorder, levelorder
from treekit.printing import print_tree, render

list(inorder(root))     # [12, 54, 98, 402]
list(levelorder(root))  # [98, 12, 402, 54]
print_tree(root)
```

`render(tree)` returns the drawing as a string, one line per level, and
each line ends in a newline. `print_tree(tree, file=None)` writes that
string to `file`, which is standard output by default. Each value is drawn
as three zero-padded digits in parentheses, for example `(098)`. An empty
tree renders as the empty string.

## Measuring a tree

`treekit.properties`:

- `height(tree)` counts the edges on the longest downward path. It is 0 for
  a single node and 0 for `None`.
- `size(tree)` counts all nodes.
- `leaves(tree)` counts the nodes without children.
- `internal_nodes(tree)` counts the nodes with at least one child.
- `balance(tree)` is the height of the left subtree minus the height of the
  right subtree, counted in levels. It is 0 for `None`.
- `is_full(tree)` is true when every node has zero or two children.
- `is_perfect(tree)` is true when the tree is full and all leaves are on
  the same level.
- `is_complete(tree)` is true when every level is filled except possibly
  the last, and the last is packed to the left.

The four `is_*` checks return `False` for `None`.

`treekit.ancestry.lowest_common_ancestor(first, second)` returns the
deepest node that is an ancestor of both nodes, where a node counts as its
own ancestor. It returns `None` if either node is `None` or the two nodes
are in different trees.

`treekit.rotation.rotate_left(tree)` and `rotate_right(tree)` rotate around
`tree` and return the new subtree root. They update the parent's link to
the subtree. They return `None` if the needed child is missing.

## Binary search trees

`treekit.bst`:

- `bst_insert(root, value)` returns the new node, or a new root when
  `root` is `None`. It raises `ValueError` if the value is already present.
- `array_to_bst(values)` inserts the values in order and skips repeats.
- `bst_search(tree, value)` returns the matching node or `None`.
- `bst_remove(root, value)` returns the new root. A node with two children
  takes the value of its in-order successor, and the successor is removed
  instead. It raises `KeyError` if the value is absent.
- `is_bst(tree)` requires strictly ordered, unique values.

```python
from treekit.bst import array_to_bst, bst_search, bst_remove

bst = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
bst_search(bst, 32)
bst = bst_remove(bst, 79)
```

## AVL trees

`treekit.avl`:

- `avl_insert(root, value)` returns the new root after rebalancing. It
  raises `ValueError` on a duplicate.
- `array_to_avl(values)` inserts the values in order and skips repeats.
- `avl_remove(root, value)` removes the value if it is present, then
  rebalances, and returns the new root.
- `sorted_array_to_avl(values)` builds a tree from a sorted sequence. It
  takes the middle element as the root, or the lower middle when the length
  is even.
- `is_avl(tree)` checks the binary search tree order and that every node's
  balance is within ±1.

```python
from treekit.avl import array_to_avl, sorted_array_to_avl, is_avl

avl = array_to_avl([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
is_avl(avl)                               # True
is_avl(sorted_array_to_avl([1, 2, 3, 4])) # True
```

## Max heaps

`treekit.heap` keeps a max heap as a linked, complete binary tree:

- `heap_insert(root, value)` adds the value at the next free position and
  sifts it up. It returns the node that ends up holding the value, or a new
  root when `root` is `None`.
- `array_to_heap(values)` inserts the values in order.
- `heap_extract(root)` returns a pair `(value, new_root)`. `new_root` is
  `None` once the heap is empty. It raises `IndexError` on an empty heap.
- `heap_to_sorted_array(heap)` empties the heap and returns its values in
  descending order.
- `is_heap(tree)` requires a complete tree in which each parent is strictly
  greater than its children.

```python
from treekit.heap import array_to_heap, heap_extract, heap_to_sorted_array

heap = array_to_heap([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
top, heap = heap_extract(heap)    # top == 91
heap_to_sorted_array(heap)        # remaining values, largest first
```

## What it does not do

treekit is only a library:

- It has no command-line program.
- It does not save or load trees.
- Nodes hold integers, and the trees are not thread-safe.