from treekit.ancestry import lowest_common_ancestor
from treekit.node import Node


def _tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_siblings_share_parent():
    root = _tree()
    assert lowest_common_ancestor(root.left.left, root.left.right) is root.left


def test_nodes_in_different_subtrees_meet_at_root():
    root = _tree()
    assert lowest_common_ancestor(root.left.right, root.right.left) is root


def test_nodes_at_different_depths():
    root = _tree()
    deep = root.right.right.left
    assert lowest_common_ancestor(root.right.left, deep) is root.right
    assert lowest_common_ancestor(deep, root.right.left) is root.right


def test_ancestor_of_node_and_its_descendant_is_the_ancestor():
    root = _tree()
    assert lowest_common_ancestor(root.right, root.right.right.right) is root.right
    assert lowest_common_ancestor(root.right.right.right, root.right) is root.right


def test_same_node_is_its_own_ancestor():
    root = _tree()
    assert lowest_common_ancestor(root.left, root.left) is root.left


def test_none_argument_gives_none():
    root = _tree()
    assert lowest_common_ancestor(None, root) is None
    assert lowest_common_ancestor(root, None) is None


def test_separate_trees_have_no_common_ancestor():
    root = _tree()
    other = Node(1)
    other.insert_left(2)
    assert lowest_common_ancestor(root.left, other.left) is None


def test_result_is_symmetric_for_all_pairs():
    root = _tree()
    nodes = [root, root.left, root.right, root.left.left, root.right.right.left]
    for a in nodes:
        for b in nodes:
            assert lowest_common_ancestor(a, b) is lowest_common_ancestor(b, a)