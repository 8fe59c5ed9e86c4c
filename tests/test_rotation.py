from treekit.node import Node
from treekit.rotation import rotate_left, rotate_right
from treekit.traversal import inorder, preorder


def _right_chain():
    root = Node(98)
    root.right = Node(128, root)
    root.right.right = Node(402, root.right)
    return root


def _left_chain():
    root = Node(98)
    root.left = Node(64, root)
    root.left.left = Node(32, root.left)
    return root


def _bushy():
    root = Node(50)
    a = root.insert_left(20)
    b = root.insert_right(80)
    a.insert_left(10)
    a.insert_right(30)
    b.insert_left(70)
    b.insert_right(90)
    return root


def _links_consistent(root):
    assert root.parent is None
    stack = [root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
                stack.append(child)


def test_rotate_left_on_chain():
    root = _right_chain()
    pivot = root.right
    new_root = rotate_left(root)
    assert new_root is pivot
    assert new_root.left is root
    assert new_root.right.value == 402
    _links_consistent(new_root)


def test_rotate_right_on_chain():
    root = _left_chain()
    pivot = root.left
    new_root = rotate_right(root)
    assert new_root is pivot
    assert new_root.right is root
    assert new_root.left.value == 32
    _links_consistent(new_root)


def test_rotate_left_preserves_inorder_and_moves_inner_subtree():
    root = _bushy()
    before = list(inorder(root))
    inner = root.right.left
    new_root = rotate_left(root)
    assert list(inorder(new_root)) == before
    assert root.right is inner
    assert inner.parent is root
    _links_consistent(new_root)


def test_rotate_right_preserves_inorder_and_moves_inner_subtree():
    root = _bushy()
    before = list(inorder(root))
    inner = root.left.right
    new_root = rotate_right(root)
    assert list(inorder(new_root)) == before
    assert root.left is inner
    assert inner.parent is root
    _links_consistent(new_root)


def test_rotations_are_inverse():
    root = _bushy()
    before = list(preorder(root))
    restored = rotate_right(rotate_left(root))
    assert restored is root
    assert list(preorder(restored)) == before
    _links_consistent(restored)


def test_rotating_subtree_updates_parent_child_link():
    root = _bushy()
    old = root.left
    new_sub = rotate_left(old)
    assert root.left is new_sub
    assert new_sub.parent is root
    _links_consistent(root)

    right_old = root.right
    new_right = rotate_right(right_old)
    assert root.right is new_right
    assert new_right.parent is root
    _links_consistent(root)


def test_rotate_without_needed_child_returns_none():
    root = _left_chain()
    assert rotate_left(root) is None
    assert root.left.value == 64
    other = _right_chain()
    assert rotate_right(other) is None
    assert other.right.value == 128


def test_rotate_none_returns_none():
    assert rotate_left(None) is None
    assert rotate_right(None) is None