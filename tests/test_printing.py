import io

from treekit.node import Node
from treekit.printing import print_tree, render


def test_render_full_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    assert render(root) == (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )


def test_render_after_insert_left():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    assert render(root) == "  .--(098)--.\n(012)     (402)\n"
    root.right.insert_left(128)
    root.insert_left(54)
    assert render(root) == (
        "       .--(098)-------.\n"
        "  .--(054)       .--(402)\n"
        "(012)          (128)\n"
    )


def test_render_after_insert_right():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    assert render(root) == (
        "  .-------(098)--.\n"
        "(012)--.       (128)--.\n"
        "     (054)          (402)\n"
    )


def test_render_single_node():
    assert render(Node(7)) == "(007)\n"


def test_render_empty():
    assert render(None) == ""


def test_print_tree_writes_to_file():
    root = Node(98)
    root.insert_left(12)
    out = io.StringIO()
    print_tree(root, out)
    assert out.getvalue() == "  .--(098)\n(012)\n"


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(Node(5))
    assert capsys.readouterr().out == "(005)\n"