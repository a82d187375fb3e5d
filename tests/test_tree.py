import pytest

from ntree.tree import GenericTree, TreeError, TreeNode


def _example_tree():
    tree = GenericTree("A")
    a = tree.root
    b = a.add_child("B")
    b.add_child("C")
    b.add_child("D")
    e = a.add_child("E")
    e.add_child("F")
    e.add_child("G")
    return tree


def _data(nodes):
    return [None if n is None else n.data for n in nodes]


def test_empty_tree_has_no_root():
    tree = GenericTree()
    assert tree.root is None


def test_constructor_creates_root():
    tree = GenericTree(9999)
    assert tree.root.data == 9999
    assert tree.root.parent is None
    assert tree.root.children == []


def test_constructor_rejects_extra_values():
    with pytest.raises(TypeError):
        GenericTree(1, 2)


def test_create_root_twice_raises():
    tree = GenericTree("X")
    with pytest.raises(TreeError, match="root already exists"):
        tree.create_root("Y")


def test_create_root_returns_root():
    tree = GenericTree()
    node = tree.create_root("A")
    assert node is tree.root
    assert node.data == "A"


def test_add_child_links_parent_and_order():
    node = TreeNode("A")
    b = node.add_child("B")
    c = node.add_child("C")
    assert b.parent is node
    assert c.parent is node
    assert node.children == [b, c]


def test_add_child_chaining():
    tree = GenericTree("A")
    c = tree.root.add_child("B").add_child("C")
    assert c.parent.data == "B"
    assert c.parent.parent is tree.root


def test_delete_subtree_leaves_empty_slot():
    tree = _example_tree()
    b = tree.root.children[0]
    tree.delete_subtree(b)
    assert _data(tree.root.children) == [None, "E"]
    assert b.parent is None
    assert b.children == []


def test_delete_none_does_nothing():
    tree = _example_tree()
    tree.delete_subtree(None)
    assert _data(tree.root.children) == ["B", "E"]


def test_delete_root_empties_tree():
    tree = _example_tree()
    tree.delete_subtree(tree.root)
    assert tree.root is None


def test_delete_from_different_tree_raises():
    tree = _example_tree()
    other = _example_tree()
    with pytest.raises(TreeError, match="different tree"):
        tree.delete_subtree(other.root.children[0])


def test_delete_from_empty_tree_raises():
    tree = GenericTree()
    stray = TreeNode("Z")
    with pytest.raises(TreeError):
        tree.delete_subtree(stray)


def test_compress_removes_empty_slots():
    tree = GenericTree("A")
    a = tree.root
    a.add_child("B")
    d = a.add_child("D")
    d.add_child("E")
    d.add_child("I")
    k = a.add_child("K")
    l_node = k.add_child("L")
    tree.delete_subtree(d)
    tree.delete_subtree(l_node)
    assert _data(a.children) == ["B", None, "K"]
    assert _data(k.children) == [None]
    tree.compress()
    assert _data(a.children) == ["B", "K"]
    assert k.children == []


def test_compress_empty_tree_is_noop():
    tree = GenericTree()
    tree.compress()
    assert tree.root is None


def test_compress_keeps_full_tree_unchanged():
    tree = _example_tree()
    tree.compress()
    assert _data(tree.root.children) == ["B", "E"]
    assert _data(tree.root.children[1].children) == ["F", "G"]


def test_clear_then_recreate():
    tree = GenericTree("X")
    tree.clear()
    assert tree.root is None
    tree.create_root("A")
    assert tree.root.data == "A"


def test_debug_messages_delete_children_before_parents(capsys):
    tree = _example_tree()
    tree.show_debug_messages = True
    tree.clear()
    lines = capsys.readouterr().err.splitlines()
    explored = [ln.split(": ")[1] for ln in lines if ln.startswith("Exploring node: ")]
    deleted = [ln.split(": ")[1] for ln in lines if ln.startswith("Deleting node: ")]
    assert sorted(explored) == list("ABCDEFG")
    assert sorted(deleted) == list("ABCDEFG")
    assert deleted[-1] == "A"
    for child, parent in [("B", "A"), ("E", "A"), ("C", "B"), ("D", "B"),
                          ("F", "E"), ("G", "E")]:
        assert deleted.index(child) < deleted.index(parent)


def test_debug_messages_report_null_slots(capsys):
    tree = _example_tree()
    tree.delete_subtree(tree.root.children[0])
    tree.show_debug_messages = True
    tree.clear()
    err = capsys.readouterr().err
    assert "Exploring node: [null]" in err


def test_no_debug_output_by_default(capsys):
    tree = _example_tree()
    tree.clear()
    assert capsys.readouterr().err == ""