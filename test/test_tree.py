"""Tests for the generic tree data model."""

import pytest

from treeload.tree import Tree


def test_add_child_keeps_duplicates_in_order():
    """Test that adding a child never replaces an existing one."""
    tree = Tree()
    tree.add("a", "1")
    tree.add("b", "2")
    tree.add("a", "3")

    assert tree.keys() == ["a", "b", "a"]
    assert [child.value for child in tree.get_all("a")] == ["1", "3"]
    assert tree.count("a") == 2
    assert len(tree) == 3


def test_add_child_returns_node():
    """Test that the appended node is returned, empty if not provided."""
    tree = Tree()
    server = tree.add_child("server")
    server.add("port", "8080")

    assert tree.get("server.port") == "8080"
    assert server.value == ""


def test_add_child_rejects_non_trees():
    """Test that only trees can be added as children."""
    with pytest.raises(TypeError):
        Tree().add_child("a", "not a tree")


def test_get_paths():
    """Test the lookup of values along dotted paths."""
    tree = Tree(children=[("X", Tree(children=[("y", Tree("1"))]))])
    tree.add("X", "second")

    assert tree.get("X.y") == "1"
    assert tree.get_child("X") is tree.get_all("X")[0]
    assert tree.get("X.z") is None
    assert tree.get("X.z", "default") == "default"
    assert tree.get_child("missing") is None


def test_equality_and_copy():
    """Test that equality is structural and that copies are independent."""
    tree = Tree(children=[("a", Tree("1")), ("b", Tree(children=[("c", Tree())]))])
    other = tree.copy()

    assert tree == other
    assert tree != Tree()

    other.get_child("b").add("d", "2")
    assert tree != other
    assert tree.get_child("b.d") is None


def test_order_matters_for_equality():
    """Test that two trees with the same children in another order differ."""
    first = Tree(children=[("a", Tree("1")), ("b", Tree("2"))])
    second = Tree(children=[("b", Tree("2")), ("a", Tree("1"))])

    assert first != second


def test_to_python():
    """Test the conversion of a tree to builtin objects."""
    tree = Tree()
    tree.add("IncludeFile", "b")
    tree.add("z", "2")
    tree.add_child("X").add("y", "1")
    tree.add_child("mixed", Tree("text")).add("k", "v")

    assert tree.to_python() == [
        ("IncludeFile", "b"),
        ("z", "2"),
        ("X", [("y", "1")]),
        ("mixed", ("text", [("k", "v")])),
    ]


def test_iteration_and_items():
    """Test that iterating yields (key, child) pairs in order."""
    tree = Tree()
    tree.add("a", "1")
    tree.add("b", "2")

    assert [(key, child.value) for key, child in tree] == [("a", "1"), ("b", "2")]

    items = tree.items()
    items.clear()
    assert len(tree) == 2
    assert repr(Tree("v")) == "Tree('v')"
