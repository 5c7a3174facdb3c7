"""Tests for the diagnostics recorder and the framed text blocks."""

import io

import pytest

from treeload.diagnostics import Diagnostics
from treeload.errors import TreeSerializeError
from treeload.formats import FormatAdapter, InfoAdapter
from treeload.report import dump_tree, frame
from treeload.tree import Tree

DELIM = "=" * 80


def test_empty_report():
    """Test that an empty log still renders both delimiters."""
    assert Diagnostics().report() == f"{DELIM}\n{DELIM}\n"


def test_report_lines_in_order():
    """Test that lines are rendered in the order they were recorded."""
    diagnostics = Diagnostics()
    diagnostics.record("Loading: /a")
    diagnostics.record("Path not found: /b")

    assert diagnostics.report() == (
        f"{DELIM}\nLoading: /a\nPath not found: /b\n{DELIM}\n"
    )
    assert list(diagnostics) == ["Loading: /a", "Path not found: /b"]
    assert len(diagnostics) == 2


def test_lines_are_read_only():
    """Test that the exposed lines cannot be used to rewrite the log."""
    diagnostics = Diagnostics()
    diagnostics.record("first")

    lines = diagnostics.lines
    assert isinstance(lines, tuple)

    diagnostics.record("second")
    assert lines == ("first",)
    assert diagnostics.lines == ("first", "second")


def test_frame():
    """Test the framing of an arbitrary block of text."""
    assert frame("body\n") == f"{DELIM}\nbody\n{DELIM}\n"
    assert len(frame("").splitlines()[0]) == 80


def test_dump_tree():
    """Test that the dump frames the adapter output with a newline."""
    tree = Tree()
    tree.add("k", "v")

    assert dump_tree(tree, InfoAdapter()) == f"{DELIM}\nk v\n\n{DELIM}\n"


class FailingAdapter(FormatAdapter):
    """Adapter which cannot write anything."""

    name = "failing"

    def write(self, tree, stream):
        raise ValueError("cannot write")


def test_dump_tree_error():
    """Test that serialization errors are raised as such."""
    with pytest.raises(TreeSerializeError, match="cannot write"):
        dump_tree(Tree(), FailingAdapter())


def test_serialize_to_stream():
    """Test that adapters write to any text stream."""
    stream = io.StringIO()
    InfoAdapter().serialize(Tree(children=[("a", Tree("1"))]), stream)

    assert stream.getvalue() == "a 1\n"
