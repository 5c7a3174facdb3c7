"""Tests for the INFO format adapter."""

import io

import pytest

from treeload.errors import TreeParseError
from treeload.formats import InfoAdapter
from treeload.tree import Tree

DOCUMENT = r"""; comment until the end of the line
IncludeFile common.info
server
{
    host "example.org"      ; quoted strings accept C escapes
    port 8080
    motd "first line\n" \
         "second line"
    path C:\data
}
empty { }
X { y 1 }
"quoted key" "tab\there"
flag
"""


def write(tree):
    """Serialize a tree to a string with the INFO adapter."""
    stream = io.StringIO()
    InfoAdapter().serialize(tree, stream)

    return stream.getvalue()


def test_parse_document():
    """Test the parsing of a document using every construct."""
    tree = InfoAdapter().parse_string(DOCUMENT)

    assert tree.keys() == ["IncludeFile", "server", "empty", "X", "quoted key", "flag"]
    assert tree.get("IncludeFile") == "common.info"
    assert tree.get("server.host") == "example.org"
    assert tree.get("server.port") == "8080"
    assert tree.get("server.motd") == "first line\nsecond line"
    assert tree.get("server.path") == "C:\\data"
    assert tree.get_child("empty") == Tree()
    assert tree.get("X.y") == "1"
    assert tree.get("quoted key") == "tab\there"
    assert tree.get("flag") == ""


def test_parse_file(tmp_path):
    """Test the parsing of a file on disk."""
    path = tmp_path / "a.info"
    path.write_text("a 1\nb\n{\n    c 2\n}\n")

    tree = InfoAdapter().parse(str(path))

    assert tree.to_python() == [("a", "1"), ("b", [("c", "2")])]


def test_value_and_block():
    """Test that a key can hold both a value and a block of children."""
    tree = InfoAdapter().parse_string("key value\n{\n    child 1\n}\n")

    assert tree.get("key") == "value"
    assert tree.get("key.child") == "1"


def test_duplicate_keys():
    """Test that duplicated keys are preserved in order."""
    tree = InfoAdapter().parse_string("a 1\na 2\nb 3\na 4\n")

    assert tree.keys() == ["a", "a", "b", "a"]
    assert [child.value for child in tree.get_all("a")] == ["1", "2", "4"]


def test_empty_document():
    """Test that an empty document or comments only give an empty tree."""
    assert InfoAdapter().parse_string("") == Tree()
    assert InfoAdapter().parse_string("; nothing\n\n   ; here\n") == Tree()


@pytest.mark.parametrize(
    "text, message",
    [
        ('a "unterminated\n', "unterminated string"),
        ('a "bad \\q escape"\n', "invalid escape"),
        ("a {\n    b 1\n", "missing '}'"),
        ("a 1\n}\n", "unmatched '}'"),
        ("{\n}\n", "block without a key"),
        ('#include "other.info"\n', "'#include' is not supported"),
        ("a b c\n", "unexpected 'c'"),
        ('a "x" \\\nb\n', "expected a string"),
    ],
)
def test_parse_errors(text, message):
    """Test that malformed documents raise a parse error."""
    with pytest.raises(TreeParseError, match=message):
        InfoAdapter().parse_string(text)


def test_parse_error_names_file(tmp_path):
    """Test that a parse error from a file mentions its path."""
    path = tmp_path / "bad.info"
    path.write_text("a {\n")

    with pytest.raises(TreeParseError, match="bad.info"):
        InfoAdapter().parse(str(path))


def test_write():
    """Test the layout of a written document."""
    tree = Tree()
    tree.add("IncludeFile", "b.info")
    tree.add("z", "2")
    tree.add_child("X").add("y", "1")
    tree.add("text", "two words")
    tree.add("empty", "")
    tree.add("", "anonymous")

    assert write(tree) == (
        "IncludeFile b.info\n"
        "z 2\n"
        "X\n"
        "{\n"
        "    y 1\n"
        "}\n"
        'text "two words"\n'
        'empty ""\n'
        '"" anonymous\n'
    )


def test_write_escapes():
    """Test that special characters are quoted and escaped."""
    tree = Tree()
    tree.add("a", 'say "hi"\n')
    tree.add("b", "C:\\data")
    tree.add("c", "#hash")

    assert write(tree) == 'a "say \\"hi\\"\\n"\nb "C:\\\\data"\nc "#hash"\n'


def test_round_trip():
    """Test that a parsed, written and reparsed document is unchanged."""
    adapter = InfoAdapter()
    tree = adapter.parse_string(DOCUMENT)

    assert adapter.parse_string(write(tree)) == tree
