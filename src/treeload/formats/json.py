"""JSON format adapter.

Objects become children keyed by their member names, duplicated names
included, and arrays become children with empty keys. Scalars are stored as
their text: numbers verbatim, ``true``, ``false`` and ``null`` as words.

When writing, a node whose children all have empty keys is written as an
array, any other node with children as an object and leaves as strings.
"""

import json

from ..errors import TreeParseError, TreeSerializeError
from ..tree import Tree
from .base import FormatAdapter

__all__ = ["JsonAdapter"]

INDENT = " " * 4


class _JsonObject(list):
    """List of (name, value) pairs decoded from one JSON object."""


class JsonAdapter(FormatAdapter):
    """Reads and writes JSON documents."""

    name = "json"
    extensions = (".json",)

    def parse_stream(self, stream) -> Tree:
        try:
            document = json.load(
                stream,
                object_pairs_hook=_JsonObject,
                parse_int=str,
                parse_float=str,
                parse_constant=str,
            )
        except json.JSONDecodeError as exc:
            raise TreeParseError(f"Invalid JSON: {exc}") from exc

        return self.to_tree(document)

    @classmethod
    def to_tree(cls, document) -> Tree:
        """Convert a decoded JSON document into a tree.

        Parameters
        ----------
        document : object
            Output of the decoder (objects as :class:`_JsonObject`)

        Returns
        -------
        Tree
            Converted tree
        """
        if isinstance(document, _JsonObject):
            tree = Tree()
            for key, value in document:
                tree.add_child(key, cls.to_tree(value))
            return tree

        if isinstance(document, list):
            tree = Tree()
            for value in document:
                tree.add_child("", cls.to_tree(value))
            return tree

        if document is True:
            return Tree("true")
        if document is False:
            return Tree("false")
        if document is None:
            return Tree("null")

        return Tree(str(document))

    def write(self, tree: Tree, stream):
        if tree.is_leaf():
            if tree.value:
                raise TreeSerializeError(
                    "The root of a JSON document cannot hold a value: "
                    f"{tree.value!r}"
                )
            stream.write("{}")
            return

        self._write_node(tree, stream, 0)

    def _write_node(self, tree, stream, level):
        """Recursively write one node at a given indentation level."""
        if tree.is_leaf():
            stream.write(json.dumps(tree.value, ensure_ascii=False))
            return

        if tree.value:
            raise TreeSerializeError(
                "A node with children cannot also hold a value in JSON: "
                f"{tree.value!r}"
            )

        is_array = all(key == "" for key in tree.keys())
        opening, closing = ("[", "]") if is_array else ("{", "}")
        pad = INDENT * (level + 1)

        stream.write(opening + "\n")
        for i, (key, child) in enumerate(tree):
            stream.write(pad)
            if not is_array:
                stream.write(json.dumps(key, ensure_ascii=False) + ": ")
            self._write_node(child, stream, level + 1)
            stream.write(",\n" if i < len(tree) - 1 else "\n")
        stream.write(INDENT * level + closing)
