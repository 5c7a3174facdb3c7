"""Rendering of framed text blocks for inspection.

Both the diagnostics report and the tree dump are wrapped between two lines
made of the same delimiter character, so that they can be told apart when
printed one after the other.
"""

import io

from .api import DELIMITER, FRAME_WIDTH

__all__ = ["frame", "dump_tree"]


def delimiter_line() -> str:
    """Line used to open and close a framed block (no newline)."""
    return DELIMITER * FRAME_WIDTH


def frame(body: str) -> str:
    """Wrap a block of text between two delimiter lines.

    Parameters
    ----------
    body : str
        Text to wrap. It should end with a newline if not empty

    Returns
    -------
    str
        Framed text, ending with a newline
    """
    delim = delimiter_line()

    return f"{delim}\n{body}{delim}\n"


def dump_tree(tree, adapter) -> str:
    """Serialize a tree with a format adapter and frame the output.

    This does not modify the tree. Serialization errors are not caught.

    Parameters
    ----------
    tree : Tree
        Tree to render
    adapter : FormatAdapter
        Adapter used to serialize the tree

    Returns
    -------
    str
        Framed serialized tree

    Raises
    ------
    TreeSerializeError
        If the adapter cannot write the tree
    """
    stream = io.StringIO()
    adapter.serialize(tree, stream)

    return frame(stream.getvalue() + "\n")
