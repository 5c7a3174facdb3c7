"""Interface shared by every format adapter."""

from io import StringIO

from ..errors import TreeParseError, TreeSerializeError
from ..tree import Tree

__all__ = ["FormatAdapter"]


class FormatAdapter:
    """Parse files of one text format into a :class:`Tree` and back.

    Subclasses implement :meth:`parse_stream` and :meth:`write`. The public
    :meth:`parse` and :meth:`serialize` methods take care of opening the file
    and of converting any failure into the package exceptions.

    Attributes
    ----------
    name : str
        Name of the format
    extensions : Tuple[str]
        File extensions (with leading dot) associated with the format
    """

    name = None
    extensions = ()

    def parse(self, path: str) -> Tree:
        """Parse the file at `path` into a new tree.

        Parameters
        ----------
        path : str
            Path to the file to parse

        Returns
        -------
        Tree
            Tree holding the file content

        Raises
        ------
        TreeParseError
            If the file cannot be read or is malformed
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                return self.parse_stream(f)
        except TreeParseError as exc:
            raise TreeParseError(f"{path}: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise TreeParseError(f"Cannot read {path}: {exc}") from exc

    def parse_string(self, text: str) -> Tree:
        """Parse a string holding a document of this format.

        Parameters
        ----------
        text : str
            Document to parse

        Returns
        -------
        Tree
            Tree holding the document content
        """
        return self.parse_stream(StringIO(text))

    def serialize(self, tree: Tree, stream):
        """Write a tree to a text stream.

        Parameters
        ----------
        tree : Tree
            Tree to write
        stream : TextIO
            Output stream

        Raises
        ------
        TreeSerializeError
            If the tree cannot be represented in this format
        """
        try:
            self.write(tree, stream)
        except TreeSerializeError:
            raise
        except (OSError, ValueError, TypeError) as exc:
            raise TreeSerializeError(
                f"Cannot write tree as {self.name}: {exc}"
            ) from exc

    def parse_stream(self, stream) -> Tree:
        """Parse an open text stream. Must raise :class:`TreeParseError`."""
        raise NotImplementedError

    def write(self, tree: Tree, stream):
        """Write `tree` to an open text stream."""
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"
