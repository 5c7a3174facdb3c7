"""Generic, format-agnostic tree of key-value pairs.

A :class:`Tree` node holds a string value and an ordered list of
``(key, child)`` pairs. Keys are not unique: the same key may appear several
times under one node, and the order in which children were added is the
document order. This is the representation every format adapter reads into
and writes from.
"""

from copy import deepcopy
from typing import Iterator, List, Optional, Tuple

from .api import PATH_SEPARATOR

__all__ = ["Tree"]


class Tree:
    """Ordered, multi-valued key-value tree.

    Attributes
    ----------
    value : str
        Data stored at this node
    children : List[Tuple[str, Tree]]
        Ordered list of (key, child) pairs, keys may repeat
    """

    def __init__(self, value: str = "", children=None):
        """Initialize the node.

        Parameters
        ----------
        value : str, default ''
            Data stored at this node
        children : Iterable[Tuple[str, Tree]], optional
            Initial (key, child) pairs
        """
        self.value = value
        self.children: List[Tuple[str, "Tree"]] = []
        if children is not None:
            for key, child in children:
                self.add_child(key, child)

    def add_child(self, key: str, child: Optional["Tree"] = None) -> "Tree":
        """Append a child to this node, never replacing an existing one.

        Parameters
        ----------
        key : str
            Key of the new child (may already exist)
        child : Tree, optional
            Child node. If not provided, an empty node is created

        Returns
        -------
        Tree
            Node which was appended
        """
        if child is None:
            child = Tree()
        elif not isinstance(child, Tree):
            raise TypeError(
                f"Children of a tree must be Tree objects, got {type(child)}"
            )

        self.children.append((key, child))

        return child

    def add(self, key: str, value: str) -> "Tree":
        """Append a leaf holding `value` under `key`.

        Parameters
        ----------
        key : str
            Key of the new child
        value : str
            Value of the new child

        Returns
        -------
        Tree
            Node which was appended
        """
        return self.add_child(key, Tree(value))

    def get_child(self, path: str, default=None):
        """Fetch the first node found along a separated path.

        Parameters
        ----------
        path : str
            Path of keys joined by the path separator (e.g. 'X.y')
        default : object, optional
            Value returned if the path does not exist

        Returns
        -------
        Union[Tree, object]
            Node at the end of the path or `default`
        """
        node = self
        for key in path.split(PATH_SEPARATOR):
            for child_key, child in node.children:
                if child_key == key:
                    node = child
                    break
            else:
                return default

        return node

    def get(self, path: str, default: Optional[str] = None) -> Optional[str]:
        """Fetch the value of the first node found along a separated path.

        Parameters
        ----------
        path : str
            Path of keys joined by the path separator
        default : str, optional
            Value returned if the path does not exist

        Returns
        -------
        str
            Value at the end of the path or `default`
        """
        node = self.get_child(path)
        if node is None:
            return default

        return node.value

    def get_all(self, key: str) -> List["Tree"]:
        """Fetch every direct child stored under `key`, in order."""
        return [child for child_key, child in self.children if child_key == key]

    def count(self, key: str) -> int:
        """Number of direct children stored under `key`."""
        return sum(1 for child_key, _ in self.children if child_key == key)

    def keys(self) -> List[str]:
        """Keys of the direct children, in order, duplicates included."""
        return [key for key, _ in self.children]

    def items(self) -> List[Tuple[str, "Tree"]]:
        """Copy of the list of (key, child) pairs."""
        return list(self.children)

    def copy(self) -> "Tree":
        """Returns an independent, deep copy of the tree."""
        return deepcopy(self)

    def to_python(self):
        """Convert the tree into nested builtin objects.

        Leaves become their value, other nodes become a list of
        ``(key, converted child)`` tuples. If a node holds both a value and
        children, it becomes a ``(value, [pairs])`` tuple.

        Returns
        -------
        Union[str, list, tuple]
            Builtin representation of the tree
        """
        if not self.children:
            return self.value

        pairs = [(key, child.to_python()) for key, child in self.children]
        if self.value:
            return (self.value, pairs)

        return pairs

    def is_leaf(self) -> bool:
        """Whether the node has no children."""
        return not self.children

    def __iter__(self) -> Iterator[Tuple[str, "Tree"]]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented

        return self.value == other.value and self.children == other.children

    def __repr__(self) -> str:
        if not self.children:
            return f"Tree({self.value!r})"

        return f"Tree({self.value!r}, {self.children!r})"
