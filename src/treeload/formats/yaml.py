"""YAML format adapter.

The document is read with the PyYAML composer rather than the constructor,
so that the mapping keys are kept as a list of pairs: duplicated keys, which
a dictionary would silently collapse, survive. Mappings become keyed
children, sequences become children with empty keys and scalars keep their
source text. Tags are not interpreted.

Writing goes the other way: a node graph is built from the tree and handed to
the PyYAML serializer.
"""

import yaml

from ..errors import TreeParseError, TreeSerializeError
from ..tree import Tree
from .base import FormatAdapter

__all__ = ["YamlAdapter"]

STR_TAG = "tag:yaml.org,2002:str"
SEQ_TAG = "tag:yaml.org,2002:seq"
MAP_TAG = "tag:yaml.org,2002:map"


class YamlAdapter(FormatAdapter):
    """Reads and writes YAML documents."""

    name = "yaml"
    extensions = (".yaml", ".yml")

    def parse_stream(self, stream) -> Tree:
        try:
            node = yaml.compose(stream, Loader=yaml.SafeLoader)
        except yaml.YAMLError as exc:
            raise TreeParseError(f"Invalid YAML: {exc}") from exc

        if node is None:
            return Tree()

        return self.to_tree(node)

    @classmethod
    def to_tree(cls, node) -> Tree:
        """Convert a composed YAML node into a tree.

        Parameters
        ----------
        node : yaml.Node
            Node produced by the composer

        Returns
        -------
        Tree
            Converted tree
        """
        if isinstance(node, yaml.MappingNode):
            tree = Tree()
            for key_node, value_node in node.value:
                if not isinstance(key_node, yaml.ScalarNode):
                    raise TreeParseError(
                        f"Invalid YAML: mapping keys must be scalars "
                        f"{key_node.start_mark}"
                    )
                tree.add_child(key_node.value, cls.to_tree(value_node))
            return tree

        if isinstance(node, yaml.SequenceNode):
            tree = Tree()
            for item in node.value:
                tree.add_child("", cls.to_tree(item))
            return tree

        return Tree(node.value)

    def write(self, tree: Tree, stream):
        if tree.is_leaf() and not tree.value:
            node = yaml.MappingNode(MAP_TAG, [])
        else:
            node = self.to_node(tree)

        try:
            yaml.serialize(node, stream, Dumper=yaml.SafeDumper, allow_unicode=True)
        except yaml.YAMLError as exc:
            raise TreeSerializeError(f"Cannot write tree as YAML: {exc}") from exc

    @classmethod
    def to_node(cls, tree: Tree):
        """Convert a tree into a YAML node graph.

        Parameters
        ----------
        tree : Tree
            Tree to convert

        Returns
        -------
        yaml.Node
            Root of the node graph
        """
        if tree.is_leaf():
            return yaml.ScalarNode(STR_TAG, tree.value)

        if tree.value:
            raise TreeSerializeError(
                "A node with children cannot also hold a value in YAML: "
                f"{tree.value!r}"
            )

        if all(key == "" for key in tree.keys()):
            return yaml.SequenceNode(
                SEQ_TAG, [cls.to_node(child) for _, child in tree]
            )

        return yaml.MappingNode(
            MAP_TAG,
            [
                (yaml.ScalarNode(STR_TAG, key), cls.to_node(child))
                for key, child in tree
            ],
        )
