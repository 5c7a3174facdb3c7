"""XML format adapter.

Every element becomes a child keyed by its tag, with its whitespace-trimmed
text as value. Attributes are gathered under an ``<xmlattr>`` child and
comments are kept as ``<xmlcomment>`` children, in document order. Namespaced
tags are stored in their expanded ``{uri}tag`` form.

A document may hold several top-level elements, which is what allows an
include directive to sit next to other content::

    <?xml version="1.0" encoding="utf-8"?>
    <IncludeFile>common.xml</IncludeFile>
    <server><port>8080</port></server>
"""

import re
import xml.etree.ElementTree as ET

from ..errors import TreeParseError, TreeSerializeError
from ..tree import Tree
from .base import FormatAdapter

__all__ = ["XmlAdapter", "ATTRIBUTE_KEY", "COMMENT_KEY"]

ATTRIBUTE_KEY = "<xmlattr>"
COMMENT_KEY = "<xmlcomment>"

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'

# Transparent element wrapped around the document to accept several roots
_WRAPPER = "treeload-document"

_PROLOG = re.compile(r"^\s*<\?xml[^>]*\?>")
_NAME = re.compile(r"^(\{[^}]*\})?[A-Za-z_][\w.\-:]*$")


class XmlAdapter(FormatAdapter):
    """Reads and writes XML documents."""

    name = "xml"
    extensions = (".xml",)

    def parse_stream(self, stream) -> Tree:
        text = stream.read().lstrip("\ufeff")
        body = _PROLOG.sub("", text, count=1)

        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        try:
            parser.feed(f"<{_WRAPPER}>{body}</{_WRAPPER}>")
            document = parser.close()
        except ET.ParseError as exc:
            raise TreeParseError(f"Invalid XML: {exc}") from exc

        tree = self.to_tree(document)
        if tree.value:
            raise TreeParseError(
                f"Invalid XML: text outside of any element: {tree.value!r}"
            )

        return tree

    @classmethod
    def to_tree(cls, element) -> Tree:
        """Convert an element and its descendants into a tree.

        Parameters
        ----------
        element : xml.etree.ElementTree.Element
            Element to convert

        Returns
        -------
        Tree
            Converted tree
        """
        text = [element.text or ""]
        text.extend(child.tail or "" for child in element)
        tree = Tree("".join(text).strip())

        if element.attrib:
            attributes = tree.add_child(ATTRIBUTE_KEY)
            for key, value in element.attrib.items():
                attributes.add(key, value)

        for child in element:
            if child.tag is ET.Comment:
                tree.add(COMMENT_KEY, (child.text or "").strip())
            elif isinstance(child.tag, str):
                tree.add_child(child.tag, cls.to_tree(child))

        return tree

    def write(self, tree: Tree, stream):
        if tree.value:
            raise TreeSerializeError(
                f"The root of an XML document cannot hold a value: {tree.value!r}"
            )

        stream.write(XML_DECLARATION + "\n")
        for key, child in tree:
            if key == COMMENT_KEY:
                element = ET.Comment(child.value)
            elif key == ATTRIBUTE_KEY:
                raise TreeSerializeError(
                    "The root of an XML document cannot hold attributes"
                )
            else:
                element = self.to_element(key, child)

            ET.indent(element)
            stream.write(ET.tostring(element, encoding="unicode") + "\n")

    @classmethod
    def to_element(cls, key: str, tree: Tree):
        """Convert a tree node into an element named `key`.

        Parameters
        ----------
        key : str
            Tag of the element
        tree : Tree
            Node to convert

        Returns
        -------
        xml.etree.ElementTree.Element
            Converted element
        """
        if not _NAME.match(key):
            raise TreeSerializeError(f"Key is not a valid XML tag name: {key!r}")

        element = ET.Element(key)
        if tree.value:
            element.text = tree.value

        for child_key, child in tree:
            if child_key == ATTRIBUTE_KEY:
                for name, attribute in child:
                    if not _NAME.match(name):
                        raise TreeSerializeError(
                            f"Key is not a valid XML attribute name: {name!r}"
                        )
                    element.set(name, attribute.value)
            elif child_key == COMMENT_KEY:
                element.append(ET.Comment(child.value))
            else:
                element.append(cls.to_element(child_key, child))

        return element
