"""Serializers rendering the converter's tree models as text."""

import json
import logging
from typing import List, Optional, assert_never
from lxml import etree
from ..types import SerializationError
from ..models import (
    JsonNull,
    JsonBool,
    JsonNumber,
    JsonString,
    JsonObject,
    JsonArray,
    Value,
    XmlNode,
)

DEFAULT_INDENT = 4


class JSONSerializer:
    """
    Renders a Value tree as JSON text.

    The layout matches ``json.dumps(..., indent=n, ensure_ascii=False)``.
    Pairs are written in their stored order, repeated keys included, and
    ``Decimal`` numbers keep the digits they were parsed with.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def serialize(self, value: Value, indent: int = DEFAULT_INDENT) -> str:
        """
        Render a Value as JSON text.

        Args:
            value: Value tree to render
            indent: Spaces per nesting level

        Returns:
            JSON text

        Raises:
            SerializationError: If the tree cannot be rendered
        """
        try:
            return self._encode(value, indent, 0)
        except RecursionError as e:
            raise SerializationError("JSON serialization failed: nesting is too deep") from e

    def _encode(self, value: Value, indent: int, level: int) -> str:
        if isinstance(value, JsonNull):
            return "null"
        elif isinstance(value, JsonBool):
            return value.text
        elif isinstance(value, JsonNumber):
            return value.text
        elif isinstance(value, JsonString):
            return json.dumps(value.value, ensure_ascii=False)
        elif isinstance(value, JsonObject):
            if not value.pairs:
                return "{}"
            members = [
                f"{json.dumps(key, ensure_ascii=False)}: {self._encode(item, indent, level + 1)}"
                for key, item in value.pairs
            ]
            return self._block("{", members, "}", indent, level)
        elif isinstance(value, JsonArray):
            if not value.items:
                return "[]"
            members = [self._encode(item, indent, level + 1) for item in value.items]
            return self._block("[", members, "]", indent, level)
        else:
            assert_never(value)

    def _block(self, opener: str, members: List[str], closer: str, indent: int, level: int) -> str:
        inner = "\n" + " " * (indent * (level + 1))
        outer = "\n" + " " * (indent * level)
        return opener + inner + ("," + inner).join(members) + outer + closer


class XMLSerializer:
    """
    Renders an XmlNode tree as an XML document using lxml.

    Output carries an XML declaration, is UTF-8 and is pretty printed with
    the requested number of spaces per level.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def serialize(self, node: XmlNode, indent: int = DEFAULT_INDENT) -> str:
        """
        Render an XmlNode as XML text.

        Args:
            node: Document element
            indent: Spaces per nesting level

        Returns:
            XML document text

        Raises:
            SerializationError: If a name or text cannot be written as XML
        """
        try:
            root = self.to_element(node)
            etree.indent(root, space=" " * indent)
            xml_bytes = etree.tostring(
                root,
                encoding="UTF-8",
                xml_declaration=True,
                pretty_print=True
            )
        except ValueError as e:
            raise SerializationError(f"XML serialization failed: {e}") from e

        return xml_bytes.decode("utf-8")

    def to_element(self, node: XmlNode) -> etree._Element:
        """Build the lxml element tree for ``node``, parents before children."""
        root = etree.Element(node.name, dict(node.attributes))
        stack = [(node, root)]

        while stack:
            current, element = stack.pop()
            last_child = None
            for child in current.children:
                if isinstance(child, XmlNode):
                    last_child = etree.SubElement(element, child.name, dict(child.attributes))
                    stack.append((child, last_child))
                elif last_child is None:
                    element.text = (element.text or "") + child
                else:
                    last_child.tail = (last_child.tail or "") + child

        return root
