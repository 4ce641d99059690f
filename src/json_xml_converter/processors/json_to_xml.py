"""JSON to XML tree conversion."""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union, assert_never
from ..types import TreeProcessorInterface
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
from ..utils.name_sanitizer import sanitize

ROOT_TAG = "root"
ITEM_TAG = "item"
NULL_ATTRIBUTE = ("null", "true")


@dataclass
class _OpenElement:
    """An element whose children are still being converted."""
    name: str
    pending: Iterator[Tuple[str, Value]]
    attributes: Tuple[Tuple[str, str], ...] = ()
    children: List[Union[XmlNode, str]] = field(default_factory=list)

    def close(self) -> XmlNode:
        return XmlNode(self.name, self.attributes, tuple(self.children))


class JsonToXmlProcessor(TreeProcessorInterface):
    """
    Converts a Value tree into an XmlNode tree under a synthetic root.

    Object pairs become child elements named after their sanitized key,
    array items become sibling ``item`` elements, ``null`` becomes a
    ``null="true"`` attribute and every scalar becomes element text.
    Traversal is depth-first and order-preserving, driven by an explicit
    stack so deep input does not exhaust the interpreter call stack.
    """

    def __init__(self, root_tag: str = ROOT_TAG, item_tag: str = ITEM_TAG,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the processor.

        Args:
            root_tag: Name of the synthetic document element
            item_tag: Element name shared by all array items
            logger: Optional logger instance
        """
        self.root_tag = root_tag
        self.item_tag = item_tag
        self.logger = logger or logging.getLogger(__name__)

    def process(self, tree: Value) -> XmlNode:
        """
        Convert a Value into an XmlNode rooted at the synthetic root element.

        Args:
            tree: Value to convert; a bare scalar or null fills the root itself

        Returns:
            XmlNode named ``root_tag``
        """
        stack = [self._open(self.root_tag, tree)]

        while True:
            current = stack[-1]
            next_child = next(current.pending, None)

            if next_child is not None:
                stack.append(self._open(*next_child))
                continue

            stack.pop()
            node = current.close()
            if not stack:
                self.logger.debug(f"Converted {type(tree).__name__} into <{node.name}> element tree")
                return node
            stack[-1].children.append(node)

    def _open(self, name: str, value: Value) -> _OpenElement:
        """Start the element for ``value`` and queue its children."""
        if isinstance(value, JsonObject):
            return _OpenElement(name, self._object_children(value))
        elif isinstance(value, JsonArray):
            return _OpenElement(name, self._array_children(value))
        elif isinstance(value, JsonNull):
            return _OpenElement(name, iter(()), attributes=(NULL_ATTRIBUTE,))
        elif isinstance(value, (JsonBool, JsonNumber, JsonString)):
            return _OpenElement(name, iter(()), children=[value.text])
        else:
            assert_never(value)

    def _object_children(self, value: JsonObject) -> Iterator[Tuple[str, Value]]:
        for key, child in value.merged_pairs():
            yield sanitize(key), child

    def _array_children(self, value: JsonArray) -> Iterator[Tuple[str, Value]]:
        for item in value.items:
            yield self.item_tag, item


_default_processor = JsonToXmlProcessor()


def json_tree_to_xml_tree(value: Value) -> XmlNode:
    """Convert a Value tree into an XmlNode tree under a ``root`` element."""
    return _default_processor.process(value)
