"""XML to JSON tree conversion."""

import logging
from typing import Dict, Iterator, List, Optional, Tuple, Union
from ..types import TreeProcessorInterface
from ..models import JsonArray, JsonObject, JsonString, Value, XmlNode

ATTRIBUTE_PREFIX = "@"
TEXT_KEY = "value"


class ObjectBuilder:
    """
    Staged key/content mapping for one element being converted.

    The first occurrence of a name is stored as is; a second occurrence
    promotes the entry to an array in place and later ones append to it.
    Nothing is final until ``finish`` builds the JsonObject.
    """

    def __init__(self):
        self._entries: Dict[str, Union[Value, List[Value]]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def add(self, name: str, content: Value) -> None:
        if name not in self._entries:
            self._entries[name] = content
            return

        existing = self._entries[name]
        if isinstance(existing, list):
            existing.append(content)
        else:
            self._entries[name] = [existing, content]

    def finish(self) -> JsonObject:
        pairs: List[Tuple[str, Value]] = []
        for name, entry in self._entries.items():
            if isinstance(entry, list):
                pairs.append((name, JsonArray(tuple(entry))))
            else:
                pairs.append((name, entry))
        return JsonObject(tuple(pairs))


class _OpenObject:
    """A structured element whose children are still being converted."""

    def __init__(self, node: XmlNode):
        self.node = node
        self.pending: Iterator[XmlNode] = node.elements
        self.builder = ObjectBuilder()
        for attr_name, attr_value in node.attributes:
            self.builder.add(ATTRIBUTE_PREFIX + attr_name, JsonString(attr_value))


class XmlToJsonProcessor(TreeProcessorInterface):
    """
    Converts an XmlNode tree into a Value tree.

    Attributes become ``@name`` string pairs ahead of the element children.
    Text-only children collapse to their trimmed text, structured children
    become nested objects, and repeated sibling names are promoted to
    arrays. Text interleaved with element children is dropped.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the processor.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def process(self, tree: XmlNode) -> Value:
        """
        Convert the document element into a Value.

        Args:
            tree: Document element

        Returns:
            ``{name: content}`` for the document element, or the empty
            object itself when the element converts to nothing
        """
        if tree.is_text_only:
            return JsonObject(((tree.name, self._leaf_content(tree)),))

        root_object = self._convert_structured(tree)
        self.logger.debug(f"Converted <{tree.name}> into object with {len(root_object)} keys")

        if len(root_object) == 0:
            return root_object
        return JsonObject(((tree.name, root_object),))

    def _convert_structured(self, node: XmlNode) -> JsonObject:
        stack = [_OpenObject(node)]

        while True:
            current = stack[-1]
            child = next(current.pending, None)

            if child is None:
                stack.pop()
                finished = current.builder.finish()
                if not stack:
                    return finished
                stack[-1].builder.add(current.node.name, finished)
            elif child.is_text_only:
                current.builder.add(child.name, self._leaf_content(child))
            else:
                stack.append(_OpenObject(child))

    def _leaf_content(self, node: XmlNode) -> Value:
        """Content of a text-only node: its trimmed text, or an object when it carries attributes."""
        text = node.text.strip()
        if not node.attributes:
            return JsonString(text)

        builder = ObjectBuilder()
        for attr_name, attr_value in node.attributes:
            builder.add(ATTRIBUTE_PREFIX + attr_name, JsonString(attr_value))
        if text:
            builder.add(TEXT_KEY, JsonString(text))
        return builder.finish()


_default_processor = XmlToJsonProcessor()


def xml_tree_to_json_tree(node: XmlNode) -> Value:
    """Convert an XmlNode document element into a Value tree."""
    return _default_processor.process(node)
