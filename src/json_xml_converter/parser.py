"""JSON and XML text parsers producing the converter's tree models."""

import json
import logging
from decimal import Decimal
from typing import Any, Dict, List, NoReturn, Optional, Tuple, Union
from lxml import etree
from .types import ParseError, ErrorType, ValidationResult
from .error_handler import ErrorHandler
from .models import JsonObject, Value, XmlNode, to_value


def _object_from_pairs(pairs: List[Tuple[str, Any]]) -> JsonObject:
    return JsonObject(tuple((key, to_value(value)) for key, value in pairs))


def _parse_int(text: str) -> Union[int, Decimal]:
    try:
        return int(text)
    except ValueError:
        # past the interpreter's int digit limit
        return Decimal(text)


def _reject_constant(name: str) -> Any:
    raise ParseError(f"JSON parsing failed: unsupported constant {name}")


def _raise_invalid(kind: str, validation_result: ValidationResult) -> NoReturn:
    first = validation_result.errors[0]
    messages = [error.message for error in validation_result.errors]
    raise ParseError(
        f"Invalid {kind} input: {'; '.join(messages)}",
        first.type,
        context={"location": first.location}
    )


class JSONParser:
    """
    Parses JSON text into a Value tree.

    Only objects and arrays are accepted at the top level. Object pairs keep
    their order and any repeated keys, and non-integer numbers are decoded
    as ``Decimal`` so no digits are lost.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Value:
        """
        Parse JSON text.

        Args:
            json_string: JSON string to parse

        Returns:
            Parsed JsonObject or JsonArray

        Raises:
            ParseError: If the text is empty, not an object or array, or invalid
        """
        validation_result = self.error_handler.validate_json_input(json_string)
        if not validation_result.is_valid:
            _raise_invalid("JSON", validation_result)

        try:
            data = json.loads(
                json_string,
                object_pairs_hook=_object_from_pairs,
                parse_float=Decimal,
                parse_int=_parse_int,
                parse_constant=_reject_constant
            )
        except json.JSONDecodeError as e:
            raise ParseError(
                f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}",
                context={"line": e.lineno, "column": e.colno}
            ) from e
        except ValueError as e:
            raise ParseError(f"JSON parsing failed: {e}") from e
        except RecursionError as e:
            raise ParseError("JSON parsing failed: nesting is too deep", ErrorType.STRUCTURE) from e

        value = to_value(data)
        self.logger.debug(f"Parsed JSON into {type(value).__name__}")
        return value


class XMLParser:
    """
    Parses XML text into an XmlNode tree.

    The text is already decoded, so any encoding named in the XML
    declaration is ignored. Entity expansion and network access are
    disabled. Comments and processing instructions are dropped, CDATA is
    read as plain text and namespace-qualified names are reduced to their
    local part.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the XML parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, xml_string: str) -> XmlNode:
        """
        Parse XML text.

        Args:
            xml_string: XML string to parse

        Returns:
            XmlNode for the document element

        Raises:
            ParseError: If the text is empty or not well-formed
        """
        validation_result = self.error_handler.validate_xml_input(xml_string)
        if not validation_result.is_valid:
            _raise_invalid("XML", validation_result)

        parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            remove_comments=True,
            remove_pis=True,
            strip_cdata=True,
            encoding="utf-8"
        )

        try:
            root = etree.fromstring(xml_string.strip().encode("utf-8"), parser)
        except etree.XMLSyntaxError as e:
            line, column = e.position
            raise ParseError(
                f"XML parsing failed: {e.msg}",
                context={"line": line, "column": column}
            ) from e

        node = self._build_tree(root)
        self.logger.debug(f"Parsed XML document element <{node.name}>")
        return node

    def _build_tree(self, root: etree._Element) -> XmlNode:
        """Copy an lxml element tree into XmlNodes, children before parents."""
        stack = [self._open(root)]

        while True:
            element, children, pending = stack[-1]
            child = next(pending, None)

            if child is None:
                stack.pop()
                node = XmlNode(self._local_name(element), self._attributes(element), tuple(children))
                if not stack:
                    return node
                parent_children = stack[-1][1]
                parent_children.append(node)
                if element.tail:
                    parent_children.append(element.tail)
            elif isinstance(child.tag, str):
                stack.append(self._open(child))
            elif child.tail:
                # unexpanded entity reference; only its trailing text is kept
                children.append(child.tail)

    def _open(self, element: etree._Element):
        children: List[Any] = [element.text] if element.text else []
        return element, children, iter(element)

    def _local_name(self, element: etree._Element) -> str:
        return etree.QName(element).localname

    def _attributes(self, element: etree._Element) -> Tuple[Tuple[str, str], ...]:
        attributes: Dict[str, str] = {}
        for name, value in element.attrib.items():
            attributes[etree.QName(name).localname] = value
        return tuple(attributes.items())
