"""
JSON XML Converter - Bidirectional JSON/XML structural conversion.

Maps JSON value trees to XML element trees and back using one fixed
convention: arrays as repeated ``item`` elements, ``null`` as a
``null="true"`` attribute, attributes as ``@name`` keys and repeated
sibling elements as arrays.
"""

from .converter import JsonXmlConverter
from .models import (
    JsonNull,
    JsonBool,
    JsonNumber,
    JsonString,
    JsonObject,
    JsonArray,
    Value,
    XmlNode,
    to_value,
    to_python,
)
from .processors import json_tree_to_xml_tree, xml_tree_to_json_tree
from .types import ConversionResult, ConversionError, ParseError, SerializationError, Direction
from .utils import sanitize

__version__ = "1.0.0"
__all__ = [
    "JsonXmlConverter",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonObject",
    "JsonArray",
    "Value",
    "XmlNode",
    "to_value",
    "to_python",
    "json_tree_to_xml_tree",
    "xml_tree_to_json_tree",
    "sanitize",
    "ConversionResult",
    "ConversionError",
    "ParseError",
    "SerializationError",
    "Direction",
]
