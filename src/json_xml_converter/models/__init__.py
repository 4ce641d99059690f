"""Tree models for the JSON/XML converter."""

from .value import (
    JsonNull,
    JsonBool,
    JsonNumber,
    JsonString,
    JsonObject,
    JsonArray,
    Value,
    to_value,
    to_python,
)
from .node import XmlNode

__all__ = [
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
]
