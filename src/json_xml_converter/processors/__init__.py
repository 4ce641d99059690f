"""Tree processors for both conversion directions."""

from .json_to_xml import JsonToXmlProcessor, json_tree_to_xml_tree
from .xml_to_json import XmlToJsonProcessor, xml_tree_to_json_tree

__all__ = [
    "JsonToXmlProcessor",
    "XmlToJsonProcessor",
    "json_tree_to_xml_tree",
    "xml_tree_to_json_tree",
]
