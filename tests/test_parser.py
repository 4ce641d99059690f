"""Tests for the JSON and XML parsers."""

import pytest
from decimal import Decimal
from json_xml_converter.parser import JSONParser, XMLParser
from json_xml_converter.models import JsonArray, JsonNumber, JsonObject, XmlNode
from json_xml_converter.types import ParseError, ErrorType


class TestJSONParser:
    """Tests for JSONParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = JSONParser()

    def test_parse_object_keeps_order(self):
        """Test that object keys keep document order."""
        value = self.parser.parse('{"b": 1, "a": 2, "c": 3}')

        assert isinstance(value, JsonObject)
        assert value.keys() == ["b", "a", "c"]

    def test_parse_array(self):
        """Test parsing a top-level array."""
        value = self.parser.parse('  [1, "two", null]  ')

        assert isinstance(value, JsonArray)
        assert len(value) == 3

    def test_parse_keeps_duplicate_keys(self):
        """Test that repeated keys are all kept in the tree."""
        value = self.parser.parse('{"a": 1, "b": 2, "a": 3}')

        assert [key for key, _ in value.pairs] == ["a", "b", "a"]
        assert value.get("a") == JsonNumber(3)

    def test_parse_preserves_decimal_digits(self):
        """Test that non-integer numbers keep their written digits."""
        value = self.parser.parse('{"price": 1.50, "big": 12345678901234567890.1}')

        assert value.get("price") == JsonNumber(Decimal("1.50"))
        assert value.get("price").text == "1.50"
        assert value.get("big").text == "12345678901234567890.1"

    def test_parse_nested_lists_of_objects(self):
        """Test that objects inside nested arrays are converted."""
        value = self.parser.parse('[[{"a": 1}], []]')

        assert value == JsonArray((
            JsonArray((JsonObject((("a", JsonNumber(1)),)),)),
            JsonArray(()),
        ))

    def test_parse_empty_json(self):
        """Test parsing empty JSON string."""
        with pytest.raises(ParseError, match="JSON string is empty"):
            self.parser.parse("   ")

    def test_parse_primitive_root(self):
        """Test that a scalar document is rejected."""
        with pytest.raises(ParseError, match=r"Must start with \{ or \[") as exc_info:
            self.parser.parse('"just a string"')

        assert exc_info.value.error_type == ErrorType.STRUCTURE

    def test_parse_invalid_json_syntax(self):
        """Test that syntax errors report their position."""
        with pytest.raises(ParseError, match="JSON parsing failed") as exc_info:
            self.parser.parse('{\n  "a": \n}')

        assert exc_info.value.error_type == ErrorType.SYNTAX
        assert exc_info.value.context["line"] == 3

    def test_parse_rejects_nan(self):
        """Test that non-standard constants are rejected."""
        with pytest.raises(ParseError, match="unsupported constant NaN"):
            self.parser.parse('{"a": NaN}')

    def test_parse_non_text_input(self):
        """Test that non-string input is rejected."""
        with pytest.raises(ParseError, match="Input must be text"):
            self.parser.parse(b'{"a": 1}')

    def test_parse_keeps_very_long_integers(self):
        """Test that integers past the int digit limit keep every digit."""
        digits = "1" * 5000
        value = self.parser.parse('{"n": ' + digits + '}')

        assert value.get("n").text == digits


class TestXMLParser:
    """Tests for XMLParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = XMLParser()

    def test_parse_simple_document(self):
        """Test parsing elements, attributes and text."""
        node = self.parser.parse('<person id="1"><name>John</name><age>30</age></person>')

        assert node == XmlNode("person", (("id", "1"),), (
            XmlNode("name", children=("John",)),
            XmlNode("age", children=("30",)),
        ))

    def test_parse_with_declaration(self):
        """Test that an encoding declaration is accepted."""
        node = self.parser.parse('<?xml version="1.0" encoding="UTF-8"?>\n<a>é</a>')

        assert node == XmlNode("a", children=("é",))

    def test_parse_ignores_declared_encoding(self):
        """Test that decoded text is not decoded again as the declared encoding."""
        node = self.parser.parse('<?xml version="1.0" encoding="ISO-8859-1"?><a>café</a>')

        assert node.text == "café"

    def test_parse_keeps_mixed_content(self):
        """Test that text runs around child elements are kept in order."""
        node = self.parser.parse('<p>Hello <b>world</b> again</p>')

        assert node.children == ("Hello ", XmlNode("b", children=("world",)), " again")

    def test_parse_drops_comments_and_instructions(self):
        """Test that comments and processing instructions are removed."""
        node = self.parser.parse('<a><!-- note --><?pi data?><b>1</b></a>')

        assert node == XmlNode("a", children=(XmlNode("b", children=("1",)),))

    def test_parse_reads_cdata_as_text(self):
        """Test that CDATA sections become plain text."""
        node = self.parser.parse('<a><![CDATA[x < y]]></a>')

        assert node.text == "x < y"

    def test_parse_strips_namespaces(self):
        """Test that qualified names are reduced to their local part."""
        node = self.parser.parse(
            '<ns:a xmlns:ns="urn:example" ns:kind="k"><ns:b>1</ns:b></ns:a>'
        )

        assert node.name == "a"
        assert node.attributes == (("kind", "k"),)
        assert [child.name for child in node.elements] == ["b"]

    def test_parse_does_not_expand_entities(self):
        """Test that internal entities are not expanded."""
        node = self.parser.parse(
            '<!DOCTYPE a [<!ENTITY e "boom">]><a>x&e;y</a>'
        )

        assert "boom" not in node.text

    def test_parse_malformed_xml(self):
        """Test that malformed XML reports its position."""
        with pytest.raises(ParseError, match="XML parsing failed") as exc_info:
            self.parser.parse('<a><b></a>')

        assert exc_info.value.error_type == ErrorType.SYNTAX
        assert "line" in exc_info.value.context

    def test_parse_empty_xml(self):
        """Test parsing empty XML string."""
        with pytest.raises(ParseError, match="XML string is empty"):
            self.parser.parse("")

    def test_parse_non_markup(self):
        """Test that text without markup is rejected before parsing."""
        with pytest.raises(ParseError, match="Must start with <"):
            self.parser.parse("plain text")
