"""Tests for error handler and input validation."""

import pytest
from json_xml_converter.error_handler import ErrorHandler
from json_xml_converter.types import ConversionError, ParseError, SerializationError, ErrorType
from json_xml_converter.utils.validation import ValidationUtils
from json_xml_converter.models import XmlNode, to_value


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_validate_json_input_valid(self):
        """Test validation of valid JSON input."""
        result = self.error_handler.validate_json_input('{"a": 1}')

        assert result.is_valid
        assert len(result.errors) == 0

    def test_validate_json_input_wrong_start(self):
        """Test that JSON must start with an object or array."""
        result = self.error_handler.validate_json_input('42')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.STRUCTURE

    def test_validate_json_input_not_text(self):
        """Test validation of non-string input."""
        result = self.error_handler.validate_json_input(None)

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX

    def test_validate_xml_input(self):
        """Test validation of XML input."""
        assert self.error_handler.validate_xml_input("<a/>").is_valid
        assert not self.error_handler.validate_xml_input("  ").is_valid
        assert not self.error_handler.validate_xml_input("{}").is_valid

    def test_validate_indent(self):
        """Test validation of indentation widths."""
        assert self.error_handler.validate_indent(4).is_valid
        assert self.error_handler.validate_indent(0).is_valid
        assert not self.error_handler.validate_indent(-1).is_valid
        assert not self.error_handler.validate_indent(True).is_valid
        assert not self.error_handler.validate_indent("4").is_valid

        wide = self.error_handler.validate_indent(40)
        assert wide.is_valid
        assert len(wide.warnings) == 1

    @pytest.mark.parametrize("error,can_recover,keyword", [
        (ParseError("bad"), True, "syntax"),
        (ParseError("scalar root", ErrorType.STRUCTURE), True, "top level"),
        (SerializationError("bad char"), False, "rendered"),
        (SerializationError("denied", ErrorType.FILESYSTEM), True, "permissions"),
        (ConversionError("odd suffix", ErrorType.PATH), True, ".json"),
    ])
    def test_handle_conversion_error(self, error, can_recover, keyword):
        """Test the suggested action for each error type."""
        response = self.error_handler.handle_conversion_error(error)

        assert response.can_recover == can_recover
        assert keyword in response.suggested_action

    def test_error_hierarchy(self):
        """Test that boundary errors share one base class."""
        assert issubclass(ParseError, ConversionError)
        assert issubclass(SerializationError, ConversionError)
        assert ParseError("x").error_type == ErrorType.SYNTAX
        assert SerializationError("x").error_type == ErrorType.SERIALIZATION


class TestValidationUtils:
    """Tests for ValidationUtils."""

    def test_value_depth(self):
        """Test depth of a Value tree."""
        assert ValidationUtils.calculate_max_depth(to_value({"a": {"b": [1]}})) == 3
        assert ValidationUtils.calculate_max_depth(to_value([])) == 0

    def test_node_depth(self):
        """Test depth of an XmlNode tree."""
        node = XmlNode("a", children=(XmlNode("b", children=(XmlNode("c"),)), "text"))

        assert ValidationUtils.calculate_max_depth(node) == 2

    def test_deep_tree_warning(self):
        """Test that very deep trees produce a warning but stay valid."""
        node = XmlNode("n")
        for _ in range(300):
            node = XmlNode("n", children=(node,))

        result = ValidationUtils.validate_tree_depth(node)

        assert result.is_valid
        assert "Deep nesting" in result.warnings[0]
