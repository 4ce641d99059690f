"""Validation utilities for converter input."""

from typing import List, Tuple, Union
from ..types import ValidationResult, ValidationError, ErrorType
from ..models import JsonObject, JsonArray, Value, XmlNode

MAX_INDENT = 16
DEEP_NESTING_WARNING = 256


class ValidationUtils:
    """Utility class for validating converter input before and after parsing."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Check JSON text before it is decoded.

        Only the shape of the input is checked here: it must be non-empty and
        start with ``{`` or ``[``. Syntax is left to the decoder.

        Args:
            json_string: JSON text to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        stripped = json_string.strip()
        if not stripped:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
        elif stripped[0] not in "{[":
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message="Invalid JSON format. Must start with { or [",
                location="line 1, column 1"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_xml_string(xml_string: str) -> ValidationResult:
        """
        Check XML text before it is parsed.

        Args:
            xml_string: XML text to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        stripped = xml_string.strip()
        if not stripped:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="XML string is empty",
                location="input"
            ))
        elif not stripped.startswith("<"):
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="Invalid XML format. Must start with <",
                location="line 1, column 1"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_indent(indent: int) -> ValidationResult:
        """Validate an output indentation width."""
        errors = []
        warnings = []

        if isinstance(indent, bool) or not isinstance(indent, int):
            errors.append(ValidationError(
                type=ErrorType.SERIALIZATION,
                message=f"Indent must be an integer, got {type(indent).__name__}",
                location="indent"
            ))
        elif indent < 0:
            errors.append(ValidationError(
                type=ErrorType.SERIALIZATION,
                message="Indent must not be negative",
                location="indent"
            ))
        elif indent > MAX_INDENT:
            warnings.append(f"Indent of {indent} is unusually wide.")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_tree_depth(tree: Union[Value, XmlNode]) -> ValidationResult:
        """Warn about very deep trees; depth never makes a tree invalid."""
        warnings = []

        depth = ValidationUtils.calculate_max_depth(tree)
        if depth > DEEP_NESTING_WARNING:
            warnings.append(f"Deep nesting detected (depth: {depth}). This may impact performance.")

        return ValidationResult(is_valid=True, errors=[], warnings=warnings)

    @staticmethod
    def calculate_max_depth(tree: Union[Value, XmlNode]) -> int:
        """Calculate maximum nesting depth of a Value or XmlNode tree."""
        max_depth = 0
        stack: List[Tuple[Union[Value, XmlNode], int]] = [(tree, 0)]

        while stack:
            current, depth = stack.pop()
            max_depth = max(max_depth, depth)

            if isinstance(current, JsonObject):
                stack.extend((value, depth + 1) for _, value in current.pairs)
            elif isinstance(current, JsonArray):
                stack.extend((item, depth + 1) for item in current.items)
            elif isinstance(current, XmlNode):
                stack.extend((child, depth + 1) for child in current.elements)

        return max_depth
