"""Error handling implementation for the JSON/XML converter."""

import logging
from typing import Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ConversionError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Validation front door and error reporting for conversions.

    Checks raw input before it reaches a parser and turns conversion
    errors into a suggested action for the caller.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_json_input(self, input_data: str) -> ValidationResult:
        """
        Validate JSON input text.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        return self._validate_text(input_data, ValidationUtils.validate_json_string)

    def validate_xml_input(self, input_data: str) -> ValidationResult:
        """
        Validate XML input text.

        Args:
            input_data: XML string to validate

        Returns:
            ValidationResult with validation details
        """
        return self._validate_text(input_data, ValidationUtils.validate_xml_string)

    def validate_indent(self, indent: int) -> ValidationResult:
        """Validate an output indentation width."""
        result = ValidationUtils.validate_indent(indent)
        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """
        Log a conversion error and suggest what the caller can do about it.

        Args:
            error: ConversionError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Conversion error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Fix the input syntax at the reported line and column and retry."
            )
        elif error.error_type == ErrorType.STRUCTURE:
            return ErrorResponse(
                can_recover=True,
                suggested_action="JSON input must be an object or an array at the top level."
            )
        elif error.error_type == ErrorType.SERIALIZATION:
            return ErrorResponse(
                can_recover=False,
                suggested_action="The converted tree could not be rendered. "
                                 "Check the input for characters that are not allowed in the output format."
            )
        elif error.error_type == ErrorType.FILESYSTEM:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Check file permissions, available disk space, and directory access."
            )
        elif error.error_type == ErrorType.PATH:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Use a .json or .xml input file, or pick the direction explicitly."
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry."
            )

    def _validate_text(self, input_data: str, validator) -> ValidationResult:
        if not isinstance(input_data, str):
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Input must be text, got {type(input_data).__name__}",
                    location="input"
                )],
                warnings=[]
            )

        result = validator(input_data)
        for warning in result.warnings:
            self.logger.warning(warning)
        return result
