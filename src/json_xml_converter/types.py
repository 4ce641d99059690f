"""Core type definitions for the JSON/XML converter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    SERIALIZATION = "serialization"
    FILESYSTEM = "filesystem"
    PATH = "path"


class Direction(Enum):
    """Conversion direction."""
    JSON_TO_XML = "json2xml"
    XML_TO_JSON = "xml2json"


@dataclass
class ConversionResult:
    """Result of a text or file conversion."""
    success: bool
    direction: Direction
    output: str
    output_path: Optional[str] = None
    errors: Optional[List[str]] = None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


class ConversionError(Exception):
    """Base exception for failures at the conversion boundary."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class ParseError(ConversionError):
    """Raised when JSON or XML text cannot be turned into a tree."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.SYNTAX,
                 context: Optional[Any] = None):
        super().__init__(message, error_type, context)


class SerializationError(ConversionError):
    """Raised when a tree cannot be rendered or written back to text."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.SERIALIZATION,
                 context: Optional[Any] = None):
        super().__init__(message, error_type, context)


# Abstract base classes for interfaces

class ConverterInterface(ABC):
    """Abstract interface for the text-level converter."""

    @abstractmethod
    def json_to_xml(self, json_string: str, indent: Optional[int] = None) -> ConversionResult:
        """Convert JSON text to XML text."""
        pass

    @abstractmethod
    def xml_to_json(self, xml_string: str, indent: Optional[int] = None) -> ConversionResult:
        """Convert XML text to JSON text."""
        pass


class TreeProcessorInterface(ABC):
    """Abstract interface for tree-to-tree processors."""

    @abstractmethod
    def process(self, tree: Any) -> Any:
        """Convert one tree into the other model."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_json_input(self, input_data: str) -> ValidationResult:
        """Validate JSON input text."""
        pass

    @abstractmethod
    def validate_xml_input(self, input_data: str) -> ValidationResult:
        """Validate XML input text."""
        pass

    @abstractmethod
    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """Handle conversion errors."""
        pass
