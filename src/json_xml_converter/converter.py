"""Text and file level JSON/XML converter."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import nullcontext
from pathlib import Path
from typing import Optional, Union
from .types import (
    ConverterInterface,
    ConversionResult,
    ConversionError,
    Direction,
    ErrorType
)
from .parser import JSONParser, XMLParser
from .processors import JsonToXmlProcessor, XmlToJsonProcessor
from .io import FileWriter, JSONSerializer, XMLSerializer, DEFAULT_INDENT
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler, ProfilingSession
from .utils.validation import ValidationUtils

SUFFIX_DIRECTIONS = {
    ".json": Direction.JSON_TO_XML,
    ".xml": Direction.XML_TO_JSON,
}

OUTPUT_SUFFIXES = {
    Direction.JSON_TO_XML: ".xml",
    Direction.XML_TO_JSON: ".json",
}


class JsonXmlConverter(ConverterInterface):
    """
    Converts JSON text to XML text and back.

    Each conversion parses the input into a tree, maps it with the tree
    processors and serializes the result. Failures at the parse or
    serialize boundary are reported in the returned ``ConversionResult``;
    the tree mapping itself cannot fail.
    """

    def __init__(self, default_indent: int = DEFAULT_INDENT,
                 logger: Optional[logging.Logger] = None,
                 enable_profiling: bool = True,
                 max_workers: Optional[int] = None):
        """
        Initialize the converter.

        Args:
            default_indent: Spaces per nesting level in the output (4)
            logger: Optional logger instance
            enable_profiling: Record metrics for every conversion
            max_workers: Worker threads used by the async methods (None = auto-detect)

        Raises:
            ValueError: If default_indent is not a non-negative integer
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)

        indent_validation = self.error_handler.validate_indent(default_indent)
        if not indent_validation.is_valid:
            raise ValueError(indent_validation.errors[0].message)
        self.default_indent = default_indent

        self.json_parser = JSONParser(self.error_handler, self.logger)
        self.xml_parser = XMLParser(self.error_handler, self.logger)
        self.json_to_xml_processor = JsonToXmlProcessor(logger=self.logger)
        self.xml_to_json_processor = XmlToJsonProcessor(logger=self.logger)
        self.json_serializer = JSONSerializer(self.logger)
        self.xml_serializer = XMLSerializer(self.logger)
        self.file_writer = FileWriter(self.logger)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

        self.executor = ThreadPoolExecutor(max_workers=max_workers)

    def __enter__(self) -> "JsonXmlConverter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Shut down the worker threads used by the async methods."""
        self.executor.shutdown(wait=True)

    def json_to_xml(self, json_string: str, indent: Optional[int] = None) -> ConversionResult:
        """
        Convert JSON text to an XML document.

        Args:
            json_string: JSON object or array text
            indent: Output indentation (defaults to ``default_indent``)

        Returns:
            ConversionResult with the XML document in ``output``
        """
        return self.convert(json_string, Direction.JSON_TO_XML, indent)

    def xml_to_json(self, xml_string: str, indent: Optional[int] = None) -> ConversionResult:
        """
        Convert an XML document to JSON text.

        Args:
            xml_string: XML document text
            indent: Output indentation (defaults to ``default_indent``)

        Returns:
            ConversionResult with the JSON text in ``output``
        """
        return self.convert(xml_string, Direction.XML_TO_JSON, indent)

    def convert(self, text: str, direction: Direction,
                indent: Optional[int] = None) -> ConversionResult:
        """
        Convert text in the given direction.

        Args:
            text: Input document
            direction: Which way to convert
            indent: Output indentation (defaults to ``default_indent``)

        Returns:
            ConversionResult describing the outcome
        """
        try:
            output = self._convert_text(text, direction, indent)
        except ConversionError as e:
            return self._failure(direction, e)

        return ConversionResult(success=True, direction=direction, output=output)

    def convert_file(self, input_path: Union[str, Path],
                     output_path: Optional[Union[str, Path]] = None,
                     indent: Optional[int] = None,
                     direction: Optional[Direction] = None) -> ConversionResult:
        """
        Convert a file and write the result next to it or to ``output_path``.

        Args:
            input_path: ``.json`` or ``.xml`` file to convert
            output_path: Destination (defaults to input path with the other suffix)
            indent: Output indentation (defaults to ``default_indent``)
            direction: Override the direction picked from the input suffix

        Returns:
            ConversionResult with the written path in ``output_path``
        """
        input_path = Path(input_path)
        resolved_direction = direction or SUFFIX_DIRECTIONS.get(input_path.suffix.lower())

        try:
            if resolved_direction is None:
                raise ConversionError(
                    f"Cannot choose a conversion for '{input_path.suffix}' files",
                    ErrorType.PATH,
                    context={"path": str(input_path)}
                )

            text = self.file_writer.read_text(input_path)
            output = self._convert_text(text, resolved_direction, indent)

            if output_path is None:
                output_path = input_path.with_suffix(OUTPUT_SUFFIXES[resolved_direction])
            file_info = self.file_writer.write_text(output_path, output)

        except ConversionError as e:
            return self._failure(resolved_direction or Direction.JSON_TO_XML, e)

        return ConversionResult(
            success=True,
            direction=resolved_direction,
            output=output,
            output_path=file_info["path"]
        )

    async def json_to_xml_async(self, json_string: str,
                                indent: Optional[int] = None) -> ConversionResult:
        """Run ``json_to_xml`` on the converter's worker threads."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, self.json_to_xml, json_string, indent)

    async def xml_to_json_async(self, xml_string: str,
                                indent: Optional[int] = None) -> ConversionResult:
        """Run ``xml_to_json`` on the converter's worker threads."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, self.xml_to_json, xml_string, indent)

    def _convert_text(self, text: str, direction: Direction, indent: Optional[int]) -> str:
        """Parse, map and serialize; ConversionErrors propagate."""
        indent = self._resolve_indent(indent)
        input_size = len(text.encode("utf-8")) if isinstance(text, str) else 0

        with self._profile(direction.value, input_size) as session:
            if direction == Direction.JSON_TO_XML:
                value = self.json_parser.parse(text)
                self._warn_if_deep(value)
                node = self.json_to_xml_processor.process(value)
                output = self.xml_serializer.serialize(node, indent)
            else:
                node = self.xml_parser.parse(text)
                self._warn_if_deep(node)
                value = self.xml_to_json_processor.process(node)
                output = self.json_serializer.serialize(value, indent)
            session.output_size = len(output.encode("utf-8"))

        return output

    def _resolve_indent(self, indent: Optional[int]) -> int:
        if indent is None:
            return self.default_indent

        validation_result = self.error_handler.validate_indent(indent)
        if not validation_result.is_valid:
            raise ConversionError(validation_result.errors[0].message, validation_result.errors[0].type)
        return indent

    def _profile(self, operation_name: str, input_size: int):
        if self.profiler is None:
            return nullcontext(ProfilingSession(operation_name, input_size))
        return self.profiler.profile_operation(operation_name, input_size)

    def _warn_if_deep(self, tree) -> None:
        for warning in ValidationUtils.validate_tree_depth(tree).warnings:
            self.logger.warning(warning)

    def _failure(self, direction: Direction, error: ConversionError) -> ConversionResult:
        response = self.error_handler.handle_conversion_error(error)
        self.logger.info(f"Suggested action: {response.suggested_action}")
        return ConversionResult(
            success=False,
            direction=direction,
            output="",
            errors=[str(error)]
        )
