"""Text and file I/O for the JSON/XML converter."""

from .file_writer import FileWriter
from .serializer import JSONSerializer, XMLSerializer, DEFAULT_INDENT

__all__ = ["FileWriter", "JSONSerializer", "XMLSerializer", "DEFAULT_INDENT"]
