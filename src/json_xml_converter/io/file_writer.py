"""File reading and writing for file-based conversions."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
from ..types import ConversionError, SerializationError, ErrorType


class FileWriter:
    """
    Reads conversion input from disk and writes converted documents back.

    All text is UTF-8. Missing output directories are created.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def read_text(self, file_path: Union[str, Path]) -> str:
        """
        Read a UTF-8 text file.

        Args:
            file_path: File to read

        Returns:
            File content

        Raises:
            ConversionError: If the file cannot be read
        """
        path = Path(file_path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConversionError(
                f"Failed to read {path}: {e}",
                ErrorType.FILESYSTEM,
                context={"path": str(path)}
            ) from e

        self.logger.debug(f"Read {len(content)} characters from {path}")
        return content

    def write_text(self, file_path: Union[str, Path], content: str) -> Dict[str, Any]:
        """
        Write text to a file, creating parent directories as needed.

        Args:
            file_path: Destination file
            content: Text to write

        Returns:
            Dictionary with file information

        Raises:
            SerializationError: If writing fails
        """
        path = Path(file_path)
        try:
            self._ensure_directory_exists(path.parent)
            data = content.encode("utf-8")
            path.write_bytes(data)
        except (OSError, UnicodeEncodeError) as e:
            raise SerializationError(
                f"Failed to write {path}: {e}",
                ErrorType.FILESYSTEM,
                context={"path": str(path)}
            ) from e

        file_info = {
            "path": str(path.absolute()),
            "size": len(data)
        }
        self.logger.info(f"Wrote {file_info['size']} bytes to {file_info['path']}")
        return file_info

    def _ensure_directory_exists(self, directory: Path) -> None:
        """Create directory if it doesn't exist."""
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            self.logger.debug(f"Created directory: {directory}")
        elif not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
