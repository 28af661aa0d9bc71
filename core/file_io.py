"""
Text file access for the tags loader, the occurrence search and the profile store.

Everything that reads a file goes through the FileReader protocol so tests can
serve contents from memory.
"""

from pathlib import Path
from typing import Callable, Protocol

from core.exceptions import FileReadError

# Bytes sniffed for a NUL when deciding whether a file is binary.
BINARY_SNIFF_SIZE = 1024


class FileReader(Protocol):
    def read_file(self, file_path: Path) -> str:
        """
        Return the file's text, or "" when there is nothing to search in it.

        Raises:
            FileReadError: If the file exists but cannot be read.
        """


class FilesystemFileReader:
    """Reads UTF-8 text from disk, skipping binaries and missing paths."""

    def read_file(self, file_path: Path) -> str:
        """
        Read a file as UTF-8, dropping undecodable bytes.

        Args:
            file_path: Absolute path of the file.

        Returns:
            str: The text, or "" if the path is not a regular file or looks binary.

        Raises:
            FileReadError: On an OSError while reading.
        """
        if not file_path.is_file() or self._looks_binary(file_path):
            return ""

        try:
            with file_path.open("r", encoding="utf-8", errors="ignore") as handle:
                return handle.read()
        except OSError as e:
            raise FileReadError(
                message=f"Could not read {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e

    @staticmethod
    def _looks_binary(file_path: Path) -> bool:
        # Unopenable files are treated as binary and skipped
        try:
            with open(file_path, "rb") as handle:
                return b"\0" in handle.read(BINARY_SNIFF_SIZE)
        except OSError:
            return True


class MockFileReader:
    """
    In-memory FileReader for tests.

    `return_value`, when set, is returned for every path. Otherwise
    `read_file_fn` is called with the path, and without either "" is returned.
    Requested paths are recorded in `read_file_calls`.
    """

    def __init__(
        self,
        return_value: str | None = None,
        read_file_fn: Callable[[Path], str] | None = None,
    ):
        self.return_value = return_value
        self.read_file_fn = read_file_fn
        self.read_file_calls: list[Path] = []

    def read_file(self, file_path: Path) -> str:
        self.read_file_calls.append(file_path)
        if self.return_value is not None:
            return self.return_value
        return self.read_file_fn(file_path) if self.read_file_fn else ""
