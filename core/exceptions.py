"""
Custom exception classes for the unused CLI.

This module defines application-specific exceptions raised while locating,
reading and parsing tags files, and while reading project files. They carry
structured diagnostic data so the CLI can print a useful error message.
"""

import os
from typing import Optional


class FileIOError(Exception):
    """
    Base exception for file I/O errors.

    Attributes:
        message: A human-readable error message describing what went wrong.
        file_path: The path of the file involved, if known.
        original_exception: The underlying exception that caused this error, if any.
        diagnostic_info: A dictionary containing the exception type, details
            and OS name.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or "A file operation failed"
        super().__init__(self.message)
        self.file_path = file_path
        self.original_exception = original_exception
        self.diagnostic_info = {
            "type": (
                type(original_exception).__name__ if original_exception else "Unknown"
            ),
            "details": str(original_exception) if original_exception else "No details",
            "os_name": os.name,
        }


class FileReadError(FileIOError):
    """Raised when an existing file cannot be read."""


class TagsError(FileIOError):
    """
    Base exception for tags file errors.

    The main analysis pipeline treats any TagsError as "no tokens"; only the
    read-ctags command reports it to the user.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message or "Unable to load tags",
            file_path=file_path,
            original_exception=original_exception,
        )


class TagsFileNotFoundError(TagsError):
    """
    Raised when none of the well-known tags file locations exist.

    Generate one with Universal Ctags (e.g. `ctags -R .`) before running.
    """


class TagsReadError(TagsError):
    """Raised when the tags file exists but cannot be read."""


class TagsParseError(TagsError):
    """Raised when the tags file has content but no parsable tag line."""
