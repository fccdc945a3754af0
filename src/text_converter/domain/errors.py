"""Domain errors — custom exceptions for text_converter.

The three entry-point failures (clipboard, file read, file write) each
carry an ``ErrorKind`` so result-returning calls can report them without
raising. They carry no infrastructure dependencies.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Which precondition of an entry point failed."""

    CLIPBOARD_UNAVAILABLE = "clipboard_unavailable"
    FILE_UNREADABLE = "file_unreadable"
    OUTPUT_WRITE_FAILED = "output_write_failed"


class TextConverterError(Exception):
    """Base exception for all text_converter errors."""


class ClipboardUnavailableError(TextConverterError):
    """Raised when the clipboard service cannot be opened or queried."""

    kind = ErrorKind.CLIPBOARD_UNAVAILABLE


class FileReadError(TextConverterError):
    """Raised when an input file is missing, unreadable, or not valid text."""

    kind = ErrorKind.FILE_UNREADABLE


class OutputWriteError(TextConverterError):
    """Raised when the converted output file cannot be created or written."""

    kind = ErrorKind.OUTPUT_WRITE_FAILED


class ConfigurationError(TextConverterError):
    """Raised when configuration is invalid."""

