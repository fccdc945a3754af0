"""Pluggable text conversions with text, clipboard and file entry points."""

from text_converter.base import ConversionResult, TextConverter, derive_output_path
from text_converter.domain.errors import (
    ClipboardUnavailableError,
    ConfigurationError,
    ErrorKind,
    FileReadError,
    OutputWriteError,
    TextConverterError,
)
from text_converter.pipeline import ChainedConverter

__all__ = [
    "ChainedConverter",
    "ClipboardUnavailableError",
    "ConfigurationError",
    "ConversionResult",
    "ErrorKind",
    "FileReadError",
    "OutputWriteError",
    "TextConverter",
    "TextConverterError",
    "derive_output_path",
]
