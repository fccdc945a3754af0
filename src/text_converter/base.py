"""Base interface for text converters and the shared result type.

Every converter follows the same contract:
  1. Implements ``converter(text) -> str``, a pure transformation
  2. Inherits three entry points built on it: text, clipboard, file

``from_clipboard`` and ``from_file`` raise on failure; ``try_from_clipboard``
and ``try_from_file`` return a ``ConversionResult`` carrying the error
instead.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from text_converter.domain.errors import (
    ClipboardUnavailableError,
    ErrorKind,
    FileReadError,
    OutputWriteError,
    TextConverterError,
)
from text_converter.domain.ports.clipboard_port import ClipboardPort
from text_converter.infrastructure.clipboard.system_clipboard import SystemClipboard

logger = logging.getLogger(__name__)

TextLike = Union[str, bytes, bytearray, memoryview]
PathLike = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]

OUTPUT_SUFFIX = "_converted.md"


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------


@dataclass
class ConversionResult:
    """Outcome of a clipboard or file conversion."""

    text: str = ""
    output_path: Optional[Path] = None
    exception: Optional[TextConverterError] = None

    @property
    def ok(self) -> bool:
        """``True`` when the conversion succeeded."""
        return self.exception is None

    @property
    def error(self) -> Optional[ErrorKind]:
        """Which precondition failed, or ``None`` on success."""
        if self.exception is None:
            return None
        return getattr(self.exception, "kind", None)

    @property
    def message(self) -> str:
        """Diagnostic of the stored error, or ``""`` on success."""
        return str(self.exception) if self.exception is not None else ""

    def unwrap(self) -> str:
        """Return the converted text, or raise the stored error."""
        if self.exception is not None:
            raise self.exception
        return self.text


def derive_output_path(path: PathLike) -> Path:
    """Return ``<path up to its first '.'>_converted.md``.

    Only the text before the *first* dot is kept, so ``archive.tar.gz``
    becomes ``archive_converted.md`` and ``README`` becomes
    ``README_converted.md``.
    """
    raw = os.fsdecode(os.fspath(path))
    return Path(raw.split(".", 1)[0] + OUTPUT_SUFFIX)


def _as_text(value: TextLike) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8")
    raise TypeError(f"Expected text, got {type(value).__name__}")


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------


class TextConverter(ABC):
    """Abstract base for every text converter.

    Subclasses must implement ``converter(text) -> str``. It must be free
    of side effects and return the same output for the same input; the
    base class does not check either.

    Usage::

        class ReverseText(TextConverter):
            def converter(self, text: str) -> str:
                return text[::-1]

        ReverseText().from_text("Hello World!")   # '!dlroW olleH'
        ReverseText().from_file("notes.txt")      # also writes notes_converted.md
    """

    def __init__(self, clipboard: Optional[ClipboardPort] = None) -> None:
        self._clipboard = clipboard

    @property
    def name(self) -> str:
        """Human-readable name used in logs and chains."""
        return type(self).__name__

    @abstractmethod
    def converter(self, text: str) -> str:
        """Transform *text* into the desired form.

        Preferably never called directly, but through the entry points.
        """

    # -- Entry points ----------------------------------------------------

    def from_text(self, text: TextLike) -> str:
        """Convert *text* with ``converter``.

        ``bytes``-like input is decoded as strict UTF-8 first; a
        ``UnicodeDecodeError`` propagates unchanged.
        """
        return self.converter(_as_text(text))

    def from_clipboard(self) -> str:
        """Fetch the clipboard contents and convert them.

        An empty clipboard, or one holding something other than text, is
        converted as ``""``.

        Raises:
            ClipboardUnavailableError: The clipboard could not be fetched.
        """
        return self.try_from_clipboard().unwrap()

    def from_file(self, path: PathLike) -> str:
        """Convert a file's contents and write them next to it.

        The output goes to ``derive_output_path(path)``, created or
        truncated. The returned string is the value that was written.

        Raises:
            FileReadError: The file is missing, unreadable, or not UTF-8 text.
            OutputWriteError: The output file could not be created or written.
        """
        return self.try_from_file(path).unwrap()

    def try_from_clipboard(self) -> ConversionResult:
        """Like ``from_clipboard`` but reports failure in the result."""
        try:
            text = self._get_clipboard().read_text()
        except ClipboardUnavailableError as exc:
            logger.error("%s: %s", self.name, exc)
            return ConversionResult(exception=exc)

        if text is None:
            text = ""
        return ConversionResult(text=self.converter(text))

    def try_from_file(self, path: PathLike) -> ConversionResult:
        """Like ``from_file`` but reports failure in the result."""
        output_path = derive_output_path(path)
        try:
            text = self._read_file(path)
            output = self.converter(text)
            self._write_file(output_path, output)
        except (FileReadError, OutputWriteError) as exc:
            logger.error("%s: %s", self.name, exc)
            return ConversionResult(exception=exc)

        return ConversionResult(text=output, output_path=output_path)

    # -- I/O helpers -----------------------------------------------------

    def _get_clipboard(self) -> ClipboardPort:
        if self._clipboard is None:
            self._clipboard = SystemClipboard()
        return self._clipboard

    @staticmethod
    def _read_file(path: PathLike) -> str:
        try:
            # newline="" keeps line endings exactly as stored
            with open(path, encoding="utf-8", newline="") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(
                f"Failed to read file contents of {os.fsdecode(path)}: {exc}"
            ) from exc
        logger.debug("Read %d characters from %s", len(text), os.fsdecode(path))
        return text

    @staticmethod
    def _write_file(output_path: Path, output: str) -> None:
        try:
            fh = open(output_path, "w", encoding="utf-8", newline="")
        except OSError as exc:
            raise OutputWriteError(
                f"Failed to create the output file {output_path}: {exc}"
            ) from exc

        try:
            with fh:
                fh.write(output)
        except (OSError, UnicodeEncodeError) as exc:
            raise OutputWriteError(
                f"Failed to write to the output file {output_path}: {exc}"
            ) from exc
        logger.debug("Wrote %d characters to %s", len(output), output_path)
