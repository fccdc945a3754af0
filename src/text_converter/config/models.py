"""Pydantic models for text_converter configuration.

Only the clipboard backend is configurable. The output path rule and the
output format of ``from_file`` are fixed.
"""

from __future__ import annotations

import codecs
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ClipboardConfig(BaseModel):
    """How the system clipboard is read."""

    paste_command: Optional[list[str]] = Field(
        default=None,
        description="Command printing the clipboard text to stdout. "
        "When unset, a backend is detected for the current platform.",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding of the paste command's output.",
    )

    @field_validator("paste_command")
    @classmethod
    def _non_empty_command(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        if value is not None and not value:
            raise ValueError("paste_command must contain at least the program name")
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value


class ConverterConfig(BaseModel):
    """Root configuration model."""

    clipboard: ClipboardConfig = Field(default_factory=ClipboardConfig)
