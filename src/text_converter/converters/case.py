"""Character order and letter case converters.

Input reaches these converters already decoded, so malformed bytes are
rejected by the entry point before ``converter`` runs.
"""

from __future__ import annotations

from text_converter.base import TextConverter


class ReverseText(TextConverter):
    """Reverse the order of code points.

    Combining marks and multi-code-point emoji are reversed code point by
    code point, not as grapheme clusters.
    """

    def converter(self, text: str) -> str:
        return text[::-1]


class UpperCaseText(TextConverter):
    """Upper-case every letter (``str.upper`` rules, so ``ß`` becomes ``SS``)."""

    def converter(self, text: str) -> str:
        return text.upper()


class LowerCaseText(TextConverter):
    """Lower-case every letter."""

    def converter(self, text: str) -> str:
        return text.lower()
