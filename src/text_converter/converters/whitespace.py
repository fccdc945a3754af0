"""Whitespace normalisation converter.

Rules applied, in order:
  • Single space after sentence-ending punctuation (not double)
  • Single space between words (no runs of horizontal whitespace)
  • Trailing whitespace stripped per line
  • No redundant blank lines (max 1 consecutive)
"""

from __future__ import annotations

import re

from text_converter.base import TextConverter


class WhitespaceNormalizer(TextConverter):
    """Normalise whitespace in plain text or Markdown prose."""

    # -- Patterns --------------------------------------------------------

    _DOUBLE_SPACE_AFTER_PUNCT = re.compile(r"([.!?])  +")
    _MULTI_SPACE = re.compile(r"[^\S\n]{2,}")  # 2+ horizontal spaces
    _TRAILING_WS = re.compile(r"[ \t]+$", re.MULTILINE)
    _MULTI_NEWLINE = re.compile(r"\n{3,}")  # 3+ newlines → 2

    def converter(self, text: str) -> str:
        text = self._DOUBLE_SPACE_AFTER_PUNCT.sub(r"\1 ", text)
        # must run after the punctuation rule
        text = self._MULTI_SPACE.sub(" ", text)
        text = self._TRAILING_WS.sub("", text)
        return self._MULTI_NEWLINE.sub("\n\n", text)
