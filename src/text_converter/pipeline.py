"""Chained converter.

Pipes text through a sequence of ``TextConverter`` instances. The chain
is itself a ``TextConverter``, so it gets the text, clipboard and file
entry points like any single converter.
"""

from __future__ import annotations

from typing import Optional, Sequence

from text_converter.base import TextConverter
from text_converter.domain.ports.clipboard_port import ClipboardPort


class ChainedConverter(TextConverter):
    """Run several converters in order.

    Usage::

        chain = ChainedConverter([WhitespaceNormalizer(), UpperCaseText()])
        chain.from_file("draft.txt")   # writes draft_converted.md

    Members are used only through ``converter``; their own clipboard
    settings are ignored in favour of the chain's.
    """

    def __init__(
        self,
        converters: Optional[Sequence[TextConverter]] = None,
        clipboard: Optional[ClipboardPort] = None,
    ) -> None:
        super().__init__(clipboard)
        self._converters: list[TextConverter] = list(converters or [])

    def converter(self, text: str) -> str:
        for conv in self._converters:
            text = conv.converter(text)
        return text

    def add_converter(self, conv: TextConverter, *, position: int | None = None) -> None:
        """Insert a converter into the chain.

        If *position* is ``None`` the converter is appended at the end.
        """
        if position is None:
            self._converters.append(conv)
        else:
            self._converters.insert(position, conv)

    def remove_converter(self, name: str) -> bool:
        """Remove the first converter whose ``name`` matches.

        Returns ``True`` if a converter was removed.
        """
        for i, conv in enumerate(self._converters):
            if conv.name == name:
                self._converters.pop(i)
                return True
        return False

    @property
    def converter_names(self) -> list[str]:
        """Names of the chained converters, in order."""
        return [c.name for c in self._converters]
