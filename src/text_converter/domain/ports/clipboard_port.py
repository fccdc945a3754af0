"""Port: Clipboard — read text from the system clipboard."""

from abc import ABC, abstractmethod
from typing import Optional


class ClipboardPort(ABC):
    """Contract for clipboard operations."""

    @abstractmethod
    def read_text(self) -> Optional[str]:
        """Return the current text snapshot of the clipboard.

        Returns ``None`` when the clipboard is reachable but holds no
        text (empty, or non-text data such as an image).

        Raises:
            ClipboardUnavailableError: If no clipboard backend is available.
        """
        ...
