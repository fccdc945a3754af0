"""Infrastructure layer — external system adapters."""

from text_converter.infrastructure.clipboard.system_clipboard import SystemClipboard

__all__ = ["SystemClipboard"]
