"""System clipboard — implements ClipboardPort using subprocess."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Optional

from text_converter.config.loader import get_config
from text_converter.config.models import ClipboardConfig
from text_converter.domain.errors import ClipboardUnavailableError
from text_converter.domain.ports.clipboard_port import ClipboardPort

logger = logging.getLogger(__name__)

# stderr fragments meaning "reachable, but nothing textual to paste"
_NO_TEXT_MARKERS = (
    "target string not available",
    "target utf8_string not available",
    "nothing is copied",
    "no selection",
    "no suitable type of content",
)


def _detect_backend() -> list[str]:
    """Return the paste command appropriate for this OS.

    Returns:
        CLI command tokens (e.g. ``['xclip', '-selection', 'clipboard', '-o']``).

    Raises:
        ClipboardUnavailableError: No supported clipboard tool found.
    """
    if sys.platform == "darwin":
        return ["pbpaste"]

    if sys.platform.startswith("linux"):
        # Prefer xclip, fall back to xsel, then Wayland
        for cmd in (
            ["xclip", "-selection", "clipboard", "-o"],
            ["xsel", "--clipboard", "--output"],
            ["wl-paste", "--no-newline"],
        ):
            try:
                subprocess.run(
                    [cmd[0], "--version"],
                    capture_output=True,
                    check=False,
                )
                return cmd
            except FileNotFoundError:
                continue
        raise ClipboardUnavailableError(
            "Could not fetch the clipboard contents: no clipboard tool found. "
            "Install xclip, xsel or wl-clipboard."
        )

    if sys.platform == "win32":
        return [
            "powershell",
            "-NoProfile",
            "-Command",
            # UTF-8 output, no line ending after the text
            "[Console]::OutputEncoding = [Text.Encoding]::UTF8; "
            "[Console]::Write((Get-Clipboard -Raw))",
        ]

    raise ClipboardUnavailableError(
        f"Could not fetch the clipboard contents: unsupported platform {sys.platform}"
    )


def _reports_no_text(stderr: str) -> bool:
    lowered = stderr.lower()
    return any(marker in lowered for marker in _NO_TEXT_MARKERS)


class SystemClipboard(ClipboardPort):
    """Clipboard adapter using OS-level subprocess commands.

    Every ``read_text`` call spawns its own paste process, so no handle
    outlives the call.
    """

    def __init__(self, config: Optional[ClipboardConfig] = None) -> None:
        self._config = config or get_config().clipboard

    def _command(self) -> list[str]:
        if self._config.paste_command:
            return list(self._config.paste_command)
        return _detect_backend()

    def read_text(self) -> Optional[str]:
        """Read the clipboard text via subprocess."""
        cmd = self._command()
        logger.debug("Reading clipboard with %s", cmd[0])
        try:
            proc = subprocess.run(cmd, capture_output=True, check=False)
        except OSError as exc:
            raise ClipboardUnavailableError(
                f"Could not fetch the clipboard contents: {exc}"
            ) from exc

        if proc.returncode != 0:
            stderr = proc.stderr.decode(self._config.encoding, errors="replace").strip()
            if _reports_no_text(stderr):
                logger.warning("Clipboard holds no text: %s", stderr)
                return None
            detail = stderr or f"{cmd[0]} exited with status {proc.returncode}"
            raise ClipboardUnavailableError(f"Could not fetch the clipboard contents: {detail}")

        try:
            text = proc.stdout.decode(self._config.encoding)
        except UnicodeDecodeError:
            logger.warning("Clipboard holds non-text data")
            return None
        return text or None
