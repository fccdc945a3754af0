"""Shared fixtures for text_converter tests."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest

from text_converter.config import loader
from text_converter.domain.errors import ClipboardUnavailableError
from text_converter.domain.ports.clipboard_port import ClipboardPort


class FakeClipboard(ClipboardPort):
    """In-memory clipboard returning a fixed snapshot."""

    def __init__(self, text: Optional[str]) -> None:
        self.text = text
        self.reads = 0

    def read_text(self) -> Optional[str]:
        self.reads += 1
        return self.text


class BrokenClipboard(ClipboardPort):
    """Clipboard whose service can never be reached."""

    def read_text(self) -> Optional[str]:
        raise ClipboardUnavailableError("Could not fetch the clipboard contents: no display")


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Keep the real per-user config file out of every test."""
    missing = tmp_path_factory.mktemp("no_user_config") / "config.json"
    monkeypatch.setattr(loader, "user_config_path", lambda: missing)
    loader.clear_cache()
    yield
    loader.clear_cache()


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty directory so relative paths stay dot-free."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def fake_clipboard():
    """Factory for in-memory clipboards holding a given snapshot."""
    return FakeClipboard


@pytest.fixture()
def broken_clipboard() -> BrokenClipboard:
    return BrokenClipboard()
