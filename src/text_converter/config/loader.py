"""Configuration loader for text_converter.

Loads a JSON configuration file and returns a validated ConverterConfig.
Uses module-level caching so each file is only parsed once per process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import platformdirs
from pydantic import ValidationError

from text_converter.config.models import ConverterConfig
from text_converter.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

_APP_NAME = "text_converter"
_USER_CONFIG_FILENAME = "config.json"

# Module-level cache
_config_cache: dict[str, ConverterConfig] = {}

# Default config path, next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "converter_default.json"


def user_config_path() -> Path:
    """Location of the per-user override file (may not exist)."""
    return Path(platformdirs.user_config_dir(_APP_NAME)) / _USER_CONFIG_FILENAME


def _resolve_path(path: Optional[Path]) -> Path:
    if path is not None:
        return Path(path)
    user_path = user_config_path()
    if user_path.is_file():
        return user_path
    return _DEFAULT_CONFIG_PATH


def load_config(path: Optional[Path] = None) -> ConverterConfig:
    """Load and validate configuration from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON config file. If ``None``, the per-user file
        is used when present, otherwise the built-in
        ``converter_default.json``.

    Returns
    -------
    ConverterConfig
        Validated configuration instance.

    Raises
    ------
    FileNotFoundError
        If the specified path does not exist.
    ConfigurationError
        If the file is not valid JSON or does not match the schema.
    """
    config_path = _resolve_path(path)
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = ConverterConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid config file {config_path}: {exc}") from exc

    logger.debug("Loaded configuration from %s", config_path)
    _config_cache[cache_key] = config
    return config


def get_config() -> ConverterConfig:
    """Get the active configuration (cached)."""
    return load_config()


def clear_cache() -> None:
    """Clear the config cache (used by tests)."""
    _config_cache.clear()
