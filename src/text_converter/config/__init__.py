"""text_converter configuration package."""

from text_converter.config.loader import clear_cache, get_config, load_config
from text_converter.config.models import ClipboardConfig, ConverterConfig

__all__ = ["ClipboardConfig", "ConverterConfig", "clear_cache", "get_config", "load_config"]
