"""Public API for errkit configuration utilities."""

from .loader import get_error_config, get_settings, load_settings, reset_settings_cache
from .models import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_ERROR_SEPARATOR,
    DEFAULT_MAX_ERROR_DEPTH,
    ErrkitSettings,
    ErrorConfig,
    LoggingSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_ERROR_SEPARATOR",
    "DEFAULT_MAX_ERROR_DEPTH",
    "ErrkitSettings",
    "ErrorConfig",
    "LoggingSettings",
    "get_error_config",
    "get_settings",
    "load_settings",
    "reset_settings_cache",
]
