"""Configuration loading utilities with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/errkit/errkit.yaml
4) Built-in defaults

Environment variable format:
- Prefix: ``ERRKIT_``
- Nested keys: ``__`` separator
- Example: ``ERRKIT_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``
- Legacy: ``MAX_ERROR_DEPTH`` and ``ERROR_SEPERATOR`` are read unprefixed.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, ClassVar, Mapping

from .models import ErrkitSettings, ErrorConfig


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> ErrkitSettings:
    """Load settings by applying the standard errkit precedence cascade."""
    params = dict(cli_params) if cli_params is not None else {}
    if config_path is None:
        return ErrkitSettings(**params)

    resolved = Path(config_path)

    class _FileScopedSettings(ErrkitSettings):
        _config_path: ClassVar[Path] = resolved

    return _FileScopedSettings(**params)


@lru_cache(maxsize=1)
def get_settings() -> ErrkitSettings:
    """Return the process-wide settings, loaded once."""
    return load_settings()


def get_error_config() -> ErrorConfig:
    """Return the process-wide immutable engine configuration."""
    return get_settings().error_config()


def reset_settings_cache() -> None:
    """Forget cached settings so the next lookup reloads them."""
    get_settings.cache_clear()
