"""Shared fixtures for errkit tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from packages.errkit.config import reset_settings_cache

_ENGINE_ENV_VARS = (
    "MAX_ERROR_DEPTH",
    "ERROR_SEPERATOR",
    "ERRKIT_MAX_ERROR_DEPTH",
    "ERRKIT_ERROR_SEPARATOR",
    "ERRKIT_LOGGING__LEVEL",
    "ERRKIT_LOGGING__JSON_OUTPUT",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test with default engine settings and a fresh settings cache."""
    for name in _ENGINE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()
