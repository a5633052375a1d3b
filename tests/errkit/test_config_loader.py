"""Tests for pydantic-settings-backed errkit configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from packages.errkit.config import (
    ErrorConfig,
    get_error_config,
    load_settings,
    reset_settings_cache,
)
from packages.errkit.errors import new


def _write_config(path: Path, *lines: str) -> Path:
    """Write a YAML config file and return its path."""
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def test_load_settings_uses_model_defaults_when_sources_missing(tmp_path: Path) -> None:
    """Settings should fall back to model defaults without env or YAML."""
    settings = load_settings(config_path=tmp_path / "errkit.yaml")

    assert settings.max_error_depth == 3
    assert settings.error_separator == "; "
    assert settings.logging.level == "INFO"
    assert settings.logging.service == "errkit"
    assert settings.error_config() == ErrorConfig()


def test_load_settings_reads_yaml_file(tmp_path: Path) -> None:
    """YAML values should override model defaults."""
    config_file = _write_config(
        tmp_path / "errkit.yaml",
        "max_error_depth: 4",
        "error_separator: ' | '",
        "logging:",
        "  json_output: false",
    )

    settings = load_settings(config_path=config_file)

    assert settings.max_error_depth == 4
    assert settings.error_separator == " | "
    assert settings.logging.json_output is False
    assert settings.logging.level == "INFO"


def test_load_settings_reads_legacy_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Unprefixed legacy variables should configure the engine."""
    monkeypatch.setenv("MAX_ERROR_DEPTH", "5")
    monkeypatch.setenv("ERROR_SEPERATOR", " / ")

    settings = load_settings(config_path=tmp_path / "errkit.yaml")

    assert settings.max_error_depth == 5
    assert settings.error_separator == " / "


def test_load_settings_uses_errkit_precedence_cascade(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Init params beat prefixed env, which beats legacy env, then YAML."""
    config_file = _write_config(
        tmp_path / "errkit.yaml",
        "max_error_depth: 4",
        "error_separator: ' | '",
        "logging:",
        "  level: WARNING",
    )
    monkeypatch.setenv("MAX_ERROR_DEPTH", "5")
    monkeypatch.setenv("ERRKIT_MAX_ERROR_DEPTH", "6")
    monkeypatch.setenv("ERROR_SEPERATOR", " / ")
    monkeypatch.setenv("ERRKIT_LOGGING__LEVEL", "ERROR")

    settings = load_settings(config_path=config_file)
    assert settings.max_error_depth == 6
    assert settings.error_separator == " / "
    assert settings.logging.level == "ERROR"

    settings = load_settings(
        cli_params={"max_error_depth": 8, "logging": {"level": "DEBUG"}},
        config_path=config_file,
    )
    assert settings.max_error_depth == 8
    assert settings.logging.level == "DEBUG"


def test_load_settings_rejects_invalid_depth(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A non-positive depth bound should fail validation."""
    monkeypatch.setenv("ERRKIT_MAX_ERROR_DEPTH", "0")

    with pytest.raises(ValidationError):
        load_settings(config_path=tmp_path / "errkit.yaml")


def test_error_config_is_immutable() -> None:
    """Engine configuration should be frozen once built."""
    config = ErrorConfig(max_depth=4)

    with pytest.raises(ValidationError):
        config.max_depth = 9  # type: ignore[misc]
    with pytest.raises(ValidationError):
        ErrorConfig(separator="")


def test_get_error_config_is_cached_per_process(monkeypatch: pytest.MonkeyPatch) -> None:
    """The process-wide config should be loaded once until the cache is reset."""
    monkeypatch.setenv("ERRKIT_MAX_ERROR_DEPTH", "5")
    assert get_error_config().max_depth == 5
    assert new("x").config.max_depth == 5

    monkeypatch.setenv("ERRKIT_MAX_ERROR_DEPTH", "7")
    assert get_error_config().max_depth == 5

    reset_settings_cache()
    assert get_error_config().max_depth == 7
