"""Typed configuration models for errkit runtime settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "errkit" / "errkit.yaml"
DEFAULT_MAX_ERROR_DEPTH = 3
DEFAULT_ERROR_SEPARATOR = "; "


class ErrorConfig(BaseModel):
    """Immutable engine configuration injected into every error container.

    ``max_depth`` bounds both the number of leaves and the number of
    attributes a container keeps, and terminates decomposition.
    """

    model_config = ConfigDict(frozen=True)

    max_depth: int = Field(default=DEFAULT_MAX_ERROR_DEPTH, gt=0)
    separator: str = Field(default=DEFAULT_ERROR_SEPARATOR, min_length=1)


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "errkit"
    environment: str = "dev"


class ErrkitSettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/defaults sources.

    The engine settings also honor the unprefixed ``MAX_ERROR_DEPTH`` and
    ``ERROR_SEPERATOR`` variables used by older deployments.
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRKIT_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    max_error_depth: int = Field(default=DEFAULT_MAX_ERROR_DEPTH, gt=0)
    error_separator: str = Field(default=DEFAULT_ERROR_SEPARATOR, min_length=1)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    _config_path: ClassVar[Path] = DEFAULT_CONFIG_PATH

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply errkit precedence: init > env > legacy env > yaml > defaults."""
        return (
            init_settings,
            env_settings,
            LegacyEnvSettingsSource(settings_cls),
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=cls._config_path,
                yaml_file_encoding="utf-8",
            ),
        )

    def error_config(self) -> ErrorConfig:
        """Return the immutable engine configuration for these settings."""
        return ErrorConfig(
            max_depth=self.max_error_depth,
            separator=self.error_separator,
        )


class LegacyEnvSettingsSource(PydanticBaseSettingsSource):
    """Read the unprefixed engine variables used by older deployments."""

    _ENV_NAMES: ClassVar[dict[str, str]] = {
        "max_error_depth": "MAX_ERROR_DEPTH",
        "error_separator": "ERROR_SEPERATOR",
    }

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return the legacy variable value for ``field_name``, if one is set."""
        env_name = self._ENV_NAMES.get(field_name)
        if env_name is None:
            return None, field_name, False
        return os.environ.get(env_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            value, key, _ = self.get_field_value(field, field_name)
            if value is not None:
                data[key] = value
        return data
