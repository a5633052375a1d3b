"""Stdout logging configuration for errkit consumers.

Every record that carries an exception, or is logged inside an
``error_context`` block, is emitted with the classified error: its kind,
leaves, cause and attributes.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from packages.errkit.config import LoggingSettings

from . import fields
from .errors import error_fields, record_error


class ErrorFieldsFilter(logging.Filter):
    """Classify the error a record describes and store its fields on the record."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Store the classified error fields on ``record``; never drops it."""
        setattr(record, fields.ERROR, error_fields(record_error(record)))
        return True


def _record_fields(record: logging.LogRecord) -> dict[str, Any]:
    # Formatters also work on handlers configured without the filter.
    values = getattr(record, fields.ERROR, None)
    if isinstance(values, dict):
        return values
    return error_fields(record_error(record))


class JsonFormatter(logging.Formatter):
    """Emit newline-delimited JSON logs with the classified error under ``error``."""

    def __init__(self, *, service: str | None = None, environment: str | None = None) -> None:
        super().__init__()
        self._static = {
            key: value
            for key, value in ((fields.SERVICE, service), (fields.ENVIRONMENT, environment))
            if value
        }

    def format(self, record: logging.LogRecord) -> str:
        """Render ``record`` as one compact JSON object."""
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.now(UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
            **self._static,
        }
        error = _record_fields(record)
        if error:
            payload[fields.ERROR] = error
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Human-readable formatter ending in ``error_kind=`` and ``errors=`` pairs."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def formatException(self, ei: Any) -> str:
        """Omit tracebacks; the classified leaves describe the error instead."""
        return ""

    def format(self, record: logging.LogRecord) -> str:
        """Render ``record`` as one line with classified error pairs."""
        message = super().format(record).rstrip()
        error = _record_fields(record)
        if not error:
            return message
        leaves = " | ".join(error[fields.ERRORS])
        return f"{message} {fields.ERROR_KIND}={error[fields.ERROR_KIND]} {fields.ERRORS}={leaves!r}"


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """Replace root handlers with one stdout handler that logs classified errors."""
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(ErrorFieldsFilter())
    if json_output:
        handler.setFormatter(JsonFormatter(service=service, environment=environment))
    else:
        handler.setFormatter(PlainFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level.upper())


def configure_from_settings(settings: LoggingSettings) -> None:
    """Configure logging from a ``LoggingSettings`` model."""
    configure_logging(
        level=settings.level,
        json_output=settings.json_output,
        service=settings.service,
        environment=settings.environment,
    )
