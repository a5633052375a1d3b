"""Logging of classified errors on top of Python's ``logging`` module."""

from .config import (
    ErrorFieldsFilter,
    JsonFormatter,
    PlainFormatter,
    configure_from_settings,
    configure_logging,
)
from .errors import current_error, error_context, error_fields, record_error

__all__ = [
    "configure_from_settings",
    "configure_logging",
    "current_error",
    "error_context",
    "error_fields",
    "ErrorFieldsFilter",
    "JsonFormatter",
    "PlainFormatter",
    "record_error",
]
