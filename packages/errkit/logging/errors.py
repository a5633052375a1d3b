"""Structured log fields for classified errors.

Records logged with exception info describe that exception. Records logged
inside an ``error_context`` block describe the error bound to the block.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator

from packages.errkit.errors import ErrorX, from_error, get_kind

from . import fields

_CURRENT_ERROR: ContextVar[ErrorX | None] = ContextVar("errkit_current_error", default=None)


def error_fields(err: BaseException | None) -> dict[str, Any]:
    """Return structured log fields describing ``err``.

    Empty for ``None``. ``error_attrs`` is only present when the classified
    error carries attributes.
    """
    error = from_error(err)
    if error is None:
        return {}
    payload = error.to_dict()
    output: dict[str, Any] = {
        fields.ERROR_KIND: get_kind(error).id,
        fields.ERRORS: payload["errors"],
    }
    cause = error.cause()
    if cause is not None:
        output[fields.ERROR_CAUSE] = str(cause)
    if "attrs" in payload:
        output[fields.ERROR_ATTRS] = payload["attrs"]
    return output


def current_error() -> ErrorX | None:
    """Return the classified error bound by the innermost ``error_context``."""
    return _CURRENT_ERROR.get()


@contextmanager
def error_context(err: BaseException | None) -> Iterator[ErrorX | None]:
    """Attach the classified form of ``err`` to records logged in the block.

    Yields the classified error. ``None`` hides any error bound by an outer
    block.
    """
    error = from_error(err)
    token = _CURRENT_ERROR.set(error)
    try:
        yield error
    finally:
        _CURRENT_ERROR.reset(token)


def record_error(record: logging.LogRecord) -> BaseException | None:
    """Return the error a record describes: its exception, else the bound error."""
    if record.exc_info and record.exc_info[1] is not None:
        return record.exc_info[1]
    return current_error()
