"""Factory helpers for building and extending errkit errors.

Every helper accepts ``None`` and returns ``None`` for it, so callers can
pass through optional errors without checking first. Helpers that classify
an error take an optional ``config``; the process-wide one is used otherwise.
"""

from __future__ import annotations

from typing import Any

from packages.errkit.config import ErrorConfig

from .decompose import classify_into
from .errorx import ErrorX, from_error
from .types import Attr


def wrap(
    err: BaseException | None,
    message: str,
    *args: object,
    config: ErrorConfig | None = None,
) -> ErrorX | None:
    """Classify ``err`` and append ``message`` as its outermost context."""
    error = from_error(err, config=config)
    if error is None:
        return None
    return error.add_message(message, *args)


def with_message(err: ErrorX | None, message: str, *args: object) -> ErrorX | None:
    """Append a message to an existing container; no-op for ``None``."""
    if err is None:
        return None
    return err.add_message(message, *args)


def with_attrs(
    err: BaseException | None,
    *attrs: Attr,
    config: ErrorConfig | None = None,
    **values: Any,
) -> ErrorX | None:
    """Classify ``err`` and attach attributes.

    Positional ``Attr`` values are added before keyword values. An attribute
    named ``config`` must be passed as a positional ``Attr``.
    """
    error = from_error(err, config=config)
    if error is None:
        return None
    error.set_attrs(*attrs)
    error.set_attrs(*(Attr(key, value) for key, value in values.items()))
    return error


def join(*errs: BaseException | None, config: ErrorConfig | None = None) -> ErrorX | None:
    """Decompose every error, in order, into a single container.

    Returns ``None`` when no leaf is found.
    """
    error = ErrorX(config=config)
    for err in errs:
        classify_into(error, err)
    if not error.errors():
        return None
    return error


def get_attr(
    err: BaseException | None, key: str, *, config: ErrorConfig | None = None
) -> Attr | None:
    """Return the attribute ``key`` of a classified error, if present."""
    error = from_error(err, config=config)
    if error is None:
        return None
    return error.get_attr(key)


def get_attr_value(
    err: BaseException | None,
    key: str,
    default: Any = None,
    *,
    config: ErrorConfig | None = None,
) -> Any:
    """Return the value of attribute ``key``, or ``default``."""
    attr = get_attr(err, key, config=config)
    if attr is None:
        return default
    return attr.value
