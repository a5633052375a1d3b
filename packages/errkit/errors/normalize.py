"""Kind detection for arbitrary exceptions.

Explicit kinds always win. Otherwise the classified leaves are matched
against caller-provided kinds first, then the built-in detectors.
"""

from __future__ import annotations

from packages.errkit.config import ErrorConfig

from .errorx import from_error
from .kinds import (
    BUILTIN_KINDS,
    ERR_KIND_DEADLINE,
    ERR_KIND_NETWORK_PERMANENT,
    ERR_KIND_NETWORK_TEMPORARY,
    ERR_KIND_UNKNOWN,
    ErrKind,
)


def get_kind(
    err: BaseException | None,
    *defaults: ErrKind,
    config: ErrorConfig | None = None,
) -> ErrKind:
    """Return the kind of ``err``, detecting it when none was set."""
    error = from_error(err, config=config)
    if error is None:
        return ERR_KIND_UNKNOWN
    explicit = error.explicit_kind
    if explicit is not None and explicit.id:
        return explicit
    for kind in (*defaults, *BUILTIN_KINDS):
        if kind.represents(error):
            return kind
    return ERR_KIND_UNKNOWN


def is_kind(
    err: BaseException | None,
    *kinds: ErrKind,
    config: ErrorConfig | None = None,
) -> bool:
    """Return whether ``err`` is of any of ``kinds`` or one of their descendants."""
    if err is None:
        return False
    actual = get_kind(err, *kinds, config=config)
    return any(kind.is_(actual) or kind.is_parent(actual) for kind in kinds)


def is_network_temporary(err: BaseException | None) -> bool:
    """Return whether ``err`` is a temporary network failure."""
    return is_kind(err, ERR_KIND_NETWORK_TEMPORARY)


def is_network_permanent(err: BaseException | None) -> bool:
    """Return whether ``err`` is a permanent network failure."""
    return is_kind(err, ERR_KIND_NETWORK_PERMANENT)


def is_deadline(err: BaseException | None) -> bool:
    """Return whether ``err`` is a deadline failure."""
    return is_kind(err, ERR_KIND_DEADLINE)
