"""Capability probes for error decomposition.

Each probe reports whether an arbitrary exception exposes one decomposition
shape and, when it does, returns the pieces the engine needs. Probes are
checked in a fixed order by ``parse_error``: children, child, cause.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class HasChildren(Protocol):
    """Error exposing an ordered list of child errors."""

    def unwrap_errors(self) -> Sequence[BaseException]:
        """Return child errors in order."""


@runtime_checkable
class HasChild(Protocol):
    """Error wrapping exactly one child error."""

    def unwrap(self) -> BaseException | None:
        """Return the wrapped error, if any."""


@runtime_checkable
class HasCause(Protocol):
    """Error exposing a root cause whose text appears in its own message."""

    def cause(self) -> BaseException | None:
        """Return the root cause error."""


def probe_children(error: BaseException) -> list[BaseException] | None:
    """Return child errors for multi-child errors, else ``None``.

    Native exception groups count as multi-child errors.
    """
    if isinstance(error, BaseExceptionGroup):
        return list(error.exceptions)
    if _implements(error, HasChildren, "unwrap_errors"):
        return [
            child
            for child in error.unwrap_errors() or ()
            if isinstance(child, BaseException)
        ]
    return None


def probe_child(error: BaseException) -> tuple[bool, BaseException | None]:
    """Return ``(True, child)`` for single-child errors, else ``(False, None)``."""
    if _implements(error, HasChild, "unwrap"):
        child = error.unwrap()
        return True, child if isinstance(child, BaseException) else None
    return False, None


def probe_cause(error: BaseException) -> BaseException | None:
    """Return the root cause for cause-shaped errors, else ``None``.

    A ``cause()`` that returns anything other than an exception does not make
    the error cause-shaped.
    """
    if _implements(error, HasCause, "cause"):
        cause = error.cause()
        if isinstance(cause, BaseException):
            return cause
    return None


def _implements(error: BaseException, protocol: type, method: str) -> bool:
    # Protocol checks only test attribute presence; plain ``cause`` fields
    # on dataclass errors must not qualify.
    return isinstance(error, protocol) and callable(getattr(error, method, None))
