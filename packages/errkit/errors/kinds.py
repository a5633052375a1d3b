"""Error kinds (classification tags) and the kind combination policy.

Kinds form a small tree: a kind may name a parent it refines. Every kind has
an integer precedence and descendants always outrank their ancestors, so the
precedence table is a single total order:

    unknown-error (0) < network-error (10) < network-permanent-error (20)
        < network-temporary-error (30) < deadline-error (40)

``combine_kinds`` keeps the highest-precedence kind; equal precedence is
settled by the lexicographically smaller id. The result never depends on
argument order.
"""

from __future__ import annotations

import socket
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterable

from . import codes

if TYPE_CHECKING:
    from .errorx import ErrorX

KindMatcher = Callable[["ErrorX"], bool]


@dataclass(frozen=True)
class ErrKind:
    """One error classification tag.

    Equality and hashing use ``id`` only.
    """

    id: str
    description: str = ""
    parent: ErrKind | None = field(default=None, compare=False)
    precedence: int = field(default=1, compare=False)
    matcher: KindMatcher | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        """Return the kind id."""
        return self.id

    def is_(self, other: ErrKind | None) -> bool:
        """Return whether ``other`` names the same kind."""
        return other is not None and self.id == other.id

    def is_parent(self, other: ErrKind | None) -> bool:
        """Return whether this kind is a strict ancestor of ``other``."""
        cursor = other.parent if other is not None else None
        while cursor is not None:
            if cursor.id == self.id:
                return True
            cursor = cursor.parent
        return False

    def represents(self, error: ErrorX) -> bool:
        """Return whether this kind's matcher recognizes ``error``."""
        if self.matcher is None:
            return False
        return self.matcher(error)


_REGISTRY: dict[str, ErrKind] = {}


def new_kind(
    id: str,
    description: str,
    *,
    parent: ErrKind | None = None,
    precedence: int | None = None,
    matcher: KindMatcher | None = None,
) -> ErrKind:
    """Create and register a new error kind.

    Precedence defaults to one above the parent (or 1 without a parent).
    Raises ``ValueError`` for duplicate ids or a precedence that would not
    outrank the parent.
    """
    if not id:
        raise ValueError("error kind id must be non-empty")
    if id in _REGISTRY:
        raise ValueError(f"error kind already registered: {id}")
    if precedence is None:
        precedence = parent.precedence + 1 if parent is not None else 1
    if precedence < 1 and id != codes.KIND_UNKNOWN:
        raise ValueError(f"error kind precedence must be positive: {id}")
    if parent is not None and precedence <= parent.precedence:
        raise ValueError(
            f"error kind {id} must outrank its parent {parent.id} "
            f"({precedence} <= {parent.precedence})"
        )
    kind = ErrKind(
        id=id,
        description=description,
        parent=parent,
        precedence=precedence,
        matcher=matcher,
    )
    _REGISTRY[id] = kind
    return kind


def lookup_kind(id: str) -> ErrKind | None:
    """Return the registered kind with ``id``, if any."""
    return _REGISTRY.get(id)


def combine_kinds(*kinds: ErrKind | None) -> ErrKind | None:
    """Combine kinds into the single most specific one.

    ``None`` entries are ignored and ``unknown-error`` yields to any other
    kind. Returns ``None`` when no kind is given.
    """
    result: ErrKind | None = None
    for kind in kinds:
        result = _combine(result, kind)
    return result


def _combine(current: ErrKind | None, other: ErrKind | None) -> ErrKind | None:
    if current is None:
        return other
    if other is None or current.is_(other):
        return current
    if current.id == codes.KIND_UNKNOWN:
        return other
    if other.id == codes.KIND_UNKNOWN:
        return current
    if current.is_parent(other):
        return other
    if other.is_parent(current):
        return current
    if current.precedence != other.precedence:
        return current if current.precedence > other.precedence else other
    return current if current.id < other.id else other


# Leaf matchers

_TEMPORARY_TYPES: tuple[type[BaseException], ...] = (
    TimeoutError,
    ConnectionResetError,
    ConnectionAbortedError,
    BrokenPipeError,
)
_TEMPORARY_MARKERS = (
    "i/o timeout",
    "connection reset by peer",
    "broken pipe",
    "temporary failure in name resolution",
    "timed out",
    "try again",
)
_PERMANENT_TYPES: tuple[type[BaseException], ...] = (
    ConnectionRefusedError,
    socket.gaierror,
)
_PERMANENT_MARKERS = (
    "connection refused",
    "no such host",
    "no address found for host",
    "name or service not known",
    "network is unreachable",
    "could not resolve host",
)
_DEADLINE_MARKERS = (
    "context deadline exceeded",
    "deadline exceeded",
)


def _leaves_match(
    error: ErrorX,
    types: tuple[type[BaseException], ...],
    markers: Iterable[str],
) -> bool:
    for leaf in error.errors():
        if types and isinstance(leaf, types):
            return True
        text = str(leaf).lower()
        if any(marker in text for marker in markers):
            return True
    return False


def _is_network_temporary(error: ErrorX) -> bool:
    # Deadline text wins over generic timeouts.
    if _is_deadline(error):
        return False
    return _leaves_match(error, _TEMPORARY_TYPES, _TEMPORARY_MARKERS)


def _is_network_permanent(error: ErrorX) -> bool:
    return _leaves_match(error, _PERMANENT_TYPES, _PERMANENT_MARKERS)


def _is_deadline(error: ErrorX) -> bool:
    return _leaves_match(error, (), _DEADLINE_MARKERS)


ERR_KIND_UNKNOWN = new_kind(codes.KIND_UNKNOWN, "unknown error", precedence=0)
ERR_KIND_NETWORK = new_kind(codes.KIND_NETWORK, "network error", precedence=10)
ERR_KIND_NETWORK_PERMANENT = new_kind(
    codes.KIND_NETWORK_PERMANENT,
    "permanent network error",
    parent=ERR_KIND_NETWORK,
    precedence=20,
    matcher=_is_network_permanent,
)
ERR_KIND_NETWORK_TEMPORARY = new_kind(
    codes.KIND_NETWORK_TEMPORARY,
    "temporary network error",
    parent=ERR_KIND_NETWORK,
    precedence=30,
    matcher=_is_network_temporary,
)
ERR_KIND_DEADLINE = new_kind(
    codes.KIND_DEADLINE,
    "deadline error",
    precedence=40,
    matcher=_is_deadline,
)

# Detection order used when no explicit kind is set.
BUILTIN_KINDS: tuple[ErrKind, ...] = (
    ERR_KIND_NETWORK_TEMPORARY,
    ERR_KIND_NETWORK_PERMANENT,
    ERR_KIND_DEADLINE,
)
