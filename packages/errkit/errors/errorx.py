"""Canonical error container.

``ErrorX`` holds an optional kind, a deduplicated ordered list of leaf
errors, and a set of key-unique attributes. Leaves and attributes are both
bounded by the configured ``max_depth``; anything past the bound is dropped.
"""

from __future__ import annotations

import logging
from typing import Any

from packages.errkit.config import ErrorConfig, get_error_config

from .kinds import ERR_KIND_UNKNOWN, ErrKind, combine_kinds
from .render import ErrorPayload, render, serialize
from .types import Attr, MessageError

_LOGGER = logging.getLogger(__name__)


class ErrorX(Exception):
    """Structured error with a kind, leaf errors and attributes."""

    def __init__(self, *, config: ErrorConfig | None = None) -> None:
        super().__init__()
        self._config = config if config is not None else get_error_config()
        self._kind: ErrKind | None = None
        self._attrs: dict[str, Attr] = {}
        self._errs: list[BaseException] = []
        self._uniq: set[str] = set()

    @property
    def config(self) -> ErrorConfig:
        """Return the engine configuration this error was built with."""
        return self._config

    @property
    def kind(self) -> ErrKind:
        """Return the error kind, ``unknown-error`` when none was set."""
        if self._kind is None or not self._kind.id:
            return ERR_KIND_UNKNOWN
        return self._kind

    @property
    def explicit_kind(self) -> ErrKind | None:
        """Return the kind only when one was set."""
        return self._kind

    @property
    def full(self) -> bool:
        """Return whether the leaf bound has been reached."""
        return len(self._errs) >= self._config.max_depth

    def errors(self) -> list[BaseException]:
        """Return leaf errors in insertion order."""
        return list(self._errs)

    def unwrap_errors(self) -> list[BaseException]:
        """Return leaf errors so other containers can decompose this one."""
        return list(self._errs)

    def attrs(self) -> list[Attr]:
        """Return attributes in insertion order."""
        return list(self._attrs.values())

    def cause(self) -> BaseException | None:
        """Return the first leaf, the origin of the chain."""
        if self._errs:
            return self._errs[0]
        return None

    def build(self) -> BaseException:
        """Return this container as a raisable error."""
        return self

    def add_message(self, message: str, *args: object) -> ErrorX:
        """Append one message leaf, ``%``-formatted when args are given."""
        text = message % args if args else message
        self._append(MessageError(text))
        return self

    def set_kind(self, kind: ErrKind | None) -> ErrorX:
        """Set the kind, combining with any kind already present."""
        if self._kind is None:
            self._kind = kind
        else:
            self._kind = combine_kinds(self._kind, kind)
        return self

    def set_attrs(self, *attrs: Attr) -> ErrorX:
        """Add attributes; existing keys and attributes past the bound are ignored."""
        for attr in attrs:
            if attr.key in self._attrs:
                continue
            if len(self._attrs) >= self._config.max_depth:
                _LOGGER.debug(
                    "Error attribute dropped at depth bound",
                    extra={"attr_key": attr.key, "max_depth": self._config.max_depth},
                )
                continue
            self._attrs[attr.key] = attr
        return self

    def get_attr(self, key: str) -> Attr | None:
        """Return the attribute stored under ``key``, if any."""
        return self._attrs.get(key)

    def matches(self, other: BaseException | None) -> bool:
        """Return whether any leaf of ``other`` matches any leaf of this error."""
        from .decompose import classify_into

        if other is None:
            return False
        candidates = ErrorX(config=self._config)
        classify_into(candidates, other)
        return any(
            error_is(orig, candidate)
            for orig in self._errs
            for candidate in candidates._errs
        )

    def merge(self, other: ErrorX) -> ErrorX:
        """Merge leaves, kind and attributes of another container."""
        self._append(*other._errs)
        self._kind = combine_kinds(self._kind, other._kind)
        self.set_attrs(*other._attrs.values())
        return self

    def to_payload(self) -> ErrorPayload:
        """Return the serialized form as an ``ErrorPayload`` model."""
        return serialize(self)

    def to_dict(self) -> dict[str, Any]:
        """Return the serialized form as plain python data."""
        return serialize(self).model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        """Return the serialized form as a JSON string."""
        return serialize(self).model_dump_json(exclude_none=True)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"ErrorX({render(self)!r})"

    def _append(self, *errs: BaseException) -> None:
        for err in errs:
            key = str(err)
            if key in self._uniq:
                continue
            if self.full:
                _LOGGER.debug(
                    "Error leaf dropped at depth bound",
                    extra={"leaf": key, "max_depth": self._config.max_depth},
                )
                continue
            self._uniq.add(key)
            self._errs.append(err)


def error_is(err: BaseException, target: BaseException) -> bool:
    """Return whether ``err`` or an error in its ``__cause__`` chain is ``target``.

    Errors match by identity, or by identical type and message. Text leaves
    recovered from joined messages match any error with the same message.
    """
    seen: set[int] = set()
    cursor: BaseException | None = err
    while cursor is not None and id(cursor) not in seen:
        if cursor is target:
            return True
        if _same_error(cursor, target):
            return True
        seen.add(id(cursor))
        cursor = cursor.__cause__
    return False


def _same_error(err: BaseException, target: BaseException) -> bool:
    if str(err) != str(target):
        return False
    if isinstance(err, MessageError) or isinstance(target, MessageError):
        return True
    return type(err) is type(target)


def new(message: str, *args: object, config: ErrorConfig | None = None) -> ErrorX:
    """Create an error with a single message leaf."""
    error = ErrorX(config=config)
    error.add_message(message, *args)
    return error


def from_error(
    err: BaseException | None, *, config: ErrorConfig | None = None
) -> ErrorX | None:
    """Classify any error into an ``ErrorX``; ``None`` stays ``None``."""
    from .decompose import classify_into

    if err is None:
        return None
    error = ErrorX(config=config)
    classify_into(error, err)
    return error
