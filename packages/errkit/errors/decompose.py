"""Recursive decomposition of arbitrary errors into an ``ErrorX``.

Strategies are tried in a fixed order and the first matching one wins:

1. the error is already an ``ErrorX``: merge it;
2. the target is full, or the error was already visited on this path: stop;
3. multi-child errors: recurse into every child;
4. single-child errors: recurse into the child;
5. cause-shaped errors: keep the cause, recurse into the remaining text;
6. plain errors: split the text on known delimiters, or keep it as a leaf.

The guards in step 2 run on every recursive entry so cyclic or unbounded
unwrap chains terminate even when they never produce a leaf.
"""

from __future__ import annotations

from . import codes
from .errorx import ErrorX
from .probes import probe_cause, probe_child, probe_children
from .types import MessageError

# Marker, split separator, reversed visit order.
_TEXT_MARKERS: tuple[tuple[str, str, bool], ...] = (
    (codes.DELIM_ARROW, codes.DELIM_ARROW, True),
    (codes.DELIM_ARROW_SERIALIZED, codes.DELIM_ARROW_SERIALIZED, True),
    (codes.DELIM_SEMICOLON, codes.DELIM_SEMICOLON, False),
    (codes.MULTILINE_ERR_PREFIX, codes.DELIM_MULTILINE, False),
)


def parse_error(
    target: ErrorX,
    err: BaseException | None,
    _path: frozenset[int] = frozenset(),
) -> None:
    """Decompose ``err`` into ``target``; never raises for any input error."""
    if err is None:
        return

    if isinstance(err, ErrorX):
        target.merge(err)
        return

    if target.full or id(err) in _path or len(_path) >= codes.MAX_UNWRAP_NESTING:
        return
    path = _path | {id(err)}

    children = probe_children(err)
    if children is not None:
        if not children:
            _parse_text(target, str(err), path)
            return
        for child in children:
            parse_error(target, child, path)
        return

    is_wrapper, child = probe_child(err)
    if is_wrapper:
        if child is not None:
            parse_error(target, child, path)
        else:
            _parse_text(target, str(err), path)
        return

    cause = probe_cause(err)
    if cause is not None:
        target._append(cause)
        remaining = str(err).replace(str(cause), "")
        _parse_text(target, remaining, path)
        return

    _parse_plain(target, err, path)


def classify_into(target: ErrorX, err: BaseException | None) -> None:
    """Decompose ``err`` into ``target``, keeping its text when nothing survives.

    Delimiter-only messages and cyclic unwrap chains can decompose to nothing;
    a target left empty then keeps ``err`` as a single opaque leaf.
    """
    parse_error(target, err)
    if err is None or isinstance(err, ErrorX) or target.errors():
        return
    _keep_text(target, err)


def _parse_plain(target: ErrorX, err: BaseException, path: frozenset[int]) -> None:
    if _split_text(target, str(err), path):
        return
    _keep_text(target, err)


def _keep_text(target: ErrorX, err: BaseException) -> None:
    text = str(err)
    stripped = text.strip()
    if stripped == text:
        target._append(err)
    else:
        target._append(MessageError(stripped))


def _parse_text(target: ErrorX, text: str, path: frozenset[int]) -> None:
    # Fragments recovered from other errors; empty ones carry nothing.
    if not text.strip():
        return
    parse_error(target, MessageError(text.strip()), path)


def _split_text(target: ErrorX, text: str, path: frozenset[int]) -> bool:
    for marker, separator, reverse in _TEXT_MARKERS:
        if marker not in text:
            continue
        body = text
        if marker == codes.MULTILINE_ERR_PREFIX:
            body = text.replace(codes.MULTILINE_ERR_PREFIX, "")
        parts = body.split(separator)
        if reverse:
            parts.reverse()
        for part in parts:
            _parse_text(target, part, path)
        return True
    return False
