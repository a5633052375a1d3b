"""errkit: canonical classification of wrapped and text-joined errors."""

from .errors import (
    Attr,
    ErrKind,
    ErrorX,
    from_error,
    get_kind,
    is_kind,
    join,
    new,
    with_attrs,
    wrap,
)

__all__ = [
    "Attr",
    "ErrKind",
    "ErrorX",
    "from_error",
    "get_kind",
    "is_kind",
    "join",
    "new",
    "with_attrs",
    "wrap",
]
