"""Public error API for errkit."""

from . import codes
from .decompose import classify_into, parse_error
from .errorx import ErrorX, error_is, from_error, new
from .factories import get_attr, get_attr_value, join, with_attrs, with_message, wrap
from .kinds import (
    BUILTIN_KINDS,
    ERR_KIND_DEADLINE,
    ERR_KIND_NETWORK,
    ERR_KIND_NETWORK_PERMANENT,
    ERR_KIND_NETWORK_TEMPORARY,
    ERR_KIND_UNKNOWN,
    ErrKind,
    combine_kinds,
    lookup_kind,
    new_kind,
)
from .normalize import (
    get_kind,
    is_deadline,
    is_kind,
    is_network_permanent,
    is_network_temporary,
)
from .probes import HasCause, HasChild, HasChildren
from .render import ErrorPayload, render, serialize
from .types import Attr, MessageError

__all__ = [
    "Attr",
    "BUILTIN_KINDS",
    "ERR_KIND_DEADLINE",
    "ERR_KIND_NETWORK",
    "ERR_KIND_NETWORK_PERMANENT",
    "ERR_KIND_NETWORK_TEMPORARY",
    "ERR_KIND_UNKNOWN",
    "ErrKind",
    "ErrorPayload",
    "ErrorX",
    "HasCause",
    "HasChild",
    "HasChildren",
    "MessageError",
    "classify_into",
    "codes",
    "combine_kinds",
    "error_is",
    "from_error",
    "get_attr",
    "get_attr_value",
    "get_kind",
    "is_deadline",
    "is_kind",
    "is_network_permanent",
    "is_network_temporary",
    "join",
    "lookup_kind",
    "new",
    "new_kind",
    "parse_error",
    "render",
    "serialize",
    "with_attrs",
    "with_message",
    "wrap",
]
