"""Rendering and serialization for ``ErrorX``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from . import codes

if TYPE_CHECKING:
    from .errorx import ErrorX

_JSON_SCALARS = (str, int, float, bool, type(None))


class ErrorPayload(BaseModel):
    """Serialized form of an error: kind, leaf messages and attributes."""

    model_config = ConfigDict(frozen=True)

    kind: str
    errors: list[str] = Field(default_factory=list)
    attrs: dict[str, Any] | None = None


def render(error: ErrorX) -> str:
    """Return ``errKind=<kind> [k=v ...] leaf1<sep>leaf2...``.

    The kind and attribute prefixes are omitted when absent.
    """
    prefix = ""
    kind = error.explicit_kind
    if kind is not None and kind.id:
        prefix += f"{codes.KIND_PREFIX}{kind.id} "
    attrs = error.attrs()
    if attrs:
        prefix += render_attrs(attrs) + " "
    return prefix + error.config.separator.join(str(leaf) for leaf in error.errors())


def render_attrs(attrs: list) -> str:
    """Return the group form ``[k1=v1 k2=v2]``."""
    return "[" + " ".join(str(attr) for attr in attrs) + "]"


def serialize(error: ErrorX) -> ErrorPayload:
    """Return the structured payload for ``error``."""
    attrs = {attr.key: _json_value(attr.value) for attr in error.attrs()}
    return ErrorPayload(
        kind=error.kind.id,
        errors=[str(leaf) for leaf in error.errors()],
        attrs=attrs or None,
    )


def _json_value(value: Any) -> Any:
    if isinstance(value, _JSON_SCALARS):
        return value
    return str(value)
