"""Small value types shared by the errkit error container and engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Attr:
    """One structured key-value attribute attached to an error."""

    key: str
    value: Any

    def __str__(self) -> str:
        """Return ``key=value`` form used in rendered errors."""
        return f"{self.key}={self.value}"


class MessageError(Exception):
    """Plain error carrying only a message.

    Used for leaves created from text: explicit messages and fragments
    recovered from delimiter-joined error strings.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"MessageError({self.message!r})"
