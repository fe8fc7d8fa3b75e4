"""Boundary types for exchanging line state with a host line editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .primitives import BufferPrimitive


@dataclass(frozen=True, slots=True)
class LineSnapshot:
    """The host's line text and cursor offset at trigger time."""

    text: str
    cursor: int = 0


class LineHost(Protocol):
    """What the core needs from a host line editor."""

    def read_line(self) -> LineSnapshot:
        """Return the current line and cursor offset."""
        ...

    def apply_primitive(self, primitive: BufferPrimitive) -> None:
        """Apply ``primitive`` atomically and redraw."""
        ...


class CursorRangeError(RuntimeError):
    """Raised when a host is asked to apply a primitive outside its line."""

    def __init__(
        self, message: str, *, span: tuple[int, int] | None = None, length: int = 0
    ) -> None:
        super().__init__(message)
        self.span = span
        self.length = length
