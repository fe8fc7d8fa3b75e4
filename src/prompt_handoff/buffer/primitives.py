"""The closed set of editing primitives a host line buffer understands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True, slots=True)
class NoOp:
    """Leave the line untouched."""

    @property
    def kind(self) -> str:
        return "noop"

    def apply_to(self, text: str, cursor: int) -> Tuple[str, int]:
        return text, cursor


@dataclass(frozen=True, slots=True)
class InsertAt:
    position: int
    text: str

    @property
    def kind(self) -> str:
        return "insert"

    def apply_to(self, text: str, cursor: int) -> Tuple[str, int]:
        del cursor
        updated = text[: self.position] + self.text + text[self.position :]
        return updated, self.position + len(self.text)


@dataclass(frozen=True, slots=True)
class KillRange:
    """Delete ``[start, end)`` and discard it (nothing reaches a register)."""

    start: int
    end: int

    @property
    def kind(self) -> str:
        return "kill"

    def apply_to(self, text: str, cursor: int) -> Tuple[str, int]:
        del cursor
        return text[: self.start] + text[self.end :], self.start


@dataclass(frozen=True, slots=True)
class ReplaceRange:
    start: int
    end: int
    text: str

    @property
    def kind(self) -> str:
        return "replace"

    def apply_to(self, text: str, cursor: int) -> Tuple[str, int]:
        del cursor
        updated = text[: self.start] + self.text + text[self.end :]
        return updated, self.start + len(self.text)


BufferPrimitive = Union[NoOp, InsertAt, KillRange, ReplaceRange]


def span_of(primitive: BufferPrimitive) -> Tuple[int, int] | None:
    """Return the ``(start, end)`` range a primitive touches, if any."""

    if isinstance(primitive, InsertAt):
        return primitive.position, primitive.position
    if isinstance(primitive, (KillRange, ReplaceRange)):
        return primitive.start, primitive.end
    return None


__all__ = [
    "BufferPrimitive",
    "InsertAt",
    "KillRange",
    "NoOp",
    "ReplaceRange",
    "span_of",
]
