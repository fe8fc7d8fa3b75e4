"""Single-line host buffer that applies one primitive per call."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from prompt_handoff.runtime import telemetry

from .primitives import BufferPrimitive, span_of
from .sync import LineSnapshot
from .validation import clamp_offset, ensure_range


@dataclass(slots=True)
class LineDelta:
    version: int
    text: str
    cursor: int
    kind: str


class LineBuffer:
    """Reference ``LineHost`` used by adapters and tests.

    Holds one line of text plus a cursor offset. Every applied primitive bumps
    ``version``, even a no-op, so hosts can tell a trigger ran.
    """

    def __init__(
        self, text: str = "", *, cursor: Optional[int] = None, name: str = "prompt"
    ) -> None:
        self.name = name
        self.text = text
        self.cursor = len(text) if cursor is None else clamp_offset(text, cursor)
        self.version = 0

    def read_line(self) -> LineSnapshot:
        return LineSnapshot(text=self.text, cursor=self.cursor)

    def apply_primitive(self, primitive: BufferPrimitive) -> None:
        self.apply(primitive)

    def apply(self, primitive: BufferPrimitive) -> LineDelta:
        bounds = span_of(primitive)
        if bounds is not None:
            ensure_range(self.text, *bounds)
        with Transaction(self, primitive.kind):
            self.text, self.cursor = primitive.apply_to(self.text, self.cursor)
            self.version += 1
        return LineDelta(
            version=self.version, text=self.text, cursor=self.cursor, kind=primitive.kind
        )


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: LineBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name, "version": self.buffer.version},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
