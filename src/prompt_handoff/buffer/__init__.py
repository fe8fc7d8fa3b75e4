"""Buffer primitives and the host-side line model that applies them."""

from .line import LineBuffer, LineDelta, Transaction
from .primitives import (
    BufferPrimitive,
    InsertAt,
    KillRange,
    NoOp,
    ReplaceRange,
    span_of,
)
from .sync import CursorRangeError, LineHost, LineSnapshot
from .validation import clamp_offset, ensure_range

__all__ = [
    "BufferPrimitive",
    "NoOp",
    "InsertAt",
    "KillRange",
    "ReplaceRange",
    "span_of",
    "LineBuffer",
    "LineDelta",
    "Transaction",
    "LineHost",
    "LineSnapshot",
    "CursorRangeError",
    "clamp_offset",
    "ensure_range",
]
