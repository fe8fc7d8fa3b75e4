"""Offset checks shared by the reconciler and host buffers."""

from __future__ import annotations

from .sync import CursorRangeError


def clamp_offset(text: str, offset: int) -> int:
    """Pin ``offset`` into ``[0, len(text)]``; past-the-end means end of text."""

    if offset < 0:
        return 0
    return min(offset, len(text))


def ensure_range(text: str, start: int, end: int) -> tuple[int, int]:
    if start < 0 or end > len(text) or start > end:
        raise CursorRangeError(
            "Range out of bounds", span=(start, end), length=len(text)
        )
    return start, end
