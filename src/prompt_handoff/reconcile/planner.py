"""Turn an externally edited line into exactly one buffer primitive."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from prompt_handoff.buffer import (
    BufferPrimitive,
    InsertAt,
    KillRange,
    NoOp,
    ReplaceRange,
    clamp_offset,
)
from prompt_handoff.runtime import telemetry

LOGGER_NAME = "prompt_handoff.reconcile"


@dataclass(frozen=True, slots=True)
class EditTransaction:
    """One trigger's worth of state.

    ``new_text`` is ``None`` when the external edit was abandoned or failed;
    an empty string means the user cleared the line.
    """

    current_text: str
    cursor_offset: int
    new_text: Optional[str]


def reconcile(
    new_content: str, current_text: str, cursor_offset: int
) -> BufferPrimitive:
    """Pick the single primitive that makes ``current_text`` read ``new_content``.

    Replacement always spans the whole line. Hosts only offer one
    cursor-anchored range per command, so a mid-line minimal diff cannot be
    expressed in one primitive; ``cursor_offset`` (in range or not) does not
    affect the result.
    """

    del cursor_offset
    end = len(current_text)
    if not new_content:
        return NoOp() if not current_text else KillRange(0, end)
    if not current_text:
        return InsertAt(0, new_content)
    return ReplaceRange(0, end, new_content)


def plan_edit(transaction: EditTransaction) -> BufferPrimitive:
    """Caller-side policy wrapped around ``reconcile``.

    The unchanged-content shortcut only applies to non-empty ``new_text``: an
    empty result is an explicit clear, so a whitespace-only line is killed
    rather than left alone.
    """

    current = transaction.current_text
    new_text = transaction.new_text
    if new_text is None:
        primitive: BufferPrimitive = NoOp()
    elif new_text and new_text.strip() == current.strip():
        # Round-tripped unchanged; skip the redraw.
        primitive = NoOp()
    else:
        primitive = reconcile(new_text, current, transaction.cursor_offset)

    telemetry.record_event(
        "reconcile.decision",
        level="debug",
        data={
            "kind": primitive.kind,
            "length": len(current),
            "cursor": clamp_offset(current, transaction.cursor_offset),
        },
        logger_name=LOGGER_NAME,
    )
    return primitive


__all__ = ["EditTransaction", "plan_edit", "reconcile"]
