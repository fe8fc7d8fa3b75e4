"""Trigger handling: one key press in, one buffer primitive out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from prompt_handoff.buffer import BufferPrimitive, LineHost, NoOp
from prompt_handoff.reconcile import EditTransaction, plan_edit
from prompt_handoff.runtime import telemetry
from prompt_handoff.session import EditorConfig, EditorError, EditorSession

LOGGER_NAME = "prompt_handoff.actions"
DEFAULT_TRIGGER = "ctrl+f"


@dataclass(frozen=True, slots=True)
class TriggerEvent:
    text: str
    cursor: int
    key: str = DEFAULT_TRIGGER


class EditorLauncher:
    """Opens the current line in an external editor and plans the update.

    Editor failures never reach the host: they are logged and turned into a
    ``NoOp`` so the user's line stays as it was.
    """

    def __init__(
        self,
        session: Optional[EditorSession] = None,
        *,
        config: Optional[EditorConfig] = None,
    ) -> None:
        if session is not None and config is not None:
            raise ValueError("Provide either `session` or `config`, not both.")
        self.session = session or EditorSession(config)

    def handle(self, event: TriggerEvent) -> BufferPrimitive:
        try:
            edited = self.session.run(event.text)
        except EditorError as exc:
            telemetry.record_event(
                "launcher.editor_failed",
                level="warning",
                data={
                    "kind": exc.kind,
                    "key": event.key,
                    "program": exc.argv[0] if exc.argv else "",
                    "scratch": exc.path or "",
                    "error": str(exc),
                },
                logger_name=LOGGER_NAME,
            )
            return NoOp()

        transaction = EditTransaction(
            current_text=event.text,
            cursor_offset=event.cursor,
            new_text="" if edited is None else edited,
        )
        primitive = plan_edit(transaction)
        telemetry.record_event(
            "launcher.planned",
            data={"kind": primitive.kind, "key": event.key},
            logger_name=LOGGER_NAME,
        )
        return primitive

    def handle_host(
        self, host: LineHost, *, key: str = DEFAULT_TRIGGER
    ) -> BufferPrimitive:
        snapshot = host.read_line()
        primitive = self.handle(TriggerEvent(snapshot.text, snapshot.cursor, key))
        host.apply_primitive(primitive)
        return primitive


def open_external_editor(
    launcher: EditorLauncher, event: TriggerEvent
) -> BufferPrimitive:
    return launcher.handle(event)


__all__ = [
    "DEFAULT_TRIGGER",
    "EditorLauncher",
    "TriggerEvent",
    "open_external_editor",
]
