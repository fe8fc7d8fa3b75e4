"""Built-in trigger bindings."""

from __future__ import annotations

from dataclasses import replace

from prompt_handoff.actions import DEFAULT_TRIGGER, open_external_editor

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

LINE_MODE = "line"
OPEN_EXTERNAL_ACTION = "editor.open_external"
OPEN_EXTERNAL_BINDING = "line.open_external_editor"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id=OPEN_EXTERNAL_ACTION,
        handler=open_external_editor,
        description="Edit the current line in $EDITOR",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id=OPEN_EXTERNAL_BINDING,
        mode=LINE_MODE,
        sequence=KeySequence.from_strings(DEFAULT_TRIGGER),
        action_id=OPEN_EXTERNAL_ACTION,
        description="Open the line in an external editor",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    trigger: str | None = None,
    replace_existing: bool = False,
) -> None:
    """Register the built-in actions and bindings.

    ``trigger`` moves the external-editor binding to another key.
    """

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace_existing)

    for binding in DEFAULT_BINDINGS:
        if trigger and binding.id == OPEN_EXTERNAL_BINDING:
            binding = replace(binding, sequence=KeySequence.from_strings(trigger))
        registry.register_binding(binding, replace=replace_existing)


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "LINE_MODE",
    "OPEN_EXTERNAL_ACTION",
    "OPEN_EXTERNAL_BINDING",
    "load_default_keymaps",
]
