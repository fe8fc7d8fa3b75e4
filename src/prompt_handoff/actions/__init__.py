"""Host-facing actions bound to trigger keys."""

from .launcher import DEFAULT_TRIGGER, EditorLauncher, TriggerEvent, open_external_editor

__all__ = [
    "DEFAULT_TRIGGER",
    "EditorLauncher",
    "TriggerEvent",
    "open_external_editor",
]
