"""External editor sessions: scratch file, subprocess, read-back."""

from .config import DEFAULT_EDITOR, EDITOR_VARIABLE, EditorConfig
from .errors import (
    EditorError,
    EditorExitError,
    EditorSpawnError,
    ScratchReadError,
    ScratchWriteError,
)
from .runner import (
    EditorSession,
    ProcessLauncher,
    launch_editor,
    normalize_edited,
    run_blocking,
)

__all__ = [
    "DEFAULT_EDITOR",
    "EDITOR_VARIABLE",
    "EditorConfig",
    "EditorError",
    "EditorExitError",
    "EditorSpawnError",
    "ScratchReadError",
    "ScratchWriteError",
    "EditorSession",
    "ProcessLauncher",
    "launch_editor",
    "normalize_edited",
    "run_blocking",
]
