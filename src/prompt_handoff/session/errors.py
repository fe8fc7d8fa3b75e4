"""Failures raised while running an external editor session."""

from __future__ import annotations

from typing import Optional, Sequence


class EditorError(RuntimeError):
    """Base class for every recoverable editor-session failure."""

    kind = "editor_error"

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        argv: Optional[Sequence[str]] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.argv = tuple(argv) if argv is not None else None


class ScratchWriteError(EditorError):
    """The scratch file could not be created or written."""

    kind = "write_failure"


class EditorSpawnError(EditorError):
    """The editor program could not be started (missing, not executable...)."""

    kind = "spawn_failure"


class EditorExitError(EditorError):
    """The editor exited with a non-zero status."""

    kind = "non_zero_exit"

    def __init__(
        self,
        message: str,
        *,
        returncode: int,
        path: Optional[str] = None,
        argv: Optional[Sequence[str]] = None,
    ) -> None:
        super().__init__(message, path=path, argv=argv)
        self.returncode = returncode


class ScratchReadError(EditorError):
    """The scratch file could not be read back after the editor exited."""

    kind = "read_failure"


__all__ = [
    "EditorError",
    "ScratchWriteError",
    "EditorSpawnError",
    "EditorExitError",
    "ScratchReadError",
]
