"""Round-trip a line of text through an external editor via a scratch file."""

from __future__ import annotations

import os
import subprocess
import tempfile
import uuid
from typing import Optional, Protocol, Sequence

from prompt_handoff.runtime import telemetry

from .config import EditorConfig
from .errors import (
    EditorExitError,
    EditorSpawnError,
    ScratchReadError,
    ScratchWriteError,
)

LOGGER_NAME = "prompt_handoff.session"


class ProcessLauncher(Protocol):
    """Run ``argv`` to completion and return its exit status.

    Implementations raise ``OSError`` when the program cannot be started.
    """

    def __call__(self, argv: Sequence[str]) -> int: ...


def run_blocking(argv: Sequence[str]) -> int:
    """Default launcher: inherit the terminal and wait for the editor."""

    completed = subprocess.run(list(argv), check=False)
    return completed.returncode


def normalize_edited(text: str) -> Optional[str]:
    """Turn raw scratch-file content into the session result.

    Blank content means the user cleared the line and yields ``None``. Otherwise
    a single trailing newline (``\\r\\n`` or ``\\n``) is dropped, since most
    editors add one on save.
    """

    if not text.strip():
        return None
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


class EditorSession:
    """Runs one external-editor round trip per ``run`` call.

    Sessions hold no state between calls; every run gets its own uniquely
    named scratch file, which is removed before ``run`` returns or raises.
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        launcher: Optional[ProcessLauncher] = None,
    ) -> None:
        self.config = config or EditorConfig.from_env()
        self.launcher: ProcessLauncher = launcher or run_blocking

    def scratch_path(self) -> str:
        directory = self.config.temp_dir or tempfile.gettempdir()
        name = "{}-{}{}".format(
            self.config.scratch_prefix, uuid.uuid4(), self.config.scratch_suffix
        )
        return os.path.join(directory, name)

    def run(self, initial_content: str) -> Optional[str]:
        path = self.scratch_path()
        with telemetry.span(
            "session::run",
            logger_name=LOGGER_NAME,
            component="session",
            metadata={"scratch": path},
        ):
            _write_scratch(path, initial_content)
            try:
                self._launch(path)
                edited = _read_scratch(path)
            finally:
                _discard(path)
        return normalize_edited(edited)

    def _launch(self, path: str) -> None:
        argv = self.config.argv(path)
        telemetry.record_event(
            "session.spawn",
            level="debug",
            data={"program": argv[0], "args": len(argv) - 1},
            logger_name=LOGGER_NAME,
        )
        try:
            returncode = self.launcher(argv)
        except OSError as exc:
            raise EditorSpawnError(
                f"Could not start editor '{argv[0]}': {exc}", path=path, argv=argv
            ) from exc

        telemetry.record_event(
            "session.exit",
            level="debug",
            data={"program": argv[0], "returncode": returncode},
            logger_name=LOGGER_NAME,
        )
        if returncode != 0:
            raise EditorExitError(
                f"Editor '{argv[0]}' exited with status {returncode}",
                returncode=returncode,
                path=path,
                argv=argv,
            )


def _write_scratch(path: str, content: str) -> None:
    try:
        # "x" refuses to reuse a path some other session already created.
        handle = open(path, "x", encoding="utf-8", newline="")
    except OSError as exc:
        raise ScratchWriteError(
            f"Could not create scratch file {path}: {exc}", path=path
        ) from exc

    try:
        with handle:
            handle.write(content)
    except (OSError, UnicodeError) as exc:
        # Lone surrogates cannot be encoded; the half-written file still goes.
        _discard(path)
        raise ScratchWriteError(
            f"Could not write scratch file {path}: {exc}", path=path
        ) from exc


def _read_scratch(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ScratchReadError(
            f"Could not read scratch file {path}: {exc}", path=path
        ) from exc


def _discard(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        return
    except OSError as exc:
        telemetry.record_event(
            "scratch.cleanup_failed",
            level="warning",
            data={"path": path, "error": str(exc)},
            logger_name=LOGGER_NAME,
        )


def launch_editor(
    initial_content: str,
    config: Optional[EditorConfig] = None,
    *,
    launcher: Optional[ProcessLauncher] = None,
) -> Optional[str]:
    """One-shot helper around ``EditorSession(...).run``."""

    return EditorSession(config, launcher=launcher).run(initial_content)


__all__ = [
    "EditorSession",
    "ProcessLauncher",
    "launch_editor",
    "normalize_edited",
    "run_blocking",
]
