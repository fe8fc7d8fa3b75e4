"""Editor command resolution."""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, replace
from typing import Mapping, Optional

EDITOR_VARIABLE = "EDITOR"
DEFAULT_EDITOR = "vi"
SCRATCH_PREFIX = "prompt-handoff"
SCRATCH_SUFFIX = ".md"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """How to launch the external editor and where to put scratch files.

    ``command`` is a shell-style command line such as ``"code --wait"``; the
    scratch file path is always appended as the last argument.
    """

    command: str = DEFAULT_EDITOR
    scratch_prefix: str = SCRATCH_PREFIX
    scratch_suffix: str = SCRATCH_SUFFIX
    temp_dir: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        variable: str = EDITOR_VARIABLE,
        **overrides: object,
    ) -> "EditorConfig":
        source = os.environ if environ is None else environ
        raw = source.get(variable, "")
        config = cls(command=raw.strip() or DEFAULT_EDITOR)
        if overrides:
            config = replace(config, **overrides)
        return config

    def argv(self, path: str) -> list[str]:
        return [*self.tokens(), path]

    def tokens(self) -> list[str]:
        try:
            parts = shlex.split(self.command)
        except ValueError:
            # Unbalanced quotes: run the raw string as the program name.
            parts = []
        return parts or [self.command]


__all__ = [
    "EditorConfig",
    "EDITOR_VARIABLE",
    "DEFAULT_EDITOR",
    "SCRATCH_PREFIX",
    "SCRATCH_SUFFIX",
]
