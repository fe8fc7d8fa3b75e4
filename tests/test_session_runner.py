from __future__ import annotations

import os
import shlex
import sys
from pathlib import Path
from typing import Callable, List, Sequence

import pytest

from prompt_handoff.session import (
    EditorConfig,
    EditorExitError,
    EditorSession,
    EditorSpawnError,
    ScratchReadError,
    ScratchWriteError,
    launch_editor,
    normalize_edited,
)
from prompt_handoff.session import runner as runner_module


class RecordingEditor:
    """Stands in for the editor process; rewrites the scratch file in place."""

    def __init__(
        self, transform: Callable[[str], str] = lambda text: text, *, returncode: int = 0
    ) -> None:
        self.transform = transform
        self.returncode = returncode
        self.calls: List[List[str]] = []
        self.seen: List[str] = []

    def __call__(self, argv: Sequence[str]) -> int:
        self.calls.append(list(argv))
        path = Path(argv[-1])
        original = path.read_text(encoding="utf-8")
        self.seen.append(original)
        path.write_text(self.transform(original), encoding="utf-8")
        return self.returncode


def make_session(tmp_path: Path, editor, command: str = "fake-editor") -> EditorSession:
    config = EditorConfig(command=command, temp_dir=str(tmp_path))
    return EditorSession(config, launcher=editor)


def python_editor(tmp_path: Path, code: str) -> EditorSession:
    command = " ".join(shlex.quote(part) for part in (sys.executable, "-c", code))
    return EditorSession(EditorConfig(command=command, temp_dir=str(tmp_path)))


def test_unchanged_content_round_trips(tmp_path: Path) -> None:
    editor = RecordingEditor()

    assert make_session(tmp_path, editor).run("hello world") == "hello world"
    assert editor.seen == ["hello world"]


def test_scratch_file_is_named_uniquely_and_removed(tmp_path: Path) -> None:
    editor = RecordingEditor()
    session = make_session(tmp_path, editor)

    session.run("one")
    session.run("two")

    first, second = (Path(call[-1]) for call in editor.calls)
    assert first != second
    for path in (first, second):
        assert path.parent == tmp_path
        assert path.name.startswith("prompt-handoff-")
        assert path.suffix == ".md"
        assert not path.exists()


def test_command_arguments_precede_scratch_path(tmp_path: Path) -> None:
    editor = RecordingEditor()

    make_session(tmp_path, editor, command="code --wait").run("x")

    assert editor.calls[0][:2] == ["code", "--wait"]
    assert len(editor.calls[0]) == 3


def test_single_trailing_newline_is_stripped(tmp_path: Path) -> None:
    editor = RecordingEditor(lambda text: "goodbye world\n")

    assert make_session(tmp_path, editor).run("hello") == "goodbye world"


def test_only_one_trailing_newline_is_stripped(tmp_path: Path) -> None:
    editor = RecordingEditor(lambda text: "  line one\nline two\n\n")

    assert make_session(tmp_path, editor).run("x") == "  line one\nline two\n"


@pytest.mark.parametrize("cleared", ["", "   ", "\n", " \t\n\n"])
def test_blank_result_means_cleared(tmp_path: Path, cleared: str) -> None:
    editor = RecordingEditor(lambda text: cleared)

    assert make_session(tmp_path, editor).run("something") is None


def test_non_zero_exit_raises_and_removes_scratch(tmp_path: Path) -> None:
    editor = RecordingEditor(returncode=2)

    with pytest.raises(EditorExitError) as excinfo:
        make_session(tmp_path, editor).run("keep")

    assert excinfo.value.returncode == 2
    assert excinfo.value.kind == "non_zero_exit"
    assert excinfo.value.argv == tuple(editor.calls[0])
    assert excinfo.value.path == editor.calls[0][-1]
    assert not Path(editor.calls[0][-1]).exists()
    assert list(tmp_path.iterdir()) == []


def test_spawn_failure_is_reported(tmp_path: Path) -> None:
    def missing(argv: Sequence[str]) -> int:
        raise FileNotFoundError(2, "No such file or directory", argv[0])

    with pytest.raises(EditorSpawnError) as excinfo:
        make_session(tmp_path, missing).run("text")

    assert excinfo.value.kind == "spawn_failure"
    assert excinfo.value.argv is not None
    assert excinfo.value.argv[0] == "fake-editor"
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert list(tmp_path.iterdir()) == []


def test_write_failure_skips_editor(tmp_path: Path) -> None:
    editor = RecordingEditor()
    config = EditorConfig(command="fake", temp_dir=str(tmp_path / "missing-dir"))

    with pytest.raises(ScratchWriteError):
        EditorSession(config, launcher=editor).run("text")

    assert editor.calls == []


def test_read_failure_when_editor_removes_file(tmp_path: Path) -> None:
    def deleting(argv: Sequence[str]) -> int:
        os.remove(argv[-1])
        return 0

    with pytest.raises(ScratchReadError) as excinfo:
        make_session(tmp_path, deleting).run("text")

    assert excinfo.value.kind == "read_failure"


def test_undecodable_result_raises_read_error_and_removes_scratch(
    tmp_path: Path,
) -> None:
    def binary(argv: Sequence[str]) -> int:
        Path(argv[-1]).write_bytes(b"\xff\xfe")
        return 0

    with pytest.raises(ScratchReadError) as excinfo:
        make_session(tmp_path, binary).run("text")

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert list(tmp_path.iterdir()) == []


def test_unencodable_line_raises_write_error_and_removes_scratch(
    tmp_path: Path,
) -> None:
    editor = RecordingEditor()

    with pytest.raises(ScratchWriteError) as excinfo:
        make_session(tmp_path, editor).run("bad \ud800 text")

    assert excinfo.value.kind == "write_failure"
    assert isinstance(excinfo.value.__cause__, UnicodeEncodeError)
    assert excinfo.value.path is not None
    assert editor.calls == []
    assert list(tmp_path.iterdir()) == []


def test_cleanup_failure_is_swallowed(tmp_path: Path, monkeypatch) -> None:
    def refuse(path: str) -> None:
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr(runner_module.os, "remove", refuse)

    assert make_session(tmp_path, RecordingEditor()).run("still fine") == "still fine"


def test_launch_editor_helper(tmp_path: Path) -> None:
    config = EditorConfig(command="fake", temp_dir=str(tmp_path))

    result = launch_editor("abc", config, launcher=RecordingEditor(str.upper))

    assert result == "ABC"


def test_normalize_edited() -> None:
    assert normalize_edited("a\r\n") == "a"
    assert normalize_edited("a\n") == "a"
    assert normalize_edited("a") == "a"
    assert normalize_edited(" \r\n") is None


def test_real_process_noop_editor(tmp_path: Path) -> None:
    session = python_editor(tmp_path, "import sys")

    assert session.run("Special chars: $PATH, ~/, 'quotes', \"double\"") == (
        "Special chars: $PATH, ~/, 'quotes', \"double\""
    )
    assert list(tmp_path.iterdir()) == []


def test_real_process_clearing_editor(tmp_path: Path) -> None:
    session = python_editor(tmp_path, "import sys; open(sys.argv[1], 'w').close()")

    assert session.run("will be cleared") is None


def test_real_process_whitespace_only_input(tmp_path: Path) -> None:
    assert python_editor(tmp_path, "import sys").run("   \n") is None


def test_real_process_non_zero_exit(tmp_path: Path) -> None:
    session = python_editor(tmp_path, "import sys; sys.exit(3)")

    with pytest.raises(EditorExitError) as excinfo:
        session.run("content")

    assert excinfo.value.returncode == 3
    assert list(tmp_path.iterdir()) == []


def test_real_process_missing_program(tmp_path: Path) -> None:
    config = EditorConfig(
        command="prompt-handoff-no-such-editor-7f3a --wait", temp_dir=str(tmp_path)
    )

    with pytest.raises(EditorSpawnError):
        EditorSession(config).run("content")

    assert list(tmp_path.iterdir()) == []
