from __future__ import annotations

from prompt_handoff.session import DEFAULT_EDITOR, EditorConfig


def test_missing_variable_falls_back_to_vi() -> None:
    config = EditorConfig.from_env({})

    assert config.command == DEFAULT_EDITOR == "vi"
    assert config.argv("/tmp/f.md") == ["vi", "/tmp/f.md"]


def test_blank_variable_falls_back_to_vi() -> None:
    assert EditorConfig.from_env({"EDITOR": "   "}).command == "vi"


def test_command_with_arguments_is_split() -> None:
    config = EditorConfig.from_env({"EDITOR": "code --wait --new-window"})

    assert config.argv("/tmp/f.md") == ["code", "--wait", "--new-window", "/tmp/f.md"]


def test_quoted_program_path_is_kept_whole() -> None:
    config = EditorConfig(command='"/opt/My Editor/bin/edit" -w')

    assert config.argv("/tmp/f.md") == ["/opt/My Editor/bin/edit", "-w", "/tmp/f.md"]


def test_unbalanced_quotes_use_raw_command() -> None:
    config = EditorConfig(command='"code --wait')

    assert config.argv("/tmp/f.md") == ['"code --wait', "/tmp/f.md"]


def test_alternate_variable_and_overrides() -> None:
    config = EditorConfig.from_env(
        {"VISUAL": "nano", "EDITOR": "vim"}, variable="VISUAL", temp_dir="/scratch"
    )

    assert config.command == "nano"
    assert config.temp_dir == "/scratch"


def test_from_env_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("EDITOR", "emacs -nw")

    assert EditorConfig.from_env().tokens() == ["emacs", "-nw"]
