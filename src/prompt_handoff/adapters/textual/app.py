"""Executable Textual app demonstrating the external editor trigger."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use prompt_handoff.adapters.textual.app"
    ) from exc

from prompt_handoff.actions import DEFAULT_TRIGGER, EditorLauncher
from prompt_handoff.runtime import telemetry
from prompt_handoff.session import EditorConfig

from .controller import TextualLineAdapter, TextualUIHooks


class PromptHandoffApp(App[None]):
    """One prompt line; ``ctrl+f`` hands it to $EDITOR."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#prompt {
		margin: 1 1;
	}

	#history {
		height: 1fr;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding(DEFAULT_TRIGGER, "open_editor", "Edit in $EDITOR", priority=True),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, config: Optional[EditorConfig] = None) -> None:
        super().__init__()
        self._config = config or EditorConfig.from_env()
        self.adapter: TextualLineAdapter | None = None
        self._history: list[str] = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Type a prompt, ctrl+f to edit it", id="prompt")
        yield Static("", id="history")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(update_status=self._update_status, suspend=self.suspend)
        self.adapter = TextualLineAdapter(EditorLauncher(config=self._config), hooks)
        self._update_status(f"editor: {self._config.command}")

    def action_open_editor(self) -> None:
        if self.adapter is None:
            return
        prompt = self.query_one("#prompt", Input)
        self.adapter.handle_textual_key(DEFAULT_TRIGGER, prompt)
        prompt.focus()
        self.refresh()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._history.append(event.value)
        self.query_one("#history", Static).update("\n".join(self._history))
        event.input.value = ""

    def _update_status(self, status: str) -> None:
        self.query_one("#status-line", Static).update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the prompt_handoff Textual demo.")
    parser.add_argument(
        "--editor",
        default=None,
        help="Editor command line (default: $EDITOR, then vi)",
    )
    parser.add_argument(
        "--log-preset",
        default="quiet",
        choices=("development", "production", "quiet"),
        help="Telemetry preset (default: quiet, keeps the terminal clean)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    config = EditorConfig.from_env()
    if args.editor:
        config = EditorConfig(command=args.editor)
    PromptHandoffApp(config=config).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
