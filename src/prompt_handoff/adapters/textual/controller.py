"""Wires a Textual ``Input``-style widget to the external editor trigger."""

from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from typing import Callable, ContextManager, Optional, Protocol

from prompt_handoff.actions import EditorLauncher, TriggerEvent
from prompt_handoff.buffer import BufferPrimitive, LineBuffer
from prompt_handoff.keymaps import LINE_MODE, KeymapRegistry, load_default_keymaps


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


class InputLike(Protocol):
    """The slice of ``textual.widgets.Input`` the adapter touches."""

    value: str
    cursor_position: int


@dataclass(slots=True)
class TextualUIHooks:
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop
    # Releases the terminal while the editor runs; Textual hosts pass App.suspend.
    suspend: Callable[[], ContextManager[object]] = nullcontext


class TextualLineAdapter:
    """Resolves trigger keys and applies the resulting primitive to a widget."""

    def __init__(
        self,
        launcher: EditorLauncher,
        hooks: Optional[TextualUIHooks] = None,
        *,
        registry: Optional[KeymapRegistry] = None,
        mode: str = LINE_MODE,
    ) -> None:
        self.launcher = launcher
        self.hooks = hooks or TextualUIHooks()
        if registry is None:
            registry = KeymapRegistry(logger_name="prompt_handoff.keymaps")
            load_default_keymaps(registry)
        self.registry = registry
        self.mode = mode

    def handles(self, key: str) -> bool:
        return self.registry.lookup(self.mode, (key,)) is not None

    def handle_textual_key(
        self, key: str, widget: InputLike
    ) -> Optional[BufferPrimitive]:
        """Run the action bound to ``key`` against ``widget``.

        Returns ``None`` when ``key`` is not bound, so the host can let the
        widget process it normally.
        """

        binding = self.registry.lookup(self.mode, (key,))
        if binding is None:
            return None
        action = self.registry.get_action(binding.action_id)
        event = TriggerEvent(
            text=widget.value, cursor=widget.cursor_position, key=binding.key_signature
        )
        self.hooks.log(f"key -> {binding.key_signature} action={action.id}")

        with self.hooks.suspend():
            primitive = action(self.launcher, event)

        buffer = LineBuffer(event.text, cursor=event.cursor, name=binding.id)
        delta = buffer.apply(primitive)
        widget.value = delta.text
        widget.cursor_position = delta.cursor

        self.hooks.update_status(f"{action.id}:{delta.kind}")
        self.hooks.log(f"result <- kind={delta.kind} cursor={delta.cursor}")
        return primitive


__all__ = ["InputLike", "TextualLineAdapter", "TextualUIHooks"]
