"""Textual host adapter for prompt_handoff."""

from .controller import InputLike, TextualLineAdapter, TextualUIHooks

__all__ = ["InputLike", "TextualLineAdapter", "TextualUIHooks"]
