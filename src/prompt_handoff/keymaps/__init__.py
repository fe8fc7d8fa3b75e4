"""Trigger keymaps: actions, bindings and the registry that holds them."""

from .models import ActionRef, Binding, KeySequence, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import (
    LINE_MODE,
    OPEN_EXTERNAL_ACTION,
    OPEN_EXTERNAL_BINDING,
    load_default_keymaps,
)

__all__ = [
    "ActionRef",
    "Binding",
    "KeySequence",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "LINE_MODE",
    "OPEN_EXTERNAL_ACTION",
    "OPEN_EXTERNAL_BINDING",
    "load_default_keymaps",
]
