"""Hand a line-editor prompt to an external editor and reconcile the result."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "keymaps",
    "reconcile",
    "runtime",
    "session",
]

__version__ = "0.1.0"
