"""Markdown list-aware editing engine."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "editor",
    "keymaps",
    "lists",
    "modes",
    "runtime",
    "syntax",
]

__version__ = "0.1.0"
