"""Editing commands: defaults, markdown list overrides, and the built-in catalog."""

from .catalog import DEFAULT_BINDINGS, DEFAULT_COMMANDS, load_default_commands
from .lists import enter, indent, is_bare_marker, outdent

__all__ = [
    "DEFAULT_BINDINGS",
    "DEFAULT_COMMANDS",
    "enter",
    "indent",
    "is_bare_marker",
    "load_default_commands",
    "outdent",
]
