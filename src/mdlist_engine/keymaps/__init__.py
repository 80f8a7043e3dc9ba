"""Named commands and the key bindings that reach them."""

from .models import MULTI_SELECT_MODES, Binding, Command, KeyStroke
from .registry import CommandConflictError, CommandRegistry, RegistryStats

__all__ = [
    "Binding",
    "Command",
    "CommandConflictError",
    "CommandRegistry",
    "KeyStroke",
    "MULTI_SELECT_MODES",
    "RegistryStats",
]
