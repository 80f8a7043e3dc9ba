"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from mdlist_engine.keymaps import CommandRegistry
from mdlist_engine.keymaps.models import normalize_modifiers

from .base_mode import KeyInput, ModeContext

PRINTABLE_MODIFIERS = {"shift"}


def key_to_token(key: KeyInput) -> str:
    name = key.key.upper() if len(key.key) > 1 else key.key
    modifiers = normalize_modifiers(key.modifiers)
    if modifiers:
        return "+".join(modifiers) + f"+{name}"
    return name


def typed_text(key: KeyInput) -> str | None:
    """Text a key press inserts, or ``None`` for control keys and chords."""

    if not key.text or not key.text.isprintable():
        return None
    if set(normalize_modifiers(key.modifiers)) - PRINTABLE_MODIFIERS:
        return None
    return key.text


def require_command_registry(context: ModeContext) -> CommandRegistry:
    registry = context.extras.get("command_registry")
    if not isinstance(registry, CommandRegistry):
        raise RuntimeError("ModeContext.extras missing 'command_registry'")
    return registry


__all__ = [
    "key_to_token",
    "require_command_registry",
    "typed_text",
]
