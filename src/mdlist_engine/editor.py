"""Factory wiring a buffer, the default commands, and both editing modes."""

from __future__ import annotations

from typing import Optional, Sequence

from mdlist_engine.buffer import Buffer
from mdlist_engine.commands import load_default_commands
from mdlist_engine.keymaps import CommandRegistry
from mdlist_engine.lists import ListContinuation
from mdlist_engine.modes import MarkdownMode, ModeBus, ModeContext, ModeManager, TextMode


def create_editor(
    text: str | Sequence[str] = "",
    *,
    mode: str = "markdown",
    list_rules: Optional[ListContinuation] = None,
    registry: Optional[CommandRegistry] = None,
    tab_size: int = 4,
    name: str = "default",
) -> ModeManager:
    """Build a ``ModeManager`` over ``text`` with ``mode`` active.

    ``text`` may be a string or a sequence of lines. A caller-supplied
    ``registry`` is used as-is; otherwise one is seeded with the defaults.
    """

    if registry is None:
        registry = CommandRegistry(logger_name="mdlist_engine.keymaps")
        load_default_commands(registry)
    buffer = Buffer.from_text(text, name=name)
    context = ModeContext(buffer=buffer, bus=ModeBus(), extras={})
    manager = ModeManager(context, command_registry=registry)
    manager.register_mode(TextMode, tab_size=tab_size)
    manager.register_mode(MarkdownMode, list_rules=list_rules, tab_size=tab_size)
    manager.switch_mode(mode)
    return manager


__all__ = ["create_editor"]
