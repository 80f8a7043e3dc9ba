"""Editing modes, command fan-out, and the mode manager."""

from .base_mode import (
    CommandTarget,
    KeyInput,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
)
from .dispatch import run_command
from .markdown_mode import MarkdownMode
from .mode_manager import ModeManager
from .text_mode import TextMode

__all__ = [
    "CommandTarget",
    "KeyInput",
    "MarkdownMode",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeManager",
    "ModeResult",
    "TextMode",
    "run_command",
]
