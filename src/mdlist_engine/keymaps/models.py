"""Dataclasses describing key strokes, named commands, and bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

MULTI_SELECT_MODES = ("forEach", "forEachLine")


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press, e.g. ``ENTER`` or ``shift+TAB``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        key = self.key.upper() if len(self.key) > 1 else self.key
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @classmethod
    def parse(cls, spec: str) -> "KeyStroke":
        """Build a stroke from ``"Shift+Tab"``-style text."""

        parts = [part for part in spec.split("+") if part]
        if not parts:
            raise ValueError(f"Cannot parse key stroke '{spec}'")
        return cls(parts[-1], tuple(parts[:-1]))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers) + f"+{self.key}"
        return self.key


@dataclass(frozen=True, slots=True)
class Command:
    """A named editing command.

    With ``multi_select`` set, the handler runs once per selection range
    (``"forEach"``) or once per row-merged range (``"forEachLine"``) and
    returns edits; otherwise it receives the whole mode context and returns a
    ``ModeResult``.
    """

    name: str
    handler: Callable[..., object]
    mode: str = "text"
    multi_select: Optional[str] = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Command name cannot be empty")
        if not self.mode:
            raise ValueError("Command mode cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        if self.multi_select is not None and self.multi_select not in MULTI_SELECT_MODES:
            raise ValueError(f"Unknown multi_select mode '{self.multi_select}'")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def qualified_name(self) -> str:
        return f"{self.mode}.{self.name}"

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Routes a key stroke in one mode to a command name."""

    id: str
    mode: str
    stroke: KeyStroke
    command: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.command:
            raise ValueError("binding command cannot be empty")
        if isinstance(self.stroke, str):
            object.__setattr__(self, "stroke", KeyStroke.parse(self.stroke))

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = [
    "Binding",
    "Command",
    "KeyStroke",
    "MULTI_SELECT_MODES",
    "normalize_modifiers",
]
