"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Sequence, Tuple

from mdlist_engine.buffer import Buffer, SelectionRange

if TYPE_CHECKING:  # pragma: no cover
    from .text_mode import TextMode


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode can access."""

    buffer: Buffer
    bus: "ModeBus"
    extras: Dict[str, object] = field(default_factory=dict)


@dataclass(slots=True)
class CommandTarget:
    """What a multi-selection command handler sees for one range.

    ``lines`` is the buffer as it was when the command started; every range
    of one invocation reads the same snapshot and its edits address it.
    ``working`` is shared by those ranges, which run in document order: a
    handler that rewrites rows stores them there so ranges further down see
    the result when they look upward.
    """

    mode: "TextMode"
    buffer: Buffer
    selection: SelectionRange
    lines: Sequence[str]
    working: List[str] = field(default_factory=list)
    scroll_requested: bool = False

    def __post_init__(self) -> None:
        if not self.working:
            self.working = list(self.lines)

    @property
    def row(self) -> int:
        return self.selection.start[0]

    def line(self, row: Optional[int] = None) -> str:
        return self.lines[self.row if row is None else row]

    def scroll_into_view(self) -> None:
        self.scroll_requested = True


class ModeBus:
    """Minimal event bus letting modes exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_key(
        self, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError
