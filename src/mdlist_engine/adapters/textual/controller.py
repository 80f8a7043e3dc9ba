"""Textual-facing adapter translating key events and relaying buffer updates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from mdlist_engine.buffer import BufferMirror
from mdlist_engine.modes import KeyInput, ModeManager, ModeResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    scroll_to_row: Callable[[int], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges ModeManager + bus events to a Textual-friendly surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        bus = manager.context.bus
        bus.subscribe("view.scroll_into_view", self._on_scroll)
        bus.subscribe("buffer.changed", self._on_changed)
        self._refresh_buffer()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized = tuple(str(mod).lower() for mod in modifiers)
        self._log("key ->", key=key, text=text, mods=normalized)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized)
        )
        status = result.message or result.status
        if status:
            self.hooks.update_status(status)
        self._refresh_buffer()
        self._log("result <-", consumed=result.consumed, status=result.status)
        return result

    def _on_scroll(self, payload: object | None) -> None:
        if isinstance(payload, int):
            self.hooks.scroll_to_row(payload)

    def _on_changed(self, payload: object | None) -> None:
        self._log("event ->", event="buffer.changed", payload=payload)

    def _refresh_buffer(self) -> None:
        mode = self.manager.active_mode
        attributes = {"mode": mode.name if mode else "?"}
        self.hooks.update_buffer(self.manager.context.buffer.mirror(attributes=attributes))

    def _log(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "cursor": self.manager.context.buffer.state.cursor,
            "ranges": len(self.manager.context.buffer.state.cursors),
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
