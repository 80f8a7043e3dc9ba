"""Executable Textual app that hosts the markdown list editor."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import VerticalScroll
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use mdlist_engine.adapters.textual.app"
    ) from exc

from mdlist_engine.buffer import BufferMirror
from mdlist_engine.editor import create_editor

from .controller import TextualEditorAdapter, TextualUIHooks

CARET = "▏"


def render_mirror(mirror: BufferMirror) -> str:
    """Buffer text with a caret glyph drawn at every selection head."""

    lines = mirror.text.split("\n")
    heads = sorted({selection.head for selection in mirror.ranges}, reverse=True)
    for row, col in heads:
        lines[row] = lines[row][:col] + CARET + lines[row][col:]
    return "\n".join(line.replace("\t", "    ") for line in lines)


class MarkdownListApp(App[None]):
    """Minimal Textual UI embedding the editor."""

    CSS = """
	#buffer-area {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, text: str = "", mode: str = "markdown") -> None:
        super().__init__()
        self._initial_text = text
        self._mode = mode
        self.adapter: TextualEditorAdapter | None = None
        self._scroll: VerticalScroll | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._buffer_widget = Static("", id="buffer-view", markup=False)
        with VerticalScroll(id="buffer-area") as scroll:
            self._scroll = scroll
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        manager = create_editor(self._initial_text, mode=self._mode)
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            scroll_to_row=self._scroll_to_row,
        )
        self.adapter = TextualEditorAdapter(manager, hooks)
        self._update_status(f"mode: {self._mode}")

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()
        event.prevent_default()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_mirror(mirror))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _scroll_to_row(self, row: int) -> None:
        if self._scroll:
            self._scroll.scroll_to(y=row, animate=False)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        if event.key in {"ctrl+c", "ctrl+q"}:
            return None
        *modifiers, name = event.key.split("+")
        if name == "enter":
            return ("ENTER", None, tuple(modifiers))
        if event.character and event.is_printable:
            return (event.character, event.character, ())
        return (name.upper() if len(name) > 1 else name, None, tuple(modifiers))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the markdown list editor demo.")
    parser.add_argument(
        "--mode",
        choices=("markdown", "text"),
        default=os.environ.get("MDLIST_ENGINE_MODE", "markdown"),
        help="Editing mode to start in (default: markdown)",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Load the initial buffer text from this file",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    text = args.file.read_text(encoding="utf-8") if args.file else ""
    MarkdownListApp(text=text, mode=args.mode).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
