from __future__ import annotations

from typing import List

from mdlist_engine.adapters.textual import TextualEditorAdapter, TextualUIHooks
from mdlist_engine.buffer import BufferMirror
from mdlist_engine.editor import create_editor
from mdlist_engine.modes import KeyInput
from mdlist_engine.modes.mode_manager import ModeManager


def make_manager(text: str = "", mode: str = "markdown") -> ModeManager:
    manager = create_editor(text, mode=mode)
    buffer = manager.context.buffer
    last = len(buffer.lines) - 1
    buffer.move_cursor(last, len(buffer.line(last)))
    return manager


def test_adapter_updates_buffer_and_status() -> None:
    manager = make_manager("* item")
    mirrors: List[BufferMirror] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=mirrors.append,
        update_status=statuses.append,
    )
    adapter = TextualEditorAdapter(manager, hooks)

    adapter.handle_textual_key("ENTER")

    assert mirrors[0].text == "* item"
    assert mirrors[-1].text == "* item\n* "
    assert mirrors[-1].attributes["mode"] == "markdown"
    assert statuses[-1] == "enter"


def test_adapter_routes_tab_and_shift_tab() -> None:
    manager = make_manager("1. foo\n2. bar")
    adapter = TextualEditorAdapter(manager, TextualUIHooks(update_buffer=lambda mirror: None))

    adapter.handle_textual_key("TAB")
    assert manager.context.buffer.text == "1. foo\n\t1. bar"

    adapter.handle_textual_key("TAB", modifiers=("Shift",))
    assert manager.context.buffer.text == "1. foo\n2. bar"


def test_adapter_inserts_typed_text_and_undoes() -> None:
    manager = make_manager("* ")
    adapter = TextualEditorAdapter(manager, TextualUIHooks(update_buffer=lambda mirror: None))

    for char in "hi":
        adapter.handle_textual_key(char, text=char)
    assert manager.context.buffer.text == "* hi"

    adapter.handle_textual_key("z", modifiers=("ctrl",))
    assert manager.context.buffer.text == "* h"


def test_adapter_reports_unbound_keys() -> None:
    manager = make_manager("x")
    statuses: List[str] = []
    adapter = TextualEditorAdapter(
        manager,
        TextualUIHooks(update_buffer=lambda mirror: None, update_status=statuses.append),
    )

    result = adapter.handle_textual_key("F5")

    assert result.consumed is False
    assert statuses[-1] == "F5"
    assert manager.context.buffer.text == "x"


def test_adapter_scrolls_and_logs() -> None:
    manager = make_manager("a\nb\n* c")
    rows: List[int] = []
    logs: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        scroll_to_row=rows.append,
        log=logs.append,
    )
    adapter = TextualEditorAdapter(manager, hooks)

    adapter.handle_textual_key("ENTER")

    assert rows == [3]
    assert logs[0].startswith("key -> ")
    assert any("buffer.changed" in line for line in logs)
    assert logs[-1].startswith("result <- ")


def test_manager_handle_key_uses_scoped_bindings() -> None:
    manager = make_manager("* a", mode="text")

    manager.handle_key(KeyInput(key="ENTER"))
    assert manager.context.buffer.text == "* a\n"

    manager.switch_mode("markdown")
    manager.handle_key(KeyInput(key="RETURN"))
    assert manager.context.buffer.text == "* a\n\n"
