from __future__ import annotations

from typing import List, Optional, Sequence

import pytest

from mdlist_engine.buffer import SelectionRange
from mdlist_engine.commands import load_default_commands
from mdlist_engine.editor import create_editor
from mdlist_engine.keymaps import CommandRegistry
from mdlist_engine.lists import ListContinuation
from mdlist_engine.modes import ModeManager


def make_editor(
    text: str | Sequence[str],
    *carets: tuple[int, int],
    mode: str = "markdown",
    **kwargs,
) -> ModeManager:
    manager = create_editor(text, mode=mode, **kwargs)
    buffer = manager.context.buffer
    if carets:
        buffer.set_cursors(SelectionRange.caret(row, col) for row, col in carets)
    else:
        last = len(buffer.lines) - 1
        buffer.move_cursor(last, len(buffer.line(last)))
    return manager


def text_of(manager: ModeManager) -> str:
    return manager.context.buffer.text


def cursor_of(manager: ModeManager) -> tuple[int, int]:
    return manager.context.buffer.state.cursor


# Enter


def test_enter_on_bare_marker_clears_it() -> None:
    manager = make_editor("* ", (0, 2))

    manager.execute("enter")

    assert text_of(manager) == ""
    assert cursor_of(manager) == (0, 0)


def test_enter_continues_bullet_list() -> None:
    manager = make_editor("* list")

    manager.execute("enter")

    assert text_of(manager) == "* list\n* "
    assert cursor_of(manager) == (1, 2)


def test_enter_runs_once_per_cursor() -> None:
    manager = make_editor("* \n* foo\n* ", (0, 2), (1, 3), (1, 4), (2, 2))

    manager.execute("enter")

    assert text_of(manager) == "\n* f\n* o\n* o\n"
    assert len(manager.context.buffer.state.cursors) == 4


def test_enter_increments_ordered_item() -> None:
    manager = make_editor("1. foo")

    manager.execute("enter")

    assert text_of(manager) == "1. foo\n2. "
    assert cursor_of(manager)[0] == 1


def test_enter_continues_checkbox_unchecked() -> None:
    manager = make_editor("\t- [x] done")

    manager.execute("enter")

    assert text_of(manager) == "\t- [x] done\n\t- [ ] "


@pytest.mark.parametrize("line", ["- [ ] ", "- [x] "])
def test_enter_on_empty_checkbox_clears_it(line: str) -> None:
    manager = make_editor(line)

    manager.execute("enter")

    assert text_of(manager) == ""


def test_enter_on_nested_bare_marker_lifts_it_one_level() -> None:
    manager = make_editor("a\n\t* ")

    manager.execute("enter")

    assert text_of(manager) == "a\n* "


def test_enter_mid_line_swallows_blanks_after_caret() -> None:
    manager = make_editor("* ab  cd", (0, 4))

    manager.execute("enter")

    assert text_of(manager) == "* ab\n* cd"
    assert cursor_of(manager) == (1, 2)


def test_enter_on_plain_line_keeps_indentation() -> None:
    manager = make_editor("\tfoo")

    manager.execute("enter")

    assert text_of(manager) == "\tfoo\n\t"


def test_enter_after_rule_does_not_continue() -> None:
    manager = make_editor("* * *")

    manager.execute("enter")

    assert text_of(manager) == "* * *\n"


def test_enter_replaces_selection() -> None:
    manager = make_editor("* abc")
    manager.context.buffer.set_cursors([SelectionRange((0, 2), (0, 5))])

    manager.execute("enter")

    assert text_of(manager) == "* \n* "


def test_enter_requests_scroll_into_view() -> None:
    manager = make_editor("* a")
    rows: List[object] = []
    manager.context.bus.subscribe("view.scroll_into_view", rows.append)

    manager.execute("enter")

    assert rows == [1]


# Tab


def test_tab_indents_list_item_instead_of_inserting() -> None:
    manager = make_editor("* list", (0, 2))

    manager.execute("indent")

    assert text_of(manager) == "\t* list"
    assert cursor_of(manager) == (0, 3)


def test_tab_resets_number_when_nesting() -> None:
    manager = make_editor("1. foo\n2. bar")

    manager.execute("indent")

    assert text_of(manager) == "1. foo\n\t1. bar"


def test_tab_continues_numbering_of_deeper_siblings() -> None:
    manager = make_editor(["1. foo", "\t1. bar", "\t2. baz", "2. qux"])

    manager.execute("indent")

    assert manager.context.buffer.lines == ("1. foo", "\t1. bar", "\t2. baz", "\t3. qux")


def test_tab_on_plain_line_inserts_tab() -> None:
    manager = make_editor("foo", (0, 1))

    manager.execute("indent")

    assert text_of(manager) == "f\too"


def test_tab_with_multi_row_selection_indents_rows() -> None:
    manager = make_editor("* a\n* b")
    manager.context.buffer.set_cursors([SelectionRange((0, 0), (1, 3))])

    manager.execute("indent")

    assert text_of(manager) == "\t* a\n\t* b"
    assert cursor_of(manager) == (1, 4)


# Shift+Tab


def test_shift_tab_renumbers_against_parent_level() -> None:
    manager = make_editor("1. foo\n\t1. bar")

    manager.execute("outdent")

    assert text_of(manager) == "1. foo\n2. bar"
    assert cursor_of(manager) == (1, 6)


def test_shift_tab_over_rows_numbers_them_in_order() -> None:
    manager = make_editor("1. a\n\t1. b\n\t2. c")
    manager.context.buffer.set_cursors([SelectionRange((1, 0), (2, 5))])

    manager.execute("outdent")

    assert text_of(manager) == "1. a\n2. b\n3. c"


def test_tab_with_several_carets_numbers_siblings_in_order() -> None:
    manager = make_editor("1. a\n2. b\n3. c", (2, 4), (1, 4))

    manager.execute("indent")

    assert text_of(manager) == "1. a\n\t1. b\n\t2. c"
    assert [item.head for item in manager.context.buffer.state.cursors] == [(1, 5), (2, 5)]


def test_tab_with_carets_at_different_depths() -> None:
    manager = make_editor("1. a\n\t1. b\n2. c", (1, 5), (2, 4))

    manager.execute("indent")

    assert text_of(manager) == "1. a\n\t\t1. b\n\t1. c"


def test_shift_tab_with_several_carets_numbers_siblings_in_order() -> None:
    manager = make_editor("1. a\n\t1. b\n\t2. c", (1, 5), (2, 5))

    manager.execute("outdent")

    assert text_of(manager) == "1. a\n2. b\n3. c"


def test_shift_tab_with_carets_at_different_depths() -> None:
    manager = make_editor("1. a\n\t1. b\n\t\t1. c\n\t\t2. d", (1, 5), (3, 6))

    manager.execute("outdent")

    assert text_of(manager) == "1. a\n2. b\n\t\t1. c\n\t1. d"


def test_shift_tab_on_bullets_and_spaces() -> None:
    manager = make_editor("\t* a\n    b\n  c")
    manager.context.buffer.set_cursors([SelectionRange((0, 0), (2, 1))])

    manager.execute("outdent")

    assert text_of(manager) == "* a\nb\nc"


def test_shift_tab_without_indent_is_a_noop() -> None:
    manager = make_editor("1. a")

    manager.execute("outdent")

    assert text_of(manager) == "1. a"
    assert len(manager.context.buffer.history) == 0


# Undo, text mode, and configuration


def test_multi_cursor_enter_undoes_in_one_step() -> None:
    manager = make_editor("* a\n* b", (0, 3), (1, 3))

    manager.execute("enter")
    manager.execute("undo")

    assert text_of(manager) == "* a\n* b"
    manager.execute("redo")
    assert text_of(manager) == "* a\n* \n* b\n* "


def test_text_mode_has_no_list_behaviour() -> None:
    manager = make_editor("* list", mode="text")

    manager.execute("enter")
    assert text_of(manager) == "* list\n"

    manager.switch_mode("markdown")
    manager.context.buffer.move_cursor(0, 6)
    manager.execute("enter")
    assert text_of(manager) == "* list\n* \n"


def test_text_mode_tab_inserts_at_caret() -> None:
    manager = make_editor("* list", (0, 2), mode="text")

    manager.execute("indent")

    assert text_of(manager) == "* \tlist"


def test_excluding_markdown_overrides_keeps_continuation() -> None:
    registry = CommandRegistry()
    load_default_commands(registry, exclude=("markdown.enter", "markdown.indent"))
    manager = make_editor("* a", registry=registry)

    manager.execute("enter")
    manager.execute("enter")

    assert text_of(manager) == "* a\n* \n* "


class QuoteContinuation(ListContinuation):
    def next_line_prefix(self, line: str) -> Optional[str]:
        if line.startswith("> "):
            return "> "
        return super().next_line_prefix(line)


def test_injected_list_rules_drive_continuation() -> None:
    manager = make_editor("> quoted", list_rules=QuoteContinuation())

    manager.execute("enter")

    assert text_of(manager) == "> quoted\n> "
