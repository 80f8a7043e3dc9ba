from __future__ import annotations

import pytest

from mdlist_engine.lists import (
    Bullet,
    Checkbox,
    ListContinuation,
    Ordered,
    Star,
    classify,
    indent_depth,
    parse_ordinal,
    renumber,
)


@pytest.mark.parametrize(
    ("line", "indent", "shape"),
    [
        ("- [ ] todo", "", Checkbox(False)),
        ("- [x] done", "", Checkbox(True)),
        ("\t- [X] done", "\t", Checkbox(True)),
        ("- item", "", Bullet()),
        ("  - item", "  ", Bullet()),
        ("* item", "", Star()),
        ("\t\t* ", "\t\t", Star()),
        ("1. first", "", Ordered(1)),
        ("\t12.", "\t", Ordered(12)),
        ("3.\tthird", "", Ordered(3)),
    ],
)
def test_classify_recognises_marker_shapes(line: str, indent: str, shape) -> None:
    marker = classify(line)

    assert marker is not None
    assert marker.indent == indent
    assert marker.shape == shape


@pytest.mark.parametrize(
    "line",
    ["", "plain text", "* * *", "  * * *  ", "-item", "*item", "1.item", "1)", "a. b", "0. zero"],
)
def test_classify_returns_none_for_non_list_lines(line: str) -> None:
    assert classify(line) is None


def test_checkbox_wins_over_bullet() -> None:
    marker = classify("- [ ] ")

    assert marker is not None
    assert isinstance(marker.shape, Checkbox)


def test_parse_ordinal_and_depth_helpers() -> None:
    assert parse_ordinal("7. seven") == 7
    assert parse_ordinal("7.") == 7
    assert parse_ordinal("\t7. seven") == 0
    assert parse_ordinal("- 7. seven") == 0
    assert indent_depth("\t\t1. ") == 2
    assert indent_depth("  \t1. ") == 0
    assert classify("\t\t1. x").depth == 2  # type: ignore[union-attr]


def test_renumber_rewrites_first_numeral_only() -> None:
    assert renumber("\t9. ", 1) == "\t1. "
    assert renumber("10. ", 11) == "11. "


@pytest.mark.parametrize(
    ("line", "prefix"),
    [
        ("- [ ] a", "- [ ] "),
        ("\t- [x] a", "\t- [ ] "),
        ("- [X] a", "- [ ] "),
        ("  - a", "  - "),
        ("* a", "* "),
        ("1. a", "2. "),
        ("\t\t41. a", "\t\t42. "),
    ],
)
def test_next_line_prefix_continues_lists(line: str, prefix: str) -> None:
    assert ListContinuation().next_line_prefix(line) == prefix


def test_next_line_prefix_defers_for_non_list_lines() -> None:
    rules = ListContinuation()

    assert rules.next_line_prefix("\tplain") is None
    assert rules.next_line_prefix("* * *") is None
