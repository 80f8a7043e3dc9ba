from __future__ import annotations

from mdlist_engine.lists import find_preceding_ordinal


def test_nearest_sibling_wins() -> None:
    lines = ["1. a", "2. b", "3. c", "x"]

    assert find_preceding_ordinal(lines, 3, 0) == 3


def test_shallower_line_stops_the_scan() -> None:
    lines = ["\t4. deep", "1. top", "\t"]

    assert find_preceding_ordinal(lines, 2, 1) == 0


def test_deeper_children_and_bullets_are_skipped() -> None:
    lines = [
        "1. foo",
        "\t1. bar",
        "\t\t- nested",
        "\t- bullet",
        "\t",
        "\t\t7. nested ordered",
        "2. qux",
    ]

    assert find_preceding_ordinal(lines, 6, 1) == 1
    assert find_preceding_ordinal(lines, 6, 0) == 1


def test_no_rows_above_returns_zero() -> None:
    assert find_preceding_ordinal(["1. a"], 0, 0) == 0
    assert find_preceding_ordinal(["a", "b"], 1, 0) == 0


def test_first_value_is_kept_as_declared() -> None:
    lines = ["5. five", "- note", "x"]

    assert find_preceding_ordinal(lines, 2, 0) == 5
