"""Sibling lookup for ordered-list renumbering."""

from __future__ import annotations

from typing import Sequence

from .markers import INDENT_UNIT, parse_ordinal


def find_preceding_ordinal(lines: Sequence[str], row: int, depth: int) -> int:
    """Number of the nearest ordered item above ``row`` at exactly ``depth``.

    Walks upward from ``row - 1``. A line indented by fewer than ``depth``
    units ends the walk; same-depth lines that are not ordered items and
    deeper children are stepped over. Returns ``0`` when nothing is found.
    """

    prefix = INDENT_UNIT * depth
    for current in range(row - 1, -1, -1):
        line = lines[current]
        if not line.startswith(prefix):
            break
        number = parse_ordinal(line[depth:])
        if number:
            return number
    return 0
