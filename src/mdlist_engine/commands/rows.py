"""Whole-row rewrites that keep the selection attached to its text."""

from __future__ import annotations

from typing import Mapping, Sequence, Tuple

from mdlist_engine.buffer import Cursor, Edit
from mdlist_engine.modes import CommandTarget

# (column, removed length, inserted length) applied to one row, in order.
Splice = Tuple[int, int, int]


def map_column(col: int, splices: Sequence[Splice]) -> int:
    for pos, removed, inserted in splices:
        if col >= pos + removed:
            col += inserted - removed
        elif col > pos:
            col = min(col, pos + inserted)
    return col


def rewrite_rows(
    target: CommandTarget,
    rows: range,
    new_lines: Sequence[str],
    splices: Mapping[int, Sequence[Splice]],
) -> Edit:
    """Replace ``rows`` with ``new_lines``, moving the selection through ``splices``."""

    first, last = rows.start, rows[-1]
    old_lines = target.lines
    text = "\n".join(new_lines)

    def offset(cursor: Cursor) -> int:
        row, col = cursor
        if row <= last:
            col = map_column(col, splices.get(row, ()))
            return sum(len(line) + 1 for line in new_lines[: row - first]) + col
        between = sum(len(old_lines[i]) + 1 for i in range(last + 1, row))
        return len(text) + 1 + between + col

    selection = target.selection
    return Edit(
        (first, 0),
        (last, len(old_lines[last])),
        text,
        offset(selection.anchor),
        offset(selection.head),
    )
