"""Markdown list overrides for Enter, Tab, and Shift+Tab.

Each handler falls back to the default behaviour from ``defaults`` whenever
the line under the range is not something it knows how to edit.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from mdlist_engine.buffer import Edit
from mdlist_engine.lists import (
    INDENT_UNIT,
    Ordered,
    classify,
    find_preceding_ordinal,
    indent_depth,
    renumber,
)
from mdlist_engine.modes import CommandTarget
from mdlist_engine.runtime import telemetry
from mdlist_engine.syntax import LineTokens

from . import defaults
from .rows import Splice, rewrite_rows

EMPTY_CHECKBOXES = ("[ ]", "[x]")


def is_bare_marker(tokens: LineTokens) -> bool:
    """True when the tokens hold a marker (and maybe a checkbox) and nothing else."""

    if len(tokens) == 1:
        return True
    return (
        len(tokens) == 3
        and tokens[1].value in EMPTY_CHECKBOXES
        and tokens[2].value == " "
    )


def enter(target: CommandTarget) -> List[Edit]:
    selection = target.selection
    row = target.row
    tokens = target.mode.list_tokens(target.line(row))
    if not selection.is_empty or not tokens or not is_bare_marker(tokens):
        return defaults.newline(target)

    line = target.line(row)
    prefix = target.mode.next_line_indent(line)
    if prefix.startswith(INDENT_UNIT):
        prefix = prefix[len(INDENT_UNIT) :]
    else:
        prefix = ""
    telemetry.record_event(
        "lists.marker_cleared", level="debug", data={"row": row, "marker": tokens[0].value}
    )
    return [Edit((row, 0), (row, len(line)), prefix)]


def _renumbered(
    literal: str, lines: Sequence[str], row: int, depth: int
) -> str:
    marker = classify(literal)
    if marker is None or not isinstance(marker.shape, Ordered):
        return literal
    return renumber(literal, find_preceding_ordinal(lines, row, depth) + 1)


def _numeral_splice(old: str, new: str) -> Splice:
    depth = indent_depth(old)
    return (depth, len(old) - depth, len(new) - depth)


def indent(target: CommandTarget) -> List[Edit]:
    selection = target.selection
    row = selection.head[0]
    tokens = target.mode.list_tokens(target.line(row)) if selection.is_empty else ()
    if not tokens:
        return defaults.indent(target)

    line = target.line(row)
    literal = tokens[0].value
    updated = _renumbered(literal, target.working, row, indent_depth(literal) + 1)
    new_line = INDENT_UNIT + updated + line[len(literal) :]
    target.working[row] = new_line
    splices = [
        _numeral_splice(literal.rstrip(), updated.rstrip()),
        (0, 0, len(INDENT_UNIT)),
    ]
    return [rewrite_rows(target, range(row, row + 1), [new_line], {row: splices})]


def outdent(target: CommandTarget) -> List[Edit]:
    """Renumber ordered children moving up a level, then outdent every row.

    Rows are handled top to bottom over the invocation's working copy so that
    a row's sibling lookup sees the numbers given to the rows above it, by
    this range or by an earlier one.
    """

    rows = target.selection.rows()
    working = target.working
    splices: Dict[int, List[Splice]] = {}
    for row in rows:
        line = target.line(row)
        row_splices: List[Splice] = []
        tokens = target.mode.list_tokens(line)
        if tokens:
            literal = tokens[0].value
            depth = indent_depth(literal)
            marker = classify(literal)
            if depth and marker is not None and marker.indent == INDENT_UNIT * depth:
                updated = _renumbered(literal, working, row, depth - 1)
                row_splices.append(_numeral_splice(literal.rstrip(), updated.rstrip()))
                line = updated + line[len(literal) :]
        line, splice = defaults.outdent_line(line, target.mode.tab_size)
        if splice is not None:
            row_splices.append(splice)
        working[row] = line
        splices[row] = row_splices

    new_lines = [working[row] for row in rows]
    return [rewrite_rows(target, rows, new_lines, splices)]
