"""Default editing behaviour shared by every text mode."""

from __future__ import annotations

from typing import List, Optional, Tuple

from mdlist_engine.buffer import Edit
from mdlist_engine.modes import CommandTarget, ModeResult, TextMode

from .rows import Splice, rewrite_rows

TAB = "\t"


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip())


def newline(target: CommandTarget) -> List[Edit]:
    """Replace the selection with a line break plus the next line's indent.

    Blanks right after the caret are swallowed when the caret sits past the
    line's indentation.
    """

    start, end = target.selection.start, target.selection.end
    row, col = start
    head = target.lines[row][:col]
    tail = target.lines[end[0]][end[1] :]
    if col > _indent_width(head + tail):
        end = (end[0], end[1] + _indent_width(tail))
    target.scroll_into_view()
    return [Edit(start, end, "\n" + target.mode.next_line_indent(head))]


def insert_text(target: CommandTarget, text: str = "") -> List[Edit]:
    selection = target.selection
    return [Edit(selection.start, selection.end, text)]


def indent(target: CommandTarget) -> List[Edit]:
    selection = target.selection
    (start_row, start_col), (end_row, end_col) = selection.start, selection.end
    if start_row < end_row:
        return indent_rows(target, selection.rows())
    if not selection.is_empty and target.lines[start_row][start_col:end_col].strip():
        return indent_rows(target, selection.rows())
    return [Edit(selection.start, selection.end, TAB)]


def indent_rows(target: CommandTarget, rows: range) -> List[Edit]:
    new_lines = [TAB + target.lines[row] for row in rows]
    target.working[rows.start : rows.stop] = new_lines
    splices = {row: [(0, 0, len(TAB))] for row in rows}
    return [rewrite_rows(target, rows, new_lines, splices)]


def outdent_line(line: str, tab_size: int) -> Tuple[str, Optional[Splice]]:
    """Drop one indent unit: a tab after fewer than ``tab_size`` spaces, else spaces."""

    spaces = 0
    while spaces < tab_size and line[spaces : spaces + 1] == " ":
        spaces += 1
    if spaces < tab_size and line[spaces : spaces + 1] == TAB:
        return line[:spaces] + line[spaces + 1 :], (spaces, 1, 0)
    if spaces:
        return line[spaces:], (0, spaces, 0)
    return line, None


def block_outdent(target: CommandTarget) -> List[Edit]:
    rows = target.selection.rows()
    new_lines: List[str] = []
    splices = {}
    for row in rows:
        line, splice = outdent_line(target.lines[row], target.mode.tab_size)
        new_lines.append(line)
        target.working[row] = line
        if splice is not None:
            splices[row] = [splice]
    return [rewrite_rows(target, rows, new_lines, splices)]


def undo(mode: TextMode) -> ModeResult:
    if mode.context.buffer.undo():
        mode.context.bus.emit("buffer.changed", "undo")
        return ModeResult(consumed=True, status="undo")
    return ModeResult(consumed=True, status="noop", message="nothing to undo")


def redo(mode: TextMode) -> ModeResult:
    if mode.context.buffer.redo():
        mode.context.bus.emit("buffer.changed", "redo")
        return ModeResult(consumed=True, status="redo")
    return ModeResult(consumed=True, status="noop", message="nothing to redo")
