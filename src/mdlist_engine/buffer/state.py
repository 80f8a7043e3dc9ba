"""Cursor and multi-selection state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

Cursor = Tuple[int, int]  # (row, column)
Selection = Tuple[Cursor, Cursor]


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """A selection from ``anchor`` to ``head``; a plain caret when they match."""

    anchor: Cursor
    head: Cursor

    @classmethod
    def caret(cls, row: int, col: int) -> "SelectionRange":
        return cls((row, col), (row, col))

    @property
    def start(self) -> Cursor:
        return min(self.anchor, self.head)

    @property
    def end(self) -> Cursor:
        return max(self.anchor, self.head)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.head

    @property
    def reversed(self) -> bool:
        return self.head < self.anchor

    def rows(self) -> range:
        """Rows a line-wise command touches.

        A selection ending at column 0 of a later row does not include that row.
        """

        (start_row, _), (end_row, end_col) = self.start, self.end
        if end_col == 0 and end_row > start_row:
            end_row -= 1
        return range(start_row, end_row + 1)


@dataclass(frozen=True, slots=True)
class CursorSet:
    """One or more selection ranges; the first one is the primary range."""

    ranges: Tuple[SelectionRange, ...]

    def __post_init__(self) -> None:
        if not self.ranges:
            raise ValueError("CursorSet requires at least one range")
        unique = tuple(dict.fromkeys(self.ranges))
        object.__setattr__(self, "ranges", unique)

    @classmethod
    def caret(cls, row: int = 0, col: int = 0) -> "CursorSet":
        return cls((SelectionRange.caret(row, col),))

    @classmethod
    def of(cls, ranges: Iterable[SelectionRange]) -> "CursorSet":
        return cls(tuple(ranges))

    @property
    def primary(self) -> SelectionRange:
        return self.ranges[0]

    def __iter__(self) -> Iterator[SelectionRange]:
        return iter(self.ranges)

    def __len__(self) -> int:
        return len(self.ranges)

    def merged_by_rows(self) -> List[SelectionRange]:
        """Ranges in document order with row-overlapping ranges folded together."""

        merged: List[SelectionRange] = []
        for current in sorted(self.ranges, key=lambda item: item.start):
            if merged and current.rows().start <= merged[-1].rows()[-1]:
                previous = merged[-1]
                start = min(previous.start, current.start)
                end = max(previous.end, current.end)
                merged[-1] = SelectionRange(start, end)
                continue
            merged.append(current)
        return merged


@dataclass(slots=True)
class BufferState:
    """Mutable cursor set attached to a buffer."""

    cursors: CursorSet = CursorSet.caret()
    last_change_tick: int = 0

    @property
    def cursor(self) -> Cursor:
        return self.cursors.primary.head

    @property
    def selection(self) -> Optional[Selection]:
        primary = self.cursors.primary
        if primary.is_empty:
            return None
        return (primary.start, primary.end)

    def set_cursor(self, row: int, col: int) -> None:
        self.cursors = CursorSet.caret(row, col)

    def set_selection(self, start: Cursor, end: Cursor) -> None:
        self.cursors = CursorSet((SelectionRange(start, end),))

    def add_range(self, selection: SelectionRange) -> None:
        self.cursors = CursorSet(self.cursors.ranges + (selection,))
