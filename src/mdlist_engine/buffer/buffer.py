"""High-level buffer façade combining document, cursor state, and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Iterable, List, Optional, Sequence, Tuple

from mdlist_engine.runtime import telemetry

from .document import BufferDocument
from .edits import Edit
from .state import BufferState, Cursor, CursorSet, Selection, SelectionRange
from .sync import BufferMirror
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_cursor, ensure_range


@dataclass(slots=True)
class BufferView:
    version: int
    text: str
    cursor: Cursor
    selection: Optional[Selection]


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    cursors: CursorSet
    label: str
    applied: int = 0
    dropped: int = 0


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        history: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.history = history if history is not None else UndoTimeline()

    @classmethod
    def from_text(
        cls, text: str | Sequence[str], *, name: str = "default"
    ) -> "Buffer":
        if isinstance(text, str):
            document = BufferDocument.from_text(text)
        else:
            document = BufferDocument.from_lines(text)
        return cls(name=name, document=document)

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def lines(self) -> Sequence[str]:
        return self.document.snapshot()

    def line(self, row: int) -> str:
        return self.document.get_line(row)

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            text=self.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
        )

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
            ranges=self.state.cursors.ranges,
            attributes=dict(attributes or {}),
        )

    def set_cursors(self, ranges: Iterable[SelectionRange]) -> CursorSet:
        cursors = CursorSet.of(ensure_range(self.document, item) for item in ranges)
        self.state.cursors = cursors
        return cursors

    def move_cursor(self, row: int, col: int) -> Cursor:
        ensure_cursor(self.document, (row, col))
        self.state.set_cursor(row, col)
        return self.state.cursor

    def get_text_range(self, start: Cursor, end: Cursor) -> str:
        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        if start > end:
            start, end = end, start
        return self.text[_offset(self.lines, start) : _offset(self.lines, end)]

    def replace_range(
        self, start: Cursor, end: Cursor, text: str, *, label: str
    ) -> BufferDelta:
        return self.apply_edits([Edit(start, end, text)], label=label)

    def insert_text(self, text: str, *, cursor: Optional[Cursor] = None) -> BufferDelta:
        position = cursor or self.state.cursor
        return self.replace_range(position, position, text, label="insert_text")

    def apply_edits(self, edits: Iterable[Edit], *, label: str) -> BufferDelta:
        """Commit ``edits`` as a single transaction.

        Every edit addresses the text as it was before the batch. Edits are
        applied in document order; one that overlaps an edit already accepted
        is dropped. The cursor set becomes one range per applied edit.
        """

        lines = self.lines
        before_text = self.text
        located: List[Tuple[int, int, Edit]] = []
        for edit in edits:
            start = ensure_cursor(self.document, edit.start)
            end = ensure_cursor(self.document, edit.end)
            if end < start:
                start, end = end, start
            located.append((_offset(lines, start), _offset(lines, end), edit))
        located.sort(key=lambda item: (item[0], item[1]))

        with Transaction(self, label) as tx:
            pieces: List[str] = []
            carets: List[Tuple[int, int]] = []
            consumed = 0
            shift = 0
            dropped = 0
            for start_offset, end_offset, edit in located:
                if start_offset < consumed:
                    dropped += 1
                    continue
                pieces.append(before_text[consumed:start_offset])
                pieces.append(edit.text)
                base = start_offset + shift
                carets.append((base + edit.anchor_offset, base + edit.head_offset))
                shift += len(edit.text) - (end_offset - start_offset)
                consumed = end_offset
            pieces.append(before_text[consumed:])
            after_text = "".join(pieces)

            if dropped:
                tx.handle.add_metadata("dropped", dropped)
                telemetry.record_event(
                    "buffer.edits_dropped",
                    level="warning",
                    data={"buffer": self.name, "label": label, "count": dropped},
                )

            cursors_before = self.state.cursors
            if after_text != before_text:
                self.document = self.document.replace(
                    lines=after_text.split("\n"), dirty=True
                )
                self.state.last_change_tick = self.document.version
            if carets:
                new_lines = self.lines
                self.state.cursors = CursorSet.of(
                    SelectionRange(
                        _cursor_at(new_lines, anchor), _cursor_at(new_lines, head)
                    )
                    for anchor, head in carets
                )
            if after_text != before_text:
                tx.commit(before_text, after_text, cursors_before, self.state.cursors)

        return BufferDelta(
            version=self.document.version,
            text=after_text,
            cursors=self.state.cursors,
            label=label,
            applied=len(carets),
            dropped=dropped,
        )

    def undo(self) -> bool:
        entry = self.history.undo()
        if entry is None:
            return False
        self._restore(entry.before_text, entry.cursors_before)
        return True

    def redo(self) -> bool:
        entry = self.history.redo()
        if entry is None:
            return False
        self._restore(entry.after_text, entry.cursors_after)
        return True

    def _restore(self, text: str, cursors: CursorSet) -> None:
        self.document = self.document.replace(lines=text.split("\n"), dirty=True)
        self.state.cursors = cursors
        self.state.last_change_tick = self.document.version


class Transaction(AbstractContextManager["Transaction"]):
    """Groups one batch of edits under a telemetry span and one undo entry."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self.handle: telemetry.SpanHandle

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self.handle = self._span_cm.__enter__()
        return self

    def commit(
        self,
        before_text: str,
        after_text: str,
        cursors_before: CursorSet,
        cursors_after: CursorSet,
    ) -> None:
        self.buffer.history.push(
            UndoEntry(
                label=self.label,
                before_text=before_text,
                after_text=after_text,
                cursors_before=cursors_before,
                cursors_after=cursors_after,
            )
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def _offset(lines: Sequence[str], cursor: Cursor) -> int:
    row, col = cursor
    return sum(len(lines[i]) + 1 for i in range(row)) + col


def _cursor_at(lines: Sequence[str], offset: int) -> Cursor:
    running = 0
    for row, line in enumerate(lines):
        if offset <= running + len(line):
            return (row, max(0, offset - running))
        running += len(line) + 1
    return (len(lines) - 1, len(lines[-1]))
