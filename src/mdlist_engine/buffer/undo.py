"""Per-buffer undo/redo stacks, one entry per committed edit batch."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from .state import CursorSet


@dataclass(frozen=True, slots=True)
class UndoEntry:
    """Whole-text snapshots around one batch, with the cursor sets to restore."""

    label: str
    before_text: str
    after_text: str
    cursors_before: CursorSet
    cursors_after: CursorSet


class UndoTimeline:
    """Done/undone stacks.

    ``limit`` caps how many batches can be undone; the oldest is forgotten
    first. Recording a new batch empties the redo stack.
    """

    def __init__(self, limit: Optional[int] = None) -> None:
        if limit is not None and limit <= 0:
            raise ValueError("limit must be positive")
        self._done: Deque[UndoEntry] = deque(maxlen=limit)
        self._undone: list[UndoEntry] = []

    def __len__(self) -> int:
        return len(self._done)

    def push(self, entry: UndoEntry) -> None:
        self._done.append(entry)
        self._undone.clear()

    def can_undo(self) -> bool:
        return bool(self._done)

    def can_redo(self) -> bool:
        return bool(self._undone)

    def undo(self) -> Optional[UndoEntry]:
        if not self._done:
            return None
        entry = self._done.pop()
        self._undone.append(entry)
        return entry

    def redo(self) -> Optional[UndoEntry]:
        if not self._undone:
            return None
        entry = self._undone.pop()
        self._done.append(entry)
        return entry
