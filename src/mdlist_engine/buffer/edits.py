"""Replacement records collected by commands and committed as one batch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .state import Cursor, SelectionRange


@dataclass(frozen=True, slots=True)
class Edit:
    """Replace ``start``..``end`` of the pre-command text with ``text``.

    ``anchor`` and ``head`` are offsets into ``text`` where the resulting
    selection lands; both default to the end of ``text``. Offsets past the end
    of ``text`` address the unchanged text that follows the edit.
    """

    start: Cursor
    end: Cursor
    text: str
    anchor: Optional[int] = None
    head: Optional[int] = None

    @classmethod
    def insert(cls, at: Cursor, text: str) -> "Edit":
        return cls(at, at, text)

    @classmethod
    def keep(cls, selection: SelectionRange, text: str) -> "Edit":
        """No-op replacement of ``selection`` that preserves it as-is.

        ``text`` must be the current content of the range.
        """

        anchor, head = 0, len(text)
        if selection.reversed:
            anchor, head = head, anchor
        return cls(selection.start, selection.end, text, anchor, head)

    @property
    def anchor_offset(self) -> int:
        return len(self.text) if self.anchor is None else self.anchor

    @property
    def head_offset(self) -> int:
        return len(self.text) if self.head is None else self.head
