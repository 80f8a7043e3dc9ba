"""Buffer storage, multi-cursor state, batched edits, and undo history."""

from .buffer import Buffer, BufferDelta, BufferView, Transaction
from .document import BufferDocument
from .edits import Edit
from .state import BufferState, Cursor, CursorSet, Selection, SelectionRange
from .sync import BufferMirror, BufferValidationError
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_cursor, ensure_range

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferDocument",
    "BufferMirror",
    "BufferState",
    "BufferValidationError",
    "BufferView",
    "Cursor",
    "CursorSet",
    "Edit",
    "Selection",
    "SelectionRange",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
    "ensure_cursor",
    "ensure_range",
]
