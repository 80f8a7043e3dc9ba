"""Line storage backing every buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """List-of-lines text storage.

    Documents are treated as values: every mutation returns a new document with
    a bumped ``version`` so snapshots handed out earlier stay valid.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(_lines=text.split("\n"))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BufferDocument":
        return cls(_lines=list(lines) or [""])

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def replace(
        self, *, lines: Iterable[str], dirty: bool | None = None
    ) -> "BufferDocument":
        """Return a new document holding ``lines`` with a bumped version."""

        updated = BufferDocument(
            _lines=list(lines) or [""], version=self.version + 1
        )
        updated.dirty = bool(dirty if dirty is not None else self.dirty)
        return updated

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]
