"""Next-line prefixes for list items."""

from __future__ import annotations

from typing import Optional

from .markers import Bullet, Checkbox, ListMarker, MarkerShape, Ordered, Star, classify


class ListContinuation:
    """List rules handed to the markdown mode.

    ``next_line_prefix`` answers ``None`` for lines that are not list items so
    the mode can fall back to its own indentation.
    """

    def classify(self, line: str) -> Optional[ListMarker]:
        return classify(line)

    def next_line_prefix(self, line: str) -> Optional[str]:
        marker = self.classify(line)
        if marker is None:
            return None
        return marker.indent + continuation_for(marker.shape)


def continuation_for(shape: MarkerShape) -> str:
    if isinstance(shape, Checkbox):
        return "- [ ] "
    if isinstance(shape, Bullet):
        return "- "
    if isinstance(shape, Star):
        return "* "
    if isinstance(shape, Ordered):
        return f"{shape.number + 1}. "
    raise TypeError(f"Unknown marker shape {shape!r}")
