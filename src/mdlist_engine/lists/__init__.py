"""Markdown list rules: marker classification, continuation, and renumbering."""

from .continuation import ListContinuation, continuation_for
from .markers import (
    INDENT_UNIT,
    Bullet,
    Checkbox,
    ListMarker,
    MarkerShape,
    Ordered,
    Star,
    classify,
    indent_depth,
    leading_whitespace,
    parse_ordinal,
    renumber,
)
from .ordinals import find_preceding_ordinal

__all__ = [
    "Bullet",
    "Checkbox",
    "INDENT_UNIT",
    "ListContinuation",
    "ListMarker",
    "MarkerShape",
    "Ordered",
    "Star",
    "classify",
    "continuation_for",
    "find_preceding_ordinal",
    "indent_depth",
    "leading_whitespace",
    "parse_ordinal",
    "renumber",
]
