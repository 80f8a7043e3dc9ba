"""List-marker classification for single lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

INDENT_UNIT = "\t"
HORIZONTAL_RULE = "* * *"

_CHECKBOX_PREFIXES = {"- [ ] ": False, "- [x] ": True, "- [X] ": True}
_ORDINAL_RE = re.compile(r"^(\d+)\.(\s.*|)$", re.DOTALL)
_NUMERAL_RE = re.compile(r"\d+\.")


@dataclass(frozen=True, slots=True)
class Bullet:
    pass


@dataclass(frozen=True, slots=True)
class Star:
    pass


@dataclass(frozen=True, slots=True)
class Checkbox:
    checked: bool = False


@dataclass(frozen=True, slots=True)
class Ordered:
    number: int


MarkerShape = Union[Bullet, Star, Checkbox, Ordered]


@dataclass(frozen=True, slots=True)
class ListMarker:
    """A classified marker and the whitespace it was indented by."""

    indent: str
    shape: MarkerShape

    @property
    def depth(self) -> int:
        return indent_depth(self.indent)


def leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip(" \t"))]


def indent_depth(text: str) -> int:
    """Number of indent units ``text`` starts with."""

    return len(text) - len(text.lstrip(INDENT_UNIT))


def parse_ordinal(text: str) -> int:
    """Return ``N`` for text shaped like ``N.`` or ``N. rest``, else ``0``."""

    match = _ORDINAL_RE.match(text)
    return int(match.group(1)) if match else 0


def classify(line: str) -> Optional[ListMarker]:
    indent = leading_whitespace(line)
    rest = line[len(indent) :]

    for prefix, checked in _CHECKBOX_PREFIXES.items():
        if rest.startswith(prefix):
            return ListMarker(indent, Checkbox(checked))
    if rest.startswith("- "):
        return ListMarker(indent, Bullet())
    if rest.startswith("* ") and line.strip() != HORIZONTAL_RULE:
        return ListMarker(indent, Star())

    number = parse_ordinal(rest)
    if number:
        return ListMarker(indent, Ordered(number))
    return None


def renumber(literal: str, number: int) -> str:
    """Rewrite the first ``digits.`` in a marker literal to ``number.``."""

    return _NUMERAL_RE.sub(f"{number}.", literal, count=1)


__all__ = [
    "Bullet",
    "Checkbox",
    "INDENT_UNIT",
    "ListMarker",
    "MarkerShape",
    "Ordered",
    "Star",
    "classify",
    "indent_depth",
    "leading_whitespace",
    "parse_ordinal",
    "renumber",
]
