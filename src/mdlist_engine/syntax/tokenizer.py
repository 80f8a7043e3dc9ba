"""Single-line tokenizers used by the editing modes.

The markdown tokenizer only distinguishes what list editing needs: a leading
list marker (indent, bullet or numeral, trailing blanks), an optional
checkbox right after it, thematic breaks, and everything else as text.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Tuple


class TokenKind(str, enum.Enum):
    LIST_MARKER = "markup.list"
    CHECKBOX = "checkbox"
    RULE = "rule"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    value: str


LineTokens = Tuple[Token, ...]

_RULE_RE = re.compile(r"^ {0,3}(?:(?:\* ?){3,}|(?:- ?){3,}|(?:_ ?){3,})\s*$")
_MARKER_RE = re.compile(r"^[\t ]*(?:[*-]|\d+\.)[\t ]+")
_CHECKBOX_RE = re.compile(r"\[[ x]\]")


def tokenize_text(line: str) -> LineTokens:
    if not line:
        return ()
    return (Token(TokenKind.TEXT, line),)


def tokenize_markdown(line: str) -> LineTokens:
    if _RULE_RE.match(line):
        return (Token(TokenKind.RULE, line),)

    marker = _MARKER_RE.match(line)
    if marker is None:
        return tokenize_text(line)

    tokens = [Token(TokenKind.LIST_MARKER, marker.group())]
    rest = line[marker.end() :]
    checkbox = _CHECKBOX_RE.match(rest)
    if checkbox is not None:
        tokens.append(Token(TokenKind.CHECKBOX, checkbox.group()))
        rest = rest[checkbox.end() :]
    if rest:
        tokens.append(Token(TokenKind.TEXT, rest))
    return tuple(tokens)


def list_tokens(line: str) -> LineTokens:
    """Markdown tokens of ``line`` when it opens with a list marker, else ``()``."""

    tokens = tokenize_markdown(line)
    if not tokens or tokens[0].kind is not TokenKind.LIST_MARKER:
        return ()
    return tokens


__all__ = [
    "LineTokens",
    "Token",
    "TokenKind",
    "list_tokens",
    "tokenize_markdown",
    "tokenize_text",
]
