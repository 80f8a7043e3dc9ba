"""Markdown editing mode with list-aware continuation."""

from __future__ import annotations

from typing import Optional

from mdlist_engine.lists import ListContinuation
from mdlist_engine.syntax import LineTokens, tokenize_markdown

from .base_mode import ModeContext
from .text_mode import TextMode


class MarkdownMode(TextMode):
    """Text mode whose commands and next-line hook understand markdown lists.

    ``list_rules`` decides list continuation; lines it does not recognise get
    the plain text indentation.
    """

    name = "markdown"
    scopes = ("markdown", "text")

    def __init__(
        self,
        context: ModeContext,
        *,
        list_rules: Optional[ListContinuation] = None,
        tab_size: int = 4,
    ) -> None:
        super().__init__(context, tab_size=tab_size)
        self.list_rules = list_rules or ListContinuation()

    def tokenize(self, line: str) -> LineTokens:
        return tokenize_markdown(line)

    def next_line_indent(self, line: str) -> str:
        prefix = self.list_rules.next_line_prefix(line)
        if prefix is None:
            return super().next_line_indent(line)
        return prefix
