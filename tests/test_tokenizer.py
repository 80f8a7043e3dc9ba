from __future__ import annotations

import pytest

from mdlist_engine.syntax import Token, TokenKind, list_tokens, tokenize_markdown, tokenize_text


def values(tokens) -> list[tuple[TokenKind, str]]:
    return [(token.kind, token.value) for token in tokens]


def test_marker_then_text() -> None:
    assert values(tokenize_markdown("* item")) == [
        (TokenKind.LIST_MARKER, "* "),
        (TokenKind.TEXT, "item"),
    ]


def test_marker_keeps_indent_and_trailing_blanks() -> None:
    tokens = tokenize_markdown("\t12.  twelve")

    assert tokens[0] == Token(TokenKind.LIST_MARKER, "\t12.  ")
    assert tokens[1].value == "twelve"


def test_bare_marker_is_a_single_token() -> None:
    assert values(tokenize_markdown("1. ")) == [(TokenKind.LIST_MARKER, "1. ")]
    assert values(tokenize_markdown("\t- ")) == [(TokenKind.LIST_MARKER, "\t- ")]


def test_checkbox_follows_the_marker() -> None:
    assert values(tokenize_markdown("- [ ] ")) == [
        (TokenKind.LIST_MARKER, "- "),
        (TokenKind.CHECKBOX, "[ ]"),
        (TokenKind.TEXT, " "),
    ]
    assert values(tokenize_markdown("- [x] done"))[1] == (TokenKind.CHECKBOX, "[x]")


@pytest.mark.parametrize("line", ["* * *", "---", "- - -", "___", "  ***"])
def test_thematic_breaks_are_rules(line: str) -> None:
    assert values(tokenize_markdown(line)) == [(TokenKind.RULE, line)]


def test_non_list_lines() -> None:
    assert tokenize_markdown("") == ()
    assert values(tokenize_markdown("plain")) == [(TokenKind.TEXT, "plain")]
    assert values(tokenize_markdown("*emphasis*")) == [(TokenKind.TEXT, "*emphasis*")]


def test_text_tokenizer_has_no_markers() -> None:
    assert values(tokenize_text("* item")) == [(TokenKind.TEXT, "* item")]


def test_list_tokens_only_for_list_lines() -> None:
    assert list_tokens("plain") == ()
    assert list_tokens("* * *") == ()
    assert list_tokens("- a")[0].kind is TokenKind.LIST_MARKER
