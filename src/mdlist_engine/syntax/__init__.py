"""Line tokenizers consumed by the editing modes."""

from .tokenizer import (
    LineTokens,
    Token,
    TokenKind,
    list_tokens,
    tokenize_markdown,
    tokenize_text,
)

__all__ = [
    "LineTokens",
    "Token",
    "TokenKind",
    "list_tokens",
    "tokenize_markdown",
    "tokenize_text",
]
