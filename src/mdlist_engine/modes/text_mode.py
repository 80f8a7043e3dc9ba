"""Plain text editing mode: key dispatch plus the default editing hooks."""

from __future__ import annotations

import re

from mdlist_engine.keymaps import Command
from mdlist_engine.runtime import telemetry
from mdlist_engine.syntax import LineTokens, TokenKind, tokenize_text

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .dispatch import run_command
from .keymap_helpers import key_to_token, require_command_registry, typed_text

_INDENT_RE = re.compile(r"^\s*")


class TextMode(Mode):
    name = "text"
    scopes: tuple[str, ...] = ("text",)

    def __init__(self, context: ModeContext, *, tab_size: int = 4) -> None:
        super().__init__(context)
        if tab_size <= 0:
            raise ValueError("tab_size must be positive")
        self.tab_size = tab_size
        self.logger = telemetry.get_logger(f"mdlist_engine.modes.{self.name}")
        self.registry = require_command_registry(context)

    def tokenize(self, line: str) -> LineTokens:
        return tokenize_text(line)

    def list_tokens(self, line: str) -> LineTokens:
        """Tokens of ``line`` if its first token is a list marker, else ``()``."""

        tokens = self.tokenize(line)
        if not tokens or tokens[0].kind is not TokenKind.LIST_MARKER:
            return ()
        return tokens

    def next_line_indent(self, line: str) -> str:
        """Prefix for the line that follows ``line`` after a newline."""

        return _INDENT_RE.match(line).group()  # type: ignore[union-attr]

    def command(self, name: str) -> Command:
        return self.registry.get_command(name, self.scopes)

    def run(self, command: Command | str, **kwargs: object) -> ModeResult:
        if isinstance(command, str):
            command = self.command(command)
        return run_command(self, command, **kwargs)

    def handle_key(self, key: KeyInput) -> ModeResult:
        token = key_to_token(key)
        found = self.registry.lookup(token, self.scopes)
        if found is not None:
            binding, command = found
            with telemetry.span(
                "keymaps::execute",
                component="keymaps",
                metadata={"binding_id": binding.id, "command": command.qualified_name},
            ):
                return self.run(command)

        text = typed_text(key)
        if text is not None:
            return self.run("insert_text", text=text)
        return ModeResult(consumed=False, status="unbound", message=token)
