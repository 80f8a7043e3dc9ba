"""Built-in commands and key bindings that seed a command registry."""

from __future__ import annotations

from typing import Iterable, Sequence

from mdlist_engine.keymaps import Binding, Command, CommandRegistry, KeyStroke

from . import defaults, lists

DEFAULT_COMMANDS: tuple[Command, ...] = (
    Command(
        name="enter",
        handler=defaults.newline,
        multi_select="forEach",
        description="Insert a line break",
    ),
    Command(
        name="indent",
        handler=defaults.indent,
        multi_select="forEach",
        description="Insert a tab or indent the selected rows",
    ),
    Command(
        name="outdent",
        handler=defaults.block_outdent,
        multi_select="forEachLine",
        description="Remove one indent unit from the selected rows",
    ),
    Command(
        name="insert_text",
        handler=defaults.insert_text,
        multi_select="forEach",
        description="Replace each selection with typed text",
    ),
    Command(name="undo", handler=defaults.undo, description="Undo the last change"),
    Command(name="redo", handler=defaults.redo, description="Redo the last undone change"),
    Command(
        name="enter",
        mode="markdown",
        handler=lists.enter,
        multi_select="forEach",
        description="Continue the list, or clear an empty list item",
    ),
    Command(
        name="indent",
        mode="markdown",
        handler=lists.indent,
        multi_select="forEach",
        description="Nest the list item and renumber it",
    ),
    Command(
        name="outdent",
        mode="markdown",
        handler=lists.outdent,
        multi_select="forEachLine",
        description="Lift list items one level and renumber them",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="text.enter",
        mode="text",
        stroke=KeyStroke("ENTER"),
        command="enter",
        description="Insert a line break",
    ),
    Binding(
        id="text.return",
        mode="text",
        stroke=KeyStroke("RETURN"),
        command="enter",
        description="Insert a line break",
    ),
    Binding(
        id="text.indent",
        mode="text",
        stroke=KeyStroke("TAB"),
        command="indent",
        description="Indent",
    ),
    Binding(
        id="text.outdent",
        mode="text",
        stroke=KeyStroke.parse("shift+Tab"),
        command="outdent",
        description="Outdent",
    ),
    Binding(
        id="text.undo",
        mode="text",
        stroke=KeyStroke.parse("ctrl+z"),
        command="undo",
        description="Undo",
    ),
    Binding(
        id="text.redo",
        mode="text",
        stroke=KeyStroke.parse("ctrl+y"),
        command="redo",
        description="Redo",
    ),
)


def load_default_commands(
    registry: CommandRegistry,
    *,
    replace: bool = False,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register the built-in commands and bindings.

    ``include``/``exclude`` filter by command qualified name (``"markdown.enter"``)
    or binding id (``"text.enter"``). Dropping ``markdown.*`` commands leaves the
    markdown mode with plain text behaviour.
    """

    for command in DEFAULT_COMMANDS:
        if _selected(command.qualified_name, include, exclude):
            registry.register_command(command, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if _selected(binding.id, include, exclude) and registry.has_command(
            binding.command
        ):
            registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


def _selected(
    item_id: str, include: Sequence[str] | None, exclude: Sequence[str] | None
) -> bool:
    if include is not None and item_id not in include:
        return False
    return item_id not in (exclude or ())


__all__ = ["DEFAULT_BINDINGS", "DEFAULT_COMMANDS", "load_default_commands"]
