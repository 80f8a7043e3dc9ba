"""Command execution with multi-selection fan-out."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

from mdlist_engine.buffer import Edit, SelectionRange
from mdlist_engine.keymaps import Command
from mdlist_engine.runtime import telemetry

from .base_mode import CommandTarget, ModeResult

if TYPE_CHECKING:  # pragma: no cover
    from .text_mode import TextMode


def selection_targets(command: Command, mode: "TextMode") -> List[SelectionRange]:
    cursors = mode.context.buffer.state.cursors
    if command.multi_select == "forEachLine":
        return cursors.merged_by_rows()
    return sorted(cursors, key=lambda item: (item.start, item.end))


def run_command(mode: "TextMode", command: Command, **kwargs: object) -> ModeResult:
    """Execute ``command`` in ``mode``.

    Multi-selection commands are called once per range, in document order,
    against the same snapshot; their edits are committed by one
    ``Buffer.apply_edits`` call so positions computed for one range stay valid
    for the others. Rows rewritten by earlier ranges are visible to later ones
    through the shared ``CommandTarget.working`` copy.
    """

    context = mode.context
    buffer = context.buffer
    with telemetry.span(
        f"command::{command.name}",
        component="commands",
        metadata={
            "command": command.qualified_name,
            "ranges": len(buffer.state.cursors),
        },
    ) as handle:
        if command.multi_select is None:
            outcome = command(mode, **kwargs)
            if isinstance(outcome, ModeResult):
                return outcome
            return ModeResult(consumed=True, status=command.name)

        lines = buffer.lines
        working = list(lines)
        edits: List[Edit] = []
        scroll = False
        for selection in selection_targets(command, mode):
            target = CommandTarget(
                mode=mode,
                buffer=buffer,
                selection=selection,
                lines=lines,
                working=working,
            )
            produced = list(_as_edits(command(target, **kwargs)))
            if not produced:
                kept = buffer.get_text_range(selection.start, selection.end)
                produced = [Edit.keep(selection, kept)]
            edits.extend(produced)
            scroll = scroll or target.scroll_requested

        delta = buffer.apply_edits(edits, label=command.name)
        handle.add_metadata("applied", delta.applied)

    context.bus.emit("buffer.changed", command.name)
    if scroll:
        context.bus.emit("view.scroll_into_view", buffer.state.cursor[0])
    return ModeResult(consumed=True, status=command.name)


def _as_edits(produced: object) -> Iterable[Edit]:
    if produced is None:
        return ()
    if isinstance(produced, Edit):
        return (produced,)
    return produced  # type: ignore[return-value]


__all__ = ["run_command", "selection_targets"]
