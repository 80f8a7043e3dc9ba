"""Mode manager owning the registered modes and dispatching key input."""

from __future__ import annotations

from typing import Dict, Optional, Type

from mdlist_engine.keymaps import CommandRegistry
from mdlist_engine.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .text_mode import TextMode


class ModeManager:
    """Owns the active mode, handles transitions, and dispatches key events."""

    def __init__(
        self,
        context: ModeContext,
        *,
        command_registry: CommandRegistry | None = None,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.logger = telemetry.get_logger("mdlist_engine.modes")
        self.command_registry = command_registry or CommandRegistry(
            logger_name="mdlist_engine.keymaps"
        )
        self.context.extras.setdefault("command_registry", self.command_registry)
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous.name if previous else None)
        telemetry.record_event("mode.switch", data={"mode": name})

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self._require_active()
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result

    def execute(self, command: str, **kwargs: object) -> ModeResult:
        """Run a named command in the active mode, as if its key was pressed."""

        mode = self._require_active()
        if not isinstance(mode, TextMode):
            raise RuntimeError(f"Mode '{mode.name}' does not run commands")
        return mode.run(command, **kwargs)

    def _require_active(self) -> Mode:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        return mode
