"""Registry holding named commands and the bindings that reach them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Sequence, Tuple

from mdlist_engine.runtime.telemetry import span

from .models import Binding, Command


@dataclass(slots=True)
class RegistryStats:
    command_count: int
    binding_count: int
    modes: tuple[str, ...]


class CommandConflictError(RuntimeError):
    """Raised when a binding claims a key another binding owns in that mode."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on {binding.key_signature} in mode '{binding.mode}'"
        )
        self.binding = binding
        self.existing = existing


class CommandRegistry:
    """Commands keyed by ``(mode, name)``, bindings keyed by ``(mode, key)``.

    Lookups walk a sequence of mode scopes, most specific first, so a mode can
    override a command by registering one under the same name without touching
    the key bindings that reach it.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[Tuple[str, str], Command] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_key: Dict[Tuple[str, str], str] = {}
        self._logger_name = logger_name

    def register_command(self, command: Command, *, replace: bool = False) -> Command:
        key = (command.mode, command.name)
        with span(
            "keymaps::register_command",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"command": command.qualified_name},
        ):
            if not replace and key in self._commands:
                raise ValueError(f"Command '{command.qualified_name}' already registered")
            self._commands[key] = command
            return command

    def unregister_command(self, name: str, *, mode: str = "text") -> Optional[Command]:
        return self._commands.pop((mode, name), None)

    def get_command(self, name: str, scopes: Sequence[str] = ("text",)) -> Command:
        for mode in scopes:
            command = self._commands.get((mode, name))
            if command is not None:
                return command
        raise KeyError(f"Command '{name}' is not registered for {list(scopes)}")

    def has_command(self, name: str) -> bool:
        return any(cmd_name == name for _, cmd_name in self._commands)

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if not self.has_command(binding.command):
                handle.add_metadata("missing_command", binding.command)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown command '{binding.command}'"
                )

            slot = (binding.mode, binding.key_signature)
            owner_id = self._by_key.get(slot)
            if owner_id is not None and owner_id != binding.id:
                if not replace:
                    handle.add_metadata("conflict", owner_id)
                    raise CommandConflictError(binding, self._bindings[owner_id])
                self._bindings.pop(owner_id, None)

            previous = self._bindings.get(binding.id)
            if previous is not None:
                if not replace:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
                self._by_key.pop((previous.mode, previous.key_signature), None)

            self._bindings[binding.id] = binding
            self._by_key[slot] = binding.id
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.pop(binding_id, None)
        if binding is not None:
            self._by_key.pop((binding.mode, binding.key_signature), None)
        return binding

    def lookup(
        self, token: str, scopes: Sequence[str]
    ) -> Optional[Tuple[Binding, Command]]:
        """Resolve a key token to its binding and the command it reaches."""

        for mode in scopes:
            binding_id = self._by_key.get((mode, token))
            if binding_id is None:
                continue
            binding = self._bindings[binding_id]
            return binding, self.get_command(binding.command, scopes)
        return None

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        for binding in self._bindings.values():
            if mode is None or binding.mode == mode:
                yield binding

    def stats(self) -> RegistryStats:
        modes = {mode for mode, _ in self._commands} | {
            binding.mode for binding in self._bindings.values()
        }
        return RegistryStats(
            command_count=len(self._commands),
            binding_count=len(self._bindings),
            modes=tuple(sorted(modes)),
        )


__all__ = [
    "CommandConflictError",
    "CommandRegistry",
    "RegistryStats",
]
