"""Command registry for rediscli."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .base import Command
from .clear import ClearCommand
from .connect import ConnectCommand
from .exit import ExitCommand
from .help import HelpCommand
from .mode import ModeCommand
from .store import StoreCommand


class CommandRegistry:
    """Stores the client-side commands; names are matched case-insensitively."""

    def __init__(self) -> None:
        self._commands: Dict[str, Command] = {}
        self._ordered: List[Command] = []
        self.store = StoreCommand()

    def register(self, command: Command) -> None:
        self._ordered.append(command)
        self._commands[command.name.lower()] = command
        for alias in command.aliases:
            self._commands[alias.lower()] = command

    def get(self, name: str) -> Optional[Command]:
        return self._commands.get(name.lower())

    def list_commands(self) -> Iterable[Command]:
        return self._ordered

    def names(self) -> List[str]:
        return sorted(self._commands)


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()
    commands = [
        HelpCommand(),
        ExitCommand(),
        ClearCommand(),
        ConnectCommand(),
        ModeCommand(),
    ]
    for command in commands:
        registry.register(command)
        bind = getattr(command, "bind", None)
        if callable(bind):
            bind(registry)
    return registry


__all__ = ["CommandRegistry", "StoreCommand", "build_registry"]
