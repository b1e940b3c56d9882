"""Help command."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .base import Command
from ..context import CliContext
from ..helpdata import lookup_help

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry

GENERIC_HELP = """rediscli
Type:\t"help <command>" for help on <command>
\t"""


class HelpCommand(Command):
    def __init__(self) -> None:
        super().__init__("help", "Show help for a command", aliases=("?",))
        self._registry: CommandRegistry | None = None

    def bind(self, registry: "CommandRegistry") -> None:
        self._registry = registry

    def run(self, ctx: CliContext, argv: List[str]) -> int:
        if not argv:
            self._print_generic()
            return 0
        if len(argv) > 1:
            print()
            return 0
        entry = lookup_help(argv[0])
        if entry is None:
            return 0
        name, params, group = entry
        print()
        print(f"\t{name} {params} ")
        print(f"\tGroup: {group} ")
        print()
        return 0

    def _print_generic(self) -> None:
        print(GENERIC_HELP)
        if not self._registry:
            return
        print("Client commands:")
        for command in self._registry.list_commands():
            print(f"\t{command.format_help()}")
