"""Exit command."""

from __future__ import annotations

from typing import List

from .base import Command
from ..context import CliContext


class ExitCommand(Command):
    def __init__(self) -> None:
        super().__init__("quit", "Exit the client", aliases=("exit",))

    def run(self, ctx: CliContext, argv: List[str]) -> int:
        ctx.disconnect()
        raise SystemExit(0)
