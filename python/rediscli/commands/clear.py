"""Clear command."""

from __future__ import annotations

from typing import List

from .base import Command
from ..context import CliContext
from ..output import emit_result


class ClearCommand(Command):
    def __init__(self) -> None:
        super().__init__("clear", "Clear the screen")

    def run(self, ctx: CliContext, argv: List[str]) -> int:
        # the line editor owns the terminal; Ctrl+L clears it
        emit_result("Please use Ctrl + L instead")
        return 0
