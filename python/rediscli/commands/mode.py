"""Display mode command."""

from __future__ import annotations

from typing import List

from .base import Command
from ..context import CliContext
from ..output import emit_result
from ..reply import Mode

USAGE = "invalid args. Should be MODE [raw|std]"


class ModeCommand(Command):
    def __init__(self) -> None:
        super().__init__("mode", "Switch reply formatting: MODE [std|raw]")

    def run(self, ctx: CliContext, argv: List[str]) -> int:
        if len(argv) != 1:
            emit_result(USAGE)
            return 1
        try:
            mode = Mode.parse(argv[0])
        except ValueError:
            emit_result(USAGE)
            return 1
        ctx.mode = mode
        return 0
