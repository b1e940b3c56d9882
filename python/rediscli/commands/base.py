"""Command base classes for rediscli."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from ..context import CliContext


@dataclass
class Command:
    """Client-side command handled without contacting the server."""

    name: str
    description: str
    aliases: Sequence[str] = field(default_factory=tuple)

    def run(self, ctx: CliContext, argv: List[str]) -> int:
        raise NotImplementedError("Command must implement run()")

    def format_help(self) -> str:
        names = ", ".join((self.name, *self.aliases))
        return f"{names:<14} {self.description}"
