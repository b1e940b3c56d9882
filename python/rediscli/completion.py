"""prompt_toolkit completer for rediscli."""

from __future__ import annotations

from typing import Iterable, List

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from .commands import CommandRegistry
from .helpdata import command_names


def complete_line(text: str, registry: CommandRegistry) -> List[str]:
    """Return candidates whose name starts with the whole *text*."""
    needle = text.upper()
    candidates = [name for name in command_names() if name.startswith(needle)]
    lowered = text.lower()
    candidates.extend(name for name in registry.names() if lowered and name.startswith(lowered))
    return candidates


class CommandCompleter(Completer):
    """Completes store command names and client-side commands."""

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor.lstrip()
        if not text:
            return
        for entry in complete_line(text, self.registry):
            yield Completion(entry, start_position=-len(text))
