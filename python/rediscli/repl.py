"""Interactive REPL for rediscli."""

from __future__ import annotations

import logging
import sys
from typing import Callable, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .commands import CommandRegistry
from .completion import CommandCompleter
from .context import CliContext
from .history import redact
from .output import emit_error
from .parser import join_command, split_command
from .transport import TransportError

LOGGER = logging.getLogger("rediscli.repl")

WELCOME = """
\tWelcome to rediscli.
\tYou can switch to different redis instance with the CONNECT command.
\tUsage: CONNECT host port [auth]

\tSwitch output mode with MODE command.

\tUsage: MODE [std | raw]
\t"""


class RedactedHistory(InMemoryHistory):
    """In-session history that never keeps passwords."""

    def append_string(self, string: str) -> None:
        tokens = split_command(string)
        if not tokens:
            return
        super().append_string(join_command(redact(tokens)))


class CliREPL:
    """prompt_toolkit REPL with a plain input() loop for piped stdin."""

    def __init__(
        self,
        ctx: CliContext,
        registry: CommandRegistry,
        *,
        welcome: bool = False,
        input_func: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.ctx = ctx
        self.registry = registry
        self.welcome = welcome
        self._input = input_func

    def run(self) -> int:
        self.ctx.history.load()
        try:
            try:
                self.ctx.ensure_transport()
            except TransportError as exc:
                emit_error(str(exc))
            if self.welcome:
                print(WELCOME)
            if self._input is None and sys.stdin.isatty():
                return self._prompt_loop()
            return self._fallback_loop()
        finally:
            self.ctx.history.save()

    def _prompt_loop(self) -> int:
        history = RedactedHistory()
        for entry in self.ctx.history.lines():
            history.append_string(entry)
        session = PromptSession(
            history=history,
            completer=CommandCompleter(self.registry),
            complete_while_typing=False,
        )
        while True:
            try:
                line = session.prompt(self.ctx.prompt)
            except (EOFError, KeyboardInterrupt):
                print()
                return 0
            self.dispatch(line)

    def _fallback_loop(self) -> int:
        read = self._input or input
        while True:
            try:
                line = read("")
            except (EOFError, KeyboardInterrupt):
                return 0
            self.dispatch(line)

    def dispatch(self, line: str) -> Optional[int]:
        """Run one input line; returns None when the line was empty."""
        tokens = split_command(line)
        if not tokens:
            return None
        self.ctx.history.append(tokens)
        return self.run_tokens(tokens)

    def run_tokens(self, tokens: List[str]) -> int:
        cmd_name = tokens[0]
        command = self.registry.get(cmd_name)
        try:
            if command is not None:
                return command.run(self.ctx, tokens[1:])
            rc = self.registry.store.run(self.ctx, tokens)
            print()
            return rc
        except SystemExit:
            raise
        except Exception as exc:
            LOGGER.exception("command failed")
            print(f"Command '{cmd_name}' failed: {exc}")
            return 1
