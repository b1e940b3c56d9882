"""Pass-through of store commands to the server."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..context import CliContext
from ..output import emit_error, emit_raw, render, render_info
from ..reply import Mode, is_error
from ..sizeof import deep_size
from ..transport import TransportError

LOGGER = logging.getLogger("rediscli.commands.store")

SCRIPT_FLAG = "--script"


class StoreCommand:
    """Sends a command verbatim and prints the reply."""

    def run(self, ctx: CliContext, argv: List[str]) -> int:
        if not argv:
            return 0
        args = self._load_script(argv)
        if args is None:
            return 1
        name = args[0].lower()
        try:
            transport = ctx.ensure_transport()
            reply = transport.execute(*args)
        except TransportError as exc:
            emit_error(str(exc))
            return 2
        if name == "select" and not is_error(reply):
            ctx.set_db(_parse_index(args[1] if len(args) > 1 else ""))
        if name == "info":
            print(render_info(reply))
        elif ctx.mode is Mode.RAW:
            emit_raw(render(reply, ctx.mode))
        else:
            print(render(reply, ctx.mode))
        if name == "eval":
            print(f"Size of result: {deep_size(reply)}")
        return 0

    @staticmethod
    def _load_script(argv: List[str]) -> Optional[List[str]]:
        """Replace ``--script <path>`` with the file's content."""
        if len(argv) < 2 or argv[1] != SCRIPT_FLAG:
            return list(argv)
        if len(argv) < 3:
            emit_error(f"{SCRIPT_FLAG} requires a file path")
            return None
        path = Path(argv[2]).expanduser()
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            emit_error(str(exc))
            return None
        LOGGER.debug("loaded %d bytes of script from %s", len(content), path)
        return [argv[0], content, *argv[3:]]


def _parse_index(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0
