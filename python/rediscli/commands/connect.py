"""Connect command implementation."""

from __future__ import annotations

import logging
from typing import Any, List

from .base import Command
from ..context import CliContext
from ..output import emit_error, emit_result
from ..transport import TransportError

LOGGER = logging.getLogger("rediscli.commands.connect")

USAGE = "invalid connect arguments. At least provides host and port."


class ConnectCommand(Command):
    def __init__(self) -> None:
        super().__init__("connect", "Switch server: CONNECT host port [auth]")

    def run(self, ctx: CliContext, argv: List[str]) -> int:
        if len(argv) < 2 or not argv[0] or not argv[1]:
            emit_error(USAGE)
            return 1
        host, port = argv[0], argv[1]
        password = argv[2] if len(argv) > 2 else ""
        try:
            transport = ctx.open_transport(host, port, password=password)
        except TransportError as exc:
            emit_error(str(exc))
            return 2
        try:
            # AUTH is part of the connection handshake, so PING covers it
            transport.ping()
        except TransportError as exc:
            # the current connection stays in place
            emit_error(str(exc))
            _discard(transport)
            return 2
        ctx.adopt(transport, host=host, port=port, password=password)
        emit_result(f"connected {host}:{port} successfully ")
        return 0


def _discard(transport: Any) -> None:
    try:
        transport.close()
    except Exception as exc:  # pragma: no cover - best effort
        LOGGER.debug("closing rejected transport failed: %s", exc)
