"""rediscli entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from .commands import CommandRegistry, build_registry
from .context import CliContext
from .history import DEFAULT_HISTORY_PATH, HistoryStore
from .reply import Mode
from .repl import CliREPL

LOG = logging.getLogger("rediscli.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rediscli",
        description="Interactive command-line client for Redis",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", dest="host", default=os.environ.get("REDIS_HOST", "127.0.0.1"), help="Server hostname")
    parser.add_argument("-p", dest="port", default=os.environ.get("REDIS_PORT", "6379"), help="Server port")
    parser.add_argument("-s", dest="socket", default="", help="Server socket (overrides hostname and port)")
    parser.add_argument("-n", dest="db", type=int, default=0, help="Database number (default 0)")
    parser.add_argument("-a", dest="password", default="", help="Password to use when connecting to the server")
    parser.add_argument("-raw", dest="raw", action="store_true", help="Use raw formatting for replies")
    parser.add_argument("-welcome", dest="welcome", action="store_true", help="Show welcome message")
    parser.add_argument("--tls", action="store_true", help="Connect using TLS")
    parser.add_argument(
        "--history",
        type=Path,
        default=DEFAULT_HISTORY_PATH,
        help="Path to command history file",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("REDISCLI_LOG", "WARNING"),
        help="Logging level (default WARNING)",
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="Command to run once instead of the REPL")
    return parser


def build_context(args: argparse.Namespace) -> CliContext:
    return CliContext(
        host=args.host,
        port=str(args.port),
        unix_socket=args.socket,
        password=args.password,
        db=args.db,
        mode=Mode.RAW if args.raw else Mode.STANDARD,
        tls=args.tls,
        history=HistoryStore(str(args.history)),
    )


def main(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    ctx = build_context(args)
    registry = build_registry()
    if args.command:
        return _run_single_command(ctx, registry, args.command)
    repl = CliREPL(ctx, registry, welcome=args.welcome)
    try:
        return repl.run()
    except KeyboardInterrupt:
        print()
        return 0
    finally:
        ctx.disconnect()


def _run_single_command(ctx: CliContext, registry: CommandRegistry, argv: List[str]) -> int:
    LOG.debug("running single command %s", argv[0])
    try:
        return registry.store.run(ctx, list(argv))
    finally:
        ctx.disconnect()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
