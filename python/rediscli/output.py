"""Reply rendering and output helpers for rediscli."""

from __future__ import annotations

import sys
from typing import Any

from .reply import Blob, ErrorValue, Integer, Mode, Null, Sequence, Text

RAW_INDENT = 4

_ESCAPES = {
    ord("\\"): "\\\\",
    ord('"'): '\\"',
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    0x07: "\\a",
    0x08: "\\b",
}


def quote_bytes(data: bytes) -> str:
    """Return *data* as a double-quoted, escaped string (redis-cli style)."""
    parts = ['"']
    for byte in data:
        escaped = _ESCAPES.get(byte)
        if escaped is not None:
            parts.append(escaped)
        elif 0x20 <= byte < 0x7F:
            parts.append(chr(byte))
        else:
            parts.append(f"\\x{byte:02x}")
    parts.append('"')
    return "".join(parts)


def render(reply: Any, mode: Mode = Mode.STANDARD) -> str:
    """Render a top-level reply; the caller adds the trailing newline."""
    if mode is Mode.RAW:
        return _render_raw(reply, 0)
    return _render_std(reply, 0)


def _render_std(reply: Any, column: int) -> str:
    # column is the width of the labels already printed to the left
    if isinstance(reply, Integer):
        return f"(integer) {reply.value}"
    if isinstance(reply, Text):
        return reply.value
    if isinstance(reply, Blob):
        return quote_bytes(reply.value)
    if isinstance(reply, Null):
        return "(nil)"
    if isinstance(reply, ErrorValue):
        return f"{reply.message}\n"
    if isinstance(reply, Sequence):
        width = len(str(len(reply)))
        lines = []
        for idx, item in enumerate(reply, 1):
            label = f"{idx:>{width}}) "
            lead = " " * column if idx > 1 else ""
            lines.append(lead + label + _render_std(item, column + len(label)))
        return "\n".join(lines)
    return _unknown(reply)


def _render_raw(reply: Any, level: int) -> str:
    if isinstance(reply, Integer):
        return str(reply.value)
    if isinstance(reply, Text):
        return reply.value
    if isinstance(reply, Blob):
        return reply.value.decode("utf-8", errors="surrogateescape")
    if isinstance(reply, Null):
        return ""
    if isinstance(reply, ErrorValue):
        return f"{reply.message}\n"
    if isinstance(reply, Sequence):
        lines = []
        for idx, item in enumerate(reply):
            lead = " " * (RAW_INDENT * level) if idx else ""
            lines.append(lead + _render_raw(item, level + 1))
        return "\n".join(lines)
    return _unknown(reply)


def _unknown(reply: Any) -> str:
    return f"Unknown reply type: {reply!r}"


def render_info(reply: Any) -> str:
    """Render an INFO reply: the payload verbatim, never as a tree."""
    if isinstance(reply, Blob):
        return reply.value.decode("utf-8", errors="replace")
    if isinstance(reply, Text):
        return reply.value
    if isinstance(reply, ErrorValue):
        return f"(error) {reply.message}"
    # some proxies answer INFO with shapes we do not print
    return ""


def emit_result(message: str) -> None:
    """Emit a command result line."""
    print(message)


def emit_error(message: str) -> None:
    """Emit an inline error."""
    print(f"(error) {message}")


def emit_raw(message: str) -> None:
    """Emit raw-mode output, writing undecodable reply bytes back unchanged."""
    stream = sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        print(message)
        return
    stream.flush()
    buffer.write(message.encode("utf-8", errors="surrogateescape") + b"\n")
    buffer.flush()


__all__ = [
    "quote_bytes",
    "render",
    "render_info",
    "emit_result",
    "emit_error",
    "emit_raw",
]
