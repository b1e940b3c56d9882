"""Reply values returned by the store."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Tuple, Union

from redis.exceptions import ResponseError


class Mode(enum.Enum):
    """Display mode for rendered replies."""

    STANDARD = "std"
    RAW = "raw"

    @classmethod
    def parse(cls, text: str) -> "Mode":
        return cls(text.strip().lower())


@dataclass(frozen=True)
class Integer:
    value: int


@dataclass(frozen=True)
class Text:
    """Status reply such as ``+OK``; printed verbatim."""

    value: str


@dataclass(frozen=True)
class Blob:
    """Binary-safe bulk string."""

    value: bytes


@dataclass(frozen=True)
class Null:
    pass


@dataclass(frozen=True)
class ErrorValue:
    message: str


@dataclass(frozen=True)
class Sequence:
    items: Tuple["Reply", ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


Reply = Union[Integer, Text, Blob, Null, ErrorValue, Sequence]


def from_redis(value: Any) -> Any:
    """Convert a parsed redis-py response into a Reply.

    Status replies arrive as ``str`` and bulk strings as ``bytes`` (see
    ``transport.StatusReplyParser``).  Values of any other type are returned
    unchanged so the renderer can report them.
    """
    if value is None:
        return Null()
    if isinstance(value, bool):
        return Integer(int(value))
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Blob(bytes(value))
    if isinstance(value, ResponseError):
        return ErrorValue(str(value))
    if isinstance(value, (list, tuple)):
        return Sequence(tuple(from_redis(item) for item in value))
    return value


def is_error(reply: Any) -> bool:
    return isinstance(reply, ErrorValue)


__all__ = [
    "Mode",
    "Integer",
    "Text",
    "Blob",
    "Null",
    "ErrorValue",
    "Sequence",
    "Reply",
    "from_redis",
    "is_error",
]
