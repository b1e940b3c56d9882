"""Approximate deep in-memory size of Python objects."""

from __future__ import annotations

import dataclasses
import sys
from typing import Any, Set


def deep_size(obj: Any) -> int:
    """Return the bytes occupied by *obj* and everything it references.

    Objects already visited are counted once, so cyclic graphs terminate.
    Returns -1 if the size of some object cannot be determined.
    """
    try:
        return _size(obj, set())
    except (TypeError, ValueError, RecursionError):
        return -1


def _size(obj: Any, seen: Set[int]) -> int:
    if id(obj) in seen:
        return 0
    seen.add(id(obj))
    total = sys.getsizeof(obj)
    if isinstance(obj, (str, bytes, bytearray, int, float, bool, type(None))):
        return total
    if isinstance(obj, dict):
        for key, value in obj.items():
            total += _size(key, seen) + _size(value, seen)
        return total
    if isinstance(obj, (list, tuple, set, frozenset)):
        for item in obj:
            total += _size(item, seen)
        return total
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        for fld in dataclasses.fields(obj):
            total += _size(getattr(obj, fld.name), seen)
        return total
    if hasattr(obj, "__dict__"):
        total += _size(vars(obj), seen)
    for name in getattr(type(obj), "__slots__", ()):
        if hasattr(obj, name):
            total += _size(getattr(obj, name), seen)
    return total
