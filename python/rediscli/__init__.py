"""
rediscli package.

Interactive command-line client for Redis with redis-cli style reply
formatting.  Use ``python -m rediscli`` or the ``rediscli`` console script
to launch it.
"""

from __future__ import annotations

from .cli import main

__all__ = ["main"]
__version__ = "0.1.0"
