"""Persistent command history helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .parser import join_command, split_command

LOGGER = logging.getLogger("rediscli.history")

REDACTED = "******"
DEFAULT_HISTORY_PATH = Path.home() / ".gorediscli_history"


def redact(tokens: Sequence[str]) -> List[str]:
    """Return a copy of *tokens* with password arguments masked."""
    record = list(tokens)
    if len(record) == 2 and record[0].lower() == "auth":
        record[1] = REDACTED
    if len(record) == 4 and record[0].lower() == "connect":
        record[3] = REDACTED
    return record


class HistoryStore:
    """File-backed list of redacted command records.

    The file is read once by :meth:`load` and rewritten by :meth:`save`;
    appends only touch memory.
    """

    def __init__(self, path: Optional[str], *, limit: int = 1000) -> None:
        self.limit = max(1, int(limit or 1))
        self.path = Path(path).expanduser() if path else None
        self.entries: List[List[str]] = []

    def load(self) -> None:
        if not self.path:
            return
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                lines = [line.strip() for line in handle if line.strip()]
        except FileNotFoundError:
            return
        except OSError as exc:
            LOGGER.warning("failed to read history %s: %s", self.path, exc)
            return
        self.entries = [split_command(line) for line in lines[-self.limit :]]

    def append(self, tokens: Sequence[str]) -> List[str]:
        """Redact and record *tokens*; returns the stored record."""
        record = redact(tokens)
        if not record:
            return record
        self.entries.append(record)
        if len(self.entries) > self.limit:
            self.entries = self.entries[-self.limit :]
        return record

    def save(self) -> None:
        if not self.path:
            return
        try:
            if not self.path.parent.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as handle:
                for line in self.lines():
                    handle.write(line + "\n")
        except OSError as exc:
            # failure to write history should not break the CLI
            LOGGER.warning("failed to write history %s: %s", self.path, exc)

    def lines(self) -> List[str]:
        return [join_command(record) for record in self.entries]

    def snapshot(self) -> List[List[str]]:
        return [list(record) for record in self.entries]
