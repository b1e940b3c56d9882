"""Command line tokenizer for rediscli."""

from __future__ import annotations

import re
from typing import List

_TOKEN_RE = re.compile(r"""'.*?'|".*?"|\S+""")
_QUOTES = "\"'"


def split_command(line: str) -> List[str]:
    """Split *line* on whitespace, keeping quoted substrings as one token.

    Surrounding quote characters are stripped from every token.
    """
    if not line:
        return []
    return [token.strip(_QUOTES) for token in _TOKEN_RE.findall(line)]


def join_command(tokens: List[str]) -> str:
    """Inverse of :func:`split_command` for history records."""
    parts = []
    for token in tokens:
        if not token or any(ch.isspace() for ch in token):
            quote = "'" if '"' in token else '"'
            parts.append(f"{quote}{token}{quote}")
        else:
            parts.append(token)
    return " ".join(parts)
