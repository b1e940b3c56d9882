#!/usr/bin/env python3
"""Entry point for ``python -m rediscli``."""

from __future__ import annotations

from rediscli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
