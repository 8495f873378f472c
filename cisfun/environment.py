"""Environment lookups and small string predicates used by the shell."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import TextIO


def get_env(name: str | None, env: Mapping[str, str] | None) -> str | None:
    """Return the value of ``name`` in ``env``, or None when it is absent."""
    if not name or env is None:
        return None
    return env.get(name)


def is_non_interactive_mode(stream: TextIO | None = None) -> bool:
    """Return True when ``stream`` (stdin by default) is not a terminal."""
    if stream is None:
        stream = sys.stdin
    return not stream.isatty()


def is_a_number(s: str) -> bool:
    """Return True when ``s`` holds only ASCII digits (an empty string counts)."""
    return all("0" <= ch <= "9" for ch in s)