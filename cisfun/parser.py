"""Reading command lines and splitting them into words."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

_EOT = "\x04"


@dataclass(frozen=True)
class ParsedCommand:
    """A command name with its full argument vector (name included)."""

    name: str
    args: list[str]


def _words(s: str) -> list[str]:
    return [word for word in s.split(" ") if word]


def count_words(s: str) -> int:
    """Return the number of space-separated words in ``s``."""
    return len(_words(s))


def parse_cmd(line: str) -> ParsedCommand | None:
    """Split ``line`` on spaces; return None for blank lines and comments."""
    words = _words(line)
    if not words or words[0].startswith("#"):
        return None
    return ParsedCommand(words[0], words)


def read_command(stream: TextIO | None = None) -> str | None:
    """Read one line from ``stream`` (stdin by default).

    Returns None at end of input or on a leading Ctrl-D character, an empty
    string for an empty line, and otherwise the line without its newline.
    """
    if stream is None:
        stream = sys.stdin
    line = stream.readline()
    if not line or line.startswith(_EOT):
        return None
    if line.startswith("\n"):
        return ""
    return line[:-1] if line.endswith("\n") else line