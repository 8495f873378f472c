"""Commands the shell runs itself rather than as a child process."""

from __future__ import annotations

import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Builtin:
    """A named command implemented inside the shell."""

    name: str
    func: Callable[[Sequence[str], Mapping[str, str], TextIO], int]


def is_builtin(cmd: str | None) -> bool:
    """Return True when ``cmd`` names a builtin command."""
    return cmd is not None and cmd in _BUILTINS


def parse_exit_status(s: str, prog_name: str | None) -> int:
    """Convert the argument of ``exit`` to a status.

    A leading '-' negates the value. Any other non-digit is reported on
    stderr and yields status 2.
    """
    sign, digits = (-1, s[1:]) if s.startswith("-") else (1, s)
    if not all("0" <= ch <= "9" for ch in digits):
        prefix = f"{prog_name}: " if prog_name else ""
        print(f"{prefix}exit: numeric argument required", file=sys.stderr)
        return 2
    return sign * int(digits) if digits else 0


def print_env(
    args: Sequence[str], env: Mapping[str, str], out: TextIO | None = None
) -> int:
    """Write every environment variable as NAME=VALUE, one per line."""
    if out is None:
        out = sys.stdout
    for name, value in env.items():
        out.write(f"{name}={value}\n")
    return 0


_BUILTINS: dict[str, Builtin] = {
    builtin.name: builtin for builtin in (Builtin("env", print_env),)
}


def run_builtin(
    cmd: str | None,
    args: Sequence[str],
    env: Mapping[str, str],
    out: TextIO | None = None,
) -> int:
    """Run the builtin ``cmd`` and return its status."""
    if cmd is None:
        raise ValueError("no command given")
    try:
        builtin = _BUILTINS[cmd]
    except KeyError:
        raise LookupError(f"{cmd}: not a builtin") from None
    return builtin.func(args, env, out if out is not None else sys.stdout)