"""Locating programs on PATH and running them as child processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterator, Mapping, Sequence

from cisfun.environment import get_env


def _candidates(cmd: str, env: Mapping[str, str]) -> Iterator[str]:
    path = get_env("PATH", env)
    if not path:
        return
    for directory in path.split(":"):
        if directory:
            yield f"{directory}/{cmd}"


def is_in_path(cmd: str | None, env: Mapping[str, str]) -> bool:
    """Return True when ``cmd`` is executable directly or through PATH."""
    if cmd is None:
        return False
    if "/" in cmd and os.access(cmd, os.X_OK):
        return True
    return any(os.access(candidate, os.X_OK) for candidate in _candidates(cmd, env))


def get_full_path(cmd: str | None, env: Mapping[str, str]) -> str | None:
    """Return the path to run for ``cmd``, or None when PATH has no match."""
    if cmd is None:
        return None
    if "/" in cmd:
        return cmd
    return next(
        (c for c in _candidates(cmd, env) if os.access(c, os.X_OK)),
        None,
    )


def execute(
    cmd: str | None,
    env: Mapping[str, str],
    argv: Sequence[str],
    line_num: int = 0,
    prog_name: str | None = None,
) -> int:
    """Run ``cmd`` with ``argv`` and ``env``; return its exit status.

    Returns 127 when the command cannot be found or started, and -1 when
    the child was ended by a signal.
    """
    if not cmd:
        return 0
    if not is_in_path(cmd, env):
        if prog_name and line_num > 0:
            print(f"{prog_name}: {line_num}: {cmd}: not found", file=sys.stderr)
        else:
            print(f"{cmd}: command not found", file=sys.stderr)
        return 127

    full_path = get_full_path(cmd, env) or cmd
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        completed = subprocess.run(list(argv), executable=full_path, env=dict(env))
    except OSError as err:
        print(f"{cmd}: {err.strerror}", file=sys.stderr)
        return 127
    return completed.returncode if completed.returncode >= 0 else -1