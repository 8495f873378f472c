"""The shell's read-run loops and its entry point."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Mapping
from typing import TextIO

from cisfun.builtins import is_builtin, parse_exit_status, run_builtin
from cisfun.environment import is_non_interactive_mode
from cisfun.executor import execute
from cisfun.parser import parse_cmd, read_command

PROMPT = "#cisfun$ "


class ShellExit(Exception):
    """Raised by the ``exit`` command to end the shell with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def run_command(
    line: str,
    env: Mapping[str, str],
    exit_status: int = 0,
    line_num: int = 0,
    prog_name: str | None = None,
) -> int:
    """Run one command line and return its status.

    ``exit`` raises ShellExit, using ``exit_status`` when no argument is given.
    """
    parsed = parse_cmd(line)
    if parsed is None:
        return 0
    if is_builtin(parsed.name):
        return run_builtin(parsed.name, parsed.args, env, sys.stdout)
    if parsed.name == "exit":
        if len(parsed.args) > 1:
            exit_status = parse_exit_status(parsed.args[1], prog_name)
        raise ShellExit(exit_status)
    return execute(parsed.name, env, parsed.args, line_num, prog_name)


def interactive_mode(
    env: Mapping[str, str],
    status: int = 0,
    prompt: str = PROMPT,
    stream: TextIO | None = None,
    out: TextIO | None = None,
) -> int:
    """Prompt, read and run commands until end of input; return the last status."""
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout
    while True:
        out.write(prompt)
        out.flush()
        line = read_command(stream)
        if line is None:
            return status
        if not line:
            continue
        status = run_command(line, env, status, 0, None)


def non_interactive_mode(
    env: Mapping[str, str],
    prog_name: str | None,
    stream: TextIO | None = None,
) -> int:
    """Run every line of ``stream`` without prompting; return the last status."""
    stream = stream if stream is not None else sys.stdin
    status = 0
    line_num = 0
    while (line := read_command(stream)) is not None:
        line_num += 1
        if line:
            status = run_command(line, env, status, line_num, prog_name)
    return status


def _on_interrupt(signum, frame) -> None:
    sys.stdout.write("\n" + PROMPT)
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Start the shell; return the exit status."""
    if argv is None:
        argv = sys.argv
    prog_name = argv[0] if argv else None
    env = dict(os.environ)
    previous = signal.signal(signal.SIGINT, _on_interrupt)
    try:
        if is_non_interactive_mode(sys.stdin):
            status = non_interactive_mode(env, prog_name, sys.stdin)
        else:
            status = interactive_mode(env, 0, PROMPT, sys.stdin, sys.stdout)
    except ShellExit as done:
        status = done.status
    finally:
        signal.signal(signal.SIGINT, previous)
    return status & 0xFF