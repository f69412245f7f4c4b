"""The interactive read loop."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

PROMPT = "$prompt>"


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> list[str]:
    """Echo each input line back until end of input; return the history."""
    src = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    history: list[str] = []
    while True:
        out.write(PROMPT)
        out.flush()
        raw = src.readline()
        if not raw:
            break
        line = raw[:-1] if raw.endswith("\n") else raw
        history.append(line)
        out.write(f"line: {line}\n")
    return history


def _interactive() -> list[str]:
    try:
        import readline  # noqa: F401  (enables line editing and history for input())
    except ImportError:
        pass
    history: list[str] = []
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            break
        history.append(line)
        print(f"line: {line}")
    return history


def main(argv: Sequence[str] | None = None) -> int:
    """Start the shell loop on the terminal or on standard input."""
    try:
        if sys.stdin.isatty() and sys.stdout.isatty():
            _interactive()
        else:
            run(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        return 130
    return 0