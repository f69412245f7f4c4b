"""Write characters, strings, lines and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _stream(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stdout


def put_char(c: int | str, stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a character or a code."""
    if isinstance(c, int):
        c = chr(c)
    elif not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _stream(stream).write(c)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is not None:
        _stream(stream).write(text)


def put_line(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is not None:
        out = _stream(stream)
        out.write(text)
        out.write("\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal."""
    _stream(stream).write(str(n))