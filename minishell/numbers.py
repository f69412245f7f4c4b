"""Integer parsing, formatting and small numeric helpers with C int semantics."""

from __future__ import annotations

from itertools import chain
from typing import Iterable

from minishell.chars import isdigit, tolower

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_HEX_DIGITS = "0123456789abcdef"
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the range of a 32-bit signed int."""
    return (value + 2**31) % 2**32 - 2**31


def absolute(n: int) -> int:
    """Return the absolute value of ``n``."""
    return -n if n < 0 else n


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; text with no digits gives 0.
    The result wraps like a 32-bit int.
    """
    i = 0
    n = len(text)
    while i < n and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < n and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    value = 0
    while i < n and isdigit(text[i]):
        value = value * 10 + ord(text[i]) - 48
        i += 1
    return _to_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def itoh(n: int) -> str:
    """Return the lower-case hexadecimal representation of a non-negative ``n``."""
    if n < 0:
        raise ValueError(f"cannot format a negative number as unsigned hex: {n}")
    return format(n, "x")


def xtoi(text: str | None) -> int:
    """Parse a ``0x``-prefixed hexadecimal string.

    ``None`` gives 0. A string that has neither a leading ``0`` nor an ``x``
    in second place raises ValueError. Any character after the prefix that
    is not a hex digit makes the result 0. The result wraps like a 32-bit int.
    """
    if text is None:
        return 0
    first = tolower(text[0]) if len(text) > 0 else ""
    second = tolower(text[1]) if len(text) > 1 else ""
    if first != "0" and second != "x":
        raise ValueError(f"not a valid hexadecimal string: {text!r}")
    value = 0
    for ch in text[2:]:
        digit = _HEX_DIGITS.find(tolower(ch))
        if digit < 0:
            return 0
        value = _to_int32(value * 16 + digit)
    return value


def minimum(values: Iterable[int]) -> int:
    """Return the smallest value, never more than INT_MAX; INT_MAX when empty."""
    return min(chain((INT_MAX,), values))


def maximum(values: Iterable[int]) -> int:
    """Return the largest value, never less than INT_MIN; INT_MIN when empty."""
    return max(chain((INT_MIN,), values))