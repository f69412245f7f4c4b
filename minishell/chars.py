"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", int, str)


def _code(c: int | str) -> int:
    """Return the character code of ``c``, which is a code or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or a character code, got {type(c).__name__}")


def isdigit(c: int | str) -> bool:
    """Return True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def isalpha(c: int | str) -> bool:
    """Return True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isalnum(c: int | str) -> bool:
    """Return True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """Return True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """Return True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital letter; anything else is returned unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code