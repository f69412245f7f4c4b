"""String helpers: splitting, searching, comparing, trimming and joining."""

from __future__ import annotations

from typing import Callable, Optional


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ``c`` may be a code or a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c % 256)
    raise TypeError(f"expected a character or a character code, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    sep = _char(sep)
    return [piece for piece in text.split(sep) if piece]


def count_substrings(text: str, sep: str) -> int:
    """Return how many non-empty pieces ``split`` would produce."""
    return len(split(text, sep))


def strchr(text: str, c: int | str) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for the NUL character gives the length of ``text``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return index if index >= 0 else None


def strrchr(text: str, c: int | str) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for the NUL character gives the length of ``text``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    _non_negative("n", n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return where ``little`` first lies wholly within the first ``length`` characters of ``big``."""
    _non_negative("length", length)
    if not little:
        return 0
    index = big.find(little, 0, length)
    return index if index >= 0 else None


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``; empty when out of range."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters, NUL included.

    Returns the resulting string and the length the full result would have had;
    when ``size`` is smaller than ``dst`` that length is ``len(src) + size``.
    """
    _non_negative("size", size)
    room = max(size - len(dst) - 1, 0)
    result = dst + src[:room]
    if size < len(dst):
        return result, len(src) + size
    return result, len(dst) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the copied string and the length of ``src``.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, character)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, character)`` on each character.

    A returned character replaces the original; None keeps it.
    """
    out = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        out.append(ch if replacement is None else replacement)
    return "".join(out)