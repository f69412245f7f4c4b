"""Read a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import BinaryIO, Iterator, Optional, Union

BUFFER_SIZE = 42

Source = Union[int, BinaryIO]


class LineReader:
    """Yield lines, newline included, from a file descriptor or binary file."""

    def __init__(self, fd: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(fd, int) and fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()
        self._eof = False

    def _read_chunk(self) -> bytes:
        if isinstance(self._fd, int):
            return os.read(self._fd, self._buffer_size)
        return self._fd.read(self._buffer_size) or b""

    def next_line(self) -> Optional[str]:
        """Return the next line, or None once the input is exhausted."""
        searched = 0
        while True:
            index = self._pending.find(b"\n", searched)
            if index >= 0:
                line = bytes(self._pending[:index + 1])
                del self._pending[:index + 1]
                return line.decode("utf-8", "surrogateescape")
            searched = len(self._pending)
            if self._eof:
                break
            chunk = self._read_chunk()
            if chunk:
                self._pending.extend(chunk)
            else:
                self._eof = True
        if not self._pending:
            return None
        line = bytes(self._pending)
        self._pending.clear()
        return line.decode("utf-8", "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        return iter(self.next_line, None)