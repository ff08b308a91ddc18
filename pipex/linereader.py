"""Read a stream or file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Callable, Iterator, Union

BUFFER_SIZE = 5
MAX_FD = 1024

Chunk = Union[str, bytes]


class LineReader:
    """Yields lines, each ending with its newline except possibly the last.

    ``source`` is either a file descriptor or an object with a ``read(size)``
    method returning ``str`` or ``bytes``. Data is pulled ``buffer_size``
    units at a time.
    """

    def __init__(self, source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(source, int):
            if not 0 <= source < MAX_FD:
                raise ValueError(f"file descriptor out of range: {source}")
            fd = source
            self._read: Callable[[int], Chunk] = lambda size: os.read(fd, size)
        else:
            self._read = source.read
        self._buffer_size = buffer_size
        self._pending: Chunk | None = None

    def _newline(self) -> Chunk:
        return b"\n" if isinstance(self._pending, bytes) else "\n"

    def next_line(self) -> Chunk | None:
        """Return the next line, or ``None`` once the input is exhausted."""
        exhausted = False
        while not exhausted and (
            self._pending is None or self._newline() not in self._pending
        ):
            chunk = self._read(self._buffer_size)
            if not chunk:
                exhausted = True
            elif self._pending is None:
                self._pending = chunk
            else:
                self._pending += chunk
        if not self._pending:
            return None
        cut = self._pending.find(self._newline())
        if cut < 0:
            line, self._pending = self._pending, self._pending[:0]
        else:
            line = self._pending[: cut + 1]
            self._pending = self._pending[cut + 1:]
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.next_line()) is not None:
            yield line