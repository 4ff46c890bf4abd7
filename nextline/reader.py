"""Read a file descriptor one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 10
NEWLINE = b"\n"


def line_length(data: bytes) -> int:
    """Return the length of the first line of *data*, newline included."""
    index = data.find(NEWLINE)
    return len(data) if index < 0 else index + 1


def split_line(data: bytes) -> tuple[bytes, bytes]:
    """Split *data* into its first line (newline kept) and the remainder."""
    end = line_length(data)
    return data[:end], data[end:]


def _next_line(fd: int, pending: bytes, buffer_size: int) -> tuple[bytes | None, bytes]:
    """Read the next line from *fd*, starting with the already buffered *pending*.

    Returns the line (or None at end of input) and what stays buffered.
    A failed read propagates as OSError; the partial line is dropped.
    """
    chunks: list[bytes] = []
    while NEWLINE not in pending:
        if pending:
            chunks.append(pending)
            pending = b""
        data = os.read(fd, buffer_size)
        if not data:
            return (b"".join(chunks) or None), b""
        pending = data
    line, pending = split_line(pending)
    chunks.append(line)
    return b"".join(chunks), pending


def _check(fd: int, buffer_size: int) -> None:
    if fd < 0:
        raise ValueError(f"invalid file descriptor: {fd}")
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")


class LineReader:
    """Yield the lines of one file descriptor, reading *buffer_size* bytes at a time."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        _check(fd, buffer_size)
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> bytes | None:
        """Return the next line with its newline, the last unterminated line, or None at end."""
        try:
            line, self._pending = _next_line(self._fd, self._pending, self._buffer_size)
        except OSError:
            self._pending = b""
            raise
        return line

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line