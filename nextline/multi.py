"""Line reading over many file descriptors at once, each with its own buffer."""

from __future__ import annotations

from nextline.reader import BUFFER_SIZE, _check, _next_line

MAX_FD = 1024


class MultiReader:
    """Keep a separate read buffer per file descriptor so reads may interleave."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._buffer_size = buffer_size
        self._buffers: dict[int, bytes] = {}

    def _validate(self, fd: int) -> None:
        _check(fd, self._buffer_size)
        if fd >= MAX_FD:
            raise ValueError(f"file descriptor {fd} is not below {MAX_FD}")

    def read_line(self, fd: int) -> bytes | None:
        """Return the next line of *fd*, or None once it is exhausted.

        At end of input, or on a read error, the buffer for *fd* is released.
        """
        self._validate(fd)
        pending = self._buffers.get(fd, b"")
        try:
            line, pending = _next_line(fd, pending, self._buffer_size)
        except OSError:
            self._buffers.pop(fd, None)
            raise
        if line is None:
            self._buffers.pop(fd, None)
        else:
            self._buffers[fd] = pending
        return line

    def discard(self, fd: int) -> None:
        """Forget anything buffered for *fd*."""
        self._validate(fd)
        self._buffers.pop(fd, None)

    def pending(self, fd: int) -> bytes:
        """Return the bytes read from *fd* but not yet handed out."""
        self._validate(fd)
        return self._buffers.get(fd, b"")


_default = MultiReader()


def get_next_line(fd: int) -> bytes | None:
    """Return the next line of *fd* using a shared reader."""
    return _default.read_line(fd)