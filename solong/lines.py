"""Line-by-line reading from operating-system file descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 42
_MAX_DESCRIPTORS = 256


class LineReader:
    """Reads one line at a time from a file descriptor.

    Data is pulled from the descriptor in chunks of buffer_size bytes and kept
    between calls. Each line keeps its terminating newline, except possibly the
    last one of the input.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _fill(self) -> None:
        try:
            while b"\n" not in self._pending:
                chunk = os.read(self.fd, self.buffer_size)
                if not chunk:
                    break
                self._pending += chunk
        except OSError:
            self._pending.clear()
            raise

    def read_line(self) -> str | None:
        """The next line, or None once the input is exhausted."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:cut])
        del self._pending[:cut]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


class LineReaderSet:
    """Line readers for several descriptors at once, each with its own buffer."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._readers: dict[int, LineReader] = {}

    def read_line(self, fd: int) -> str | None:
        """The next line from fd, or None once that descriptor is exhausted."""
        if not 0 <= fd < _MAX_DESCRIPTORS:
            raise ValueError(f"invalid file descriptor {fd}")
        reader = self._readers.get(fd)
        if reader is None:
            reader = self._readers[fd] = LineReader(fd, self.buffer_size)
        try:
            line = reader.read_line()
        except OSError:
            del self._readers[fd]
            raise
        if line is None:
            del self._readers[fd]
        return line