"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional

BUFFER_SIZE = 4242


class LineReader:
    """Split the data read from a stream into lines.

    The stream may be binary or text; lines come back in the same type.
    Each line keeps its terminating newline, except a last line that has
    none. Once the stream is exhausted, ``read_line`` returns None, but a
    later call reads again, so data appended to the stream is picked up.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._scanned = 0

    def __iter__(self) -> Iterator:
        return iter(self.read_line, None)

    def _take(self, end: int):
        line = self._pending[:end]
        rest = self._pending[end:]
        self._pending = rest if rest else None
        self._scanned = 0
        return line

    def read_line(self):
        """Return the next line, or None when no more data is available."""
        while True:
            if self._pending is not None:
                newline = b"\n" if isinstance(self._pending, (bytes, bytearray)) else "\n"
                index = self._pending.find(newline, self._scanned)
                if index >= 0:
                    return self._take(index + 1)
                self._scanned = len(self._pending)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if self._pending is None:
            return None
        return self._take(len(self._pending))