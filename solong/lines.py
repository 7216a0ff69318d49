"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional, Tuple, Union

DEFAULT_BUFFER_SIZE = 42

Chunk = Union[str, bytes]


def _newline_position(data: Chunk) -> int:
    """Index of the first newline in data, or -1 when there is none."""
    marker = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
    return data.find(marker)


def _split_first_line(data: Chunk) -> Tuple[Chunk, Optional[Chunk]]:
    """Split data after its first newline; the rest is None without one."""
    end = _newline_position(data)
    if end < 0:
        return data, None
    return data[: end + 1], data[end + 1 :]


class LineReader:
    """Yield the lines of a text or binary stream, newline included.

    The stream is read buffer_size characters at a time; text read past a
    newline is kept for the next line.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    @staticmethod
    def _has_newline(data: Optional[Chunk]) -> bool:
        return bool(data) and _newline_position(data) >= 0

    def next_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the stream is exhausted."""
        data = self._pending
        while not self._has_newline(data):
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                break
            data = chunk if data is None else data + chunk
        if not data:
            self._pending = None
            return None
        line, self._pending = _split_first_line(data)
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line