"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Read one line at a time from a text or binary stream.

    Data is pulled from the stream ``buffer_size`` characters (or bytes)
    at a time and kept until a whole line is available. Lines keep their
    trailing newline; the last line of a stream may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._newline: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream has nothing left."""
        pending = self._pending
        while pending is None or self._newline not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if pending is None:
                self._newline = "\n" if isinstance(chunk, str) else b"\n"
                pending = chunk
            else:
                pending = pending + chunk
        if not pending:
            self._pending = pending
            return None
        index = pending.find(self._newline)
        if index < 0:
            line, self._pending = pending, pending[:0]
        else:
            line, self._pending = pending[: index + 1], pending[index + 1 :]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield every line of ``stream``, each with its trailing newline."""
    yield from LineReader(stream)