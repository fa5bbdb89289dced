"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 10


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line of a stream that
    does not end in a newline is returned without one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._leftover: AnyStr | None = None
        self._newline: AnyStr | None = None

    def _newline_for(self, chunk: AnyStr) -> AnyStr:
        if self._newline is None:
            self._newline = b"\n" if isinstance(chunk, bytes) else "\n"  # type: ignore[assignment]
        return self._newline  # type: ignore[return-value]

    def _fill(self) -> None:
        """Read chunks until the pending data holds a newline or the stream ends."""
        while self._leftover is None or self._newline is None or self._newline not in self._leftover:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            newline = self._newline_for(chunk)
            self._leftover = chunk if self._leftover is None else self._leftover + chunk
            if newline in chunk:
                return

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        data = self._leftover
        if not data:
            self._leftover = None
            return None
        newline = self._newline_for(data)
        end = data.find(newline)
        if end < 0:
            self._leftover = None
            return data
        line, rest = data[: end + 1], data[end + 1 :]
        self._leftover = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line