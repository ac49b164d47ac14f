"""Line-at-a-time reading from file-like objects through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, AnyStr, Generic, Optional

BUFFER_SIZE = 5


def _check_buffer_size(buffer_size: int) -> int:
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    return buffer_size


def _take_line(stream: Any, buffer_size: int, pending: Optional[AnyStr]):
    """Return ``(line, pending)``; ``line`` is None once the stream is exhausted."""
    newline: Any = None
    if pending is not None:
        newline = "\n" if isinstance(pending, str) else b"\n"
    while newline is None or newline not in pending:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        if pending is None:
            pending = chunk
            newline = "\n" if isinstance(chunk, str) else b"\n"
        else:
            pending = pending + chunk
    if not pending:
        return None, None
    end = pending.find(newline)
    if end < 0:
        return pending, None
    return pending[: end + 1], pending[end + 1 :]


class LineReader(Generic[AnyStr]):
    """Reads lines from one stream, ``buffer_size`` characters or bytes at a time.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        self._stream = stream
        self._buffer_size = _check_buffer_size(buffer_size)
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when nothing is left to read."""
        line, self._pending = _take_line(self._stream, self._buffer_size, self._pending)
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


class MultiLineReader:
    """Reads lines from several streams at once, keeping separate leftovers per stream."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        self._buffer_size = _check_buffer_size(buffer_size)
        self._pending: dict[Any, Any] = {}

    def read_line(self, stream: Any) -> Optional[Any]:
        """Return the next line of ``stream``, or None when it is exhausted."""
        line, rest = _take_line(stream, self._buffer_size, self._pending.pop(stream, None))
        if rest is not None:
            self._pending[stream] = rest
        return line


def read_lines(stream: Any, buffer_size: int = BUFFER_SIZE) -> Iterator[Any]:
    """Yield every line of ``stream`` in order."""
    yield from LineReader(stream, buffer_size)