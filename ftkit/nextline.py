"""Reading a source one line at a time through a fixed-size read buffer.

A source is either an open file descriptor or any object with a
``read(size)`` method. Lines keep their trailing newline. The last line
may lack one. ``None`` means there is nothing more to read.
"""

from __future__ import annotations

import os
from typing import Any, AnyStr, Callable, Dict, Generic, Iterator, Optional, Union

BUFFER_SIZE = 10
OPEN_MAX = 1024


class LineReader(Generic[AnyStr]):
    """Split the data read from ``source`` into lines.

    Data is pulled in chunks of ``buffer_size`` until a newline turns up or
    a read comes back empty. Text left over after a line is kept for the
    next call. Reaching the end of the data does not close the reader. A
    later call reads again, so data that arrives afterwards is still seen.
    """

    def __init__(self, source: Union[int, Any], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._read: Callable[[int], Optional[AnyStr]]
        if isinstance(source, int):
            if source < 0:
                raise ValueError("file descriptor must not be negative")
            self._read = lambda size: os.read(source, size)  # type: ignore[assignment,return-value]
        elif callable(getattr(source, "read", None)):
            self._read = source.read
        else:
            raise TypeError(
                f"source must be a file descriptor or have a read() method, "
                f"got {type(source).__name__}"
            )
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    @staticmethod
    def _newline(data: AnyStr) -> AnyStr:
        return "\n" if isinstance(data, str) else b"\n"  # type: ignore[return-value]

    def _has_line(self) -> bool:
        pending = self._pending
        return pending is not None and self._newline(pending) in pending

    def _fill(self) -> None:
        """Read until the pending data holds a newline or a read is empty."""
        while not self._has_line():
            try:
                chunk = self._read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                return
            self._pending = chunk if self._pending is None else self._pending + chunk

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` when no data is left."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        index = pending.find(self._newline(pending))
        if index < 0:
            self._pending = None
            return pending
        line = pending[: index + 1]
        rest = pending[index + 1 :]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader[bytes]] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line read from file descriptor ``fd``, or ``None``.

    Each descriptor keeps its own leftover data between calls, so several
    descriptors can be read in turn. Once a descriptor has no more data its
    state is dropped.
    """
    if fd < 0 or fd >= OPEN_MAX:
        raise ValueError(f"file descriptor must be in range 0..{OPEN_MAX - 1}, got {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd, BUFFER_SIZE)
        _readers[fd] = reader
    try:
        line = reader.readline()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line