"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 4096


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newline included.

    The stream is read in chunks of *buffer_size*; unread data is kept
    between calls. The last line may lack a newline.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._store: AnyStr | None = None
        self._sep: AnyStr | None = None

    def _fill(self) -> AnyStr | None:
        store = self._store
        while store is None or self._sep not in store:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._store = None
                raise
            if not chunk:
                break
            if self._sep is None:
                self._sep = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            store = chunk if store is None else store + chunk
        return store

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        store = self._fill()
        if not store:
            self._store = None
            return None
        end = store.find(self._sep)
        if end == -1:
            self._store = None
            return store
        self._store = store[end + 1:] or None
        return store[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """Return every line of *stream*, newlines included."""
    return list(LineReader(stream))