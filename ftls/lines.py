"""Reading newline-terminated lines from a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 10000


class LineReader(Generic[AnyStr]):
    """Read lines, without their newline, from a text or binary stream.

    Data is pulled from the stream buffer_size units at a time; whatever
    follows a returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1: {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line without its newline, or None at end of input.

        A final line with no trailing newline is still returned.
        """
        pending = self._pending
        searched = 0
        while True:
            if pending is not None:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline, searched)
                if index >= 0:
                    self._pending = pending[index + 1:]
                    return pending[:index]
                searched = len(pending)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk

        if pending:
            self._pending = pending[:0]
            return pending
        self._pending = pending
        return None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line