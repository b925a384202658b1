"""Read newline-terminated lines from a stream in fixed-size chunks."""

from __future__ import annotations

import os
from typing import AnyStr, Generic, IO, Iterator

DEFAULT_BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Yield lines, each keeping its trailing newline, from a text or binary stream.

    A last line without a newline is returned as it is; an empty remainder
    produces no line.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _take_line(self) -> AnyStr | None:
        pending = self._pending
        if not pending:
            return None
        newline = b"\n" if isinstance(pending, bytes) else "\n"
        index = pending.find(newline)  # type: ignore[arg-type]
        if index < 0:
            return None
        line = pending[: index + 1]
        rest = pending[index + 1 :]
        self._pending = rest if rest else None
        return line

    def next_line(self) -> AnyStr | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        line = self._take_line()
        if line is not None:
            return line
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
            line = self._take_line()
            if line is not None:
                return line
        rest, self._pending = self._pending, None
        return rest if rest else None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return every line of the file at ``path``, newlines included."""
    with open(path, encoding="utf-8", newline="") as handle:
        return list(LineReader(handle))