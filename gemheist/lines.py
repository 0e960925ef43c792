"""Line-by-line reading from a file-like object in fixed-size chunks."""

from __future__ import annotations

from typing import Any, BinaryIO, Iterator, Optional, TextIO, Union

BUFFER_SIZE = 5

Chunk = Union[str, bytes]


def _newline(chunk: Chunk) -> Chunk:
    return b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"


class LineReader:
    """Reads lines from ``source`` by calling ``source.read(buffer_size)``.

    Lines keep their trailing newline; the final line may lack one.
    Works with text and binary sources alike.
    """

    def __init__(
        self, source: Union[TextIO, BinaryIO, Any], buffer_size: int = BUFFER_SIZE
    ) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._source = source
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def readline(self) -> Optional[Chunk]:
        """The next line, or None once the source is exhausted."""
        pending = self._pending
        while pending is None or _newline(pending) not in pending:
            chunk = self._source.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        end = pending.find(_newline(pending))
        if end < 0:
            self._pending = None
            return pending
        self._pending = pending[end + 1 :]
        return pending[: end + 1]

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line