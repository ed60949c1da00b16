"""Chunked line reading from a file-like source."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Protocol

DEFAULT_BUFFER_SIZE = 256


class _Readable(Protocol[AnyStr]):
    def read(self, size: int = -1, /) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Read lines from a source in fixed-size chunks.

    Each line keeps its trailing newline; the final line of a source that
    does not end in a newline is returned without one. Data read past the
    end of a line is kept for the next call.
    """

    def __init__(
        self, source: _Readable[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE
    ) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._source = source
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @property
    def buffer_size(self) -> int:
        """Number of characters or bytes requested from the source per read."""
        return self._buffer_size

    def _fill(self) -> bool:
        """Read the next chunk into the pending buffer; False at end of input."""
        try:
            chunk = self._source.read(self._buffer_size)
        except OSError:
            self._pending = None
            raise
        if not chunk:
            return False
        self._pending = chunk
        return True

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the source is exhausted."""
        parts: list[AnyStr] = []
        while True:
            if not self._pending and not self._fill():
                break
            pending = self._pending
            assert pending is not None
            newline = b"\n" if isinstance(pending, bytes) else "\n"
            index = pending.find(newline)  # type: ignore[arg-type]
            if index >= 0:
                parts.append(pending[: index + 1])
                self._pending = pending[index + 1 :]
                break
            parts.append(pending)
            self._pending = pending[:0]
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line