"""Buffered forward-only reader over a byte stream.

Where: src/tagreader/shared/byte_cursor.py
What: Provide exact-length reads, lookahead and bounded skipping on top of any ``read(n)`` source.
Why: Both tag decoders need reads that fail loudly instead of returning truncated buffers.
"""

from __future__ import annotations

from typing import Final, Protocol

from .errors import ShortReadError, SkipError

__all__ = ["ByteCursor", "ByteSource", "SKIP_CHUNK_SIZE", "READ_AHEAD_SIZE"]

# Largest single discard step; skipping never allocates more than this.
SKIP_CHUNK_SIZE: Final[int] = 4 * 1024

READ_AHEAD_SIZE: Final[int] = 4 * 1024


class ByteSource(Protocol):
    """Anything with a file-like ``read``."""

    def read(self, size: int, /) -> bytes: ...


class ByteCursor:
    """Sequential reader that tracks how many bytes it has handed out.

    ``limit`` caps the total number of bytes the cursor will ever pull from
    ``source``; once reached, the cursor behaves as if the input ended.
    """

    _source: ByteSource
    _buffer: bytearray
    _remaining: int | None
    _position: int

    def __init__(self, source: ByteSource, limit: int | None = None) -> None:
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self._source = source
        self._buffer = bytearray()
        self._remaining = limit
        self._position = 0

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._position

    def _pull(self, size: int) -> bytes:
        if self._remaining is not None:
            size = min(size, self._remaining)
        if size <= 0:
            return b""
        chunk = self._source.read(size) or b""
        if self._remaining is not None:
            self._remaining -= len(chunk)
        return chunk

    def _fill(self, size: int) -> None:
        while len(self._buffer) < size:
            chunk = self._pull(max(size - len(self._buffer), READ_AHEAD_SIZE))
            if not chunk:
                return
            self._buffer += chunk

    def _take(self, size: int) -> bytes:
        data = bytes(self._buffer[:size])
        del self._buffer[:size]
        self._position += len(data)
        return data

    def peek(self, size: int) -> bytes:
        """Return up to ``size`` upcoming bytes without consuming them."""
        self._fill(size)
        return bytes(self._buffer[:size])

    def read(self, size: int, /) -> bytes:
        """Read up to ``size`` bytes; a short result means end of input."""
        self._fill(size)
        return self._take(size)

    def read_exact(self, size: int) -> bytes:
        """Read exactly ``size`` bytes.

        Raises:
            ShortReadError: If the input ends first. The available bytes are
                still consumed so ``position`` reflects where it stopped.
        """
        start = self._position
        data = self.read(size)
        if len(data) != size:
            raise ShortReadError(expected=size, received=len(data), position=start)
        return data

    def skip(self, size: int) -> None:
        """Discard ``size`` bytes in chunks of at most ``SKIP_CHUNK_SIZE``.

        Raises:
            SkipError: If the input ends before ``size`` bytes were discarded.
        """
        skipped = 0
        while skipped < size:
            step = min(size - skipped, SKIP_CHUNK_SIZE)
            discarded = len(self.read(step))
            skipped += discarded
            if discarded < step:
                raise SkipError(expected=size, received=skipped)
