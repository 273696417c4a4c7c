"""Frame iteration over an ID3v2 frame region.

Where: src/tagreader/features/id3v2/usecases/frame_iterator.py
What: Walk frames one at a time, yielding allowlisted ones and skipping the rest.
Why: Separate frame framing (identifier, size, flags) from what the record builder does with bodies.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Final, override

from tagreader.platform.logging import logger
from tagreader.shared.byte_cursor import ByteCursor

from ..domain.frame_layouts import FLAG_BYTES, FrameLayout

__all__ = ["Frame", "FrameIterator", "FrameState", "is_frame_id"]

_FRAME_ID_BYTES: Final[frozenset[int]] = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")


def is_frame_id(data: bytes, width: int) -> bool:
    """Whether ``data`` is a complete identifier made of ``A-Z`` and ``0-9``."""
    return len(data) == width and all(byte in _FRAME_ID_BYTES for byte in data)


class FrameState(Enum):
    """Where the iterator is within the current frame."""

    AWAITING_FRAME = "awaiting_frame"
    READING_IDENTIFIER = "reading_identifier"
    READING_SIZE = "reading_size"
    SKIPPING_FLAGS = "skipping_flags"
    READING_BODY = "reading_body"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class Frame:
    """An allowlisted frame with its raw body."""

    identifier: str
    field: str
    body: bytes


class FrameIterator(Iterator[Frame]):
    """Yield allowlisted frames until the next bytes are not a frame identifier.

    There is no end-of-frames marker: padding, end of input, or the cursor's
    limit all show up as a missing identifier and end iteration normally.
    Read errors move the iterator to ``FAILED`` and propagate.
    """

    _cursor: ByteCursor
    _layout: FrameLayout
    state: FrameState
    skipped: int

    def __init__(self, cursor: ByteCursor, layout: FrameLayout) -> None:
        self._cursor = cursor
        self._layout = layout
        self.state = FrameState.AWAITING_FRAME
        self.skipped = 0

    def _has_frame(self) -> bool:
        width = self._layout.id_width
        return is_frame_id(self._cursor.peek(width), width)

    def _next_frame(self) -> Frame | None:
        cursor = self._cursor
        layout = self._layout

        self.state = FrameState.READING_IDENTIFIER
        identifier = cursor.read_exact(layout.id_width).decode("ascii")

        self.state = FrameState.READING_SIZE
        size = layout.read_size(cursor)

        if layout.has_flags:
            self.state = FrameState.SKIPPING_FLAGS
            cursor.skip(FLAG_BYTES)

        self.state = FrameState.READING_BODY
        field = layout.fields.get(identifier)
        if field is None:
            logger.debug("Skipping frame %s (%d bytes)", identifier, size)
            cursor.skip(size)
            self.skipped += 1
            return None
        return Frame(identifier=identifier, field=field, body=cursor.read_exact(size))

    @override
    def __next__(self) -> Frame:
        while self.state not in (FrameState.DONE, FrameState.FAILED):
            self.state = FrameState.AWAITING_FRAME
            try:
                if not self._has_frame():
                    self.state = FrameState.DONE
                    break
                frame = self._next_frame()
            except Exception:
                self.state = FrameState.FAILED
                raise
            self.state = FrameState.AWAITING_FRAME
            if frame is not None:
                return frame
        raise StopIteration
