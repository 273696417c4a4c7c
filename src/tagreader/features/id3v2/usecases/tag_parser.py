"""ID3v2 record builder.

Where: src/tagreader/features/id3v2/usecases/tag_parser.py
What: Parse an ID3v2 tag from a cursor into a ``TagRecord``.
Why: Tie header parsing, version dispatch, frame iteration and text decoding together.
"""

from __future__ import annotations

from tagreader.platform.logging import logger
from tagreader.shared.byte_cursor import ByteCursor
from tagreader.shared.errors import NoMarkerFoundError
from tagreader.shared.tag_record import TagRecord

from ..domain.frame_layouts import layout_for
from ..domain.genres import resolve_genre
from ..domain.header import ID3V2_MARKER, parse_header
from ..domain.text_encoding import decode_text
from .frame_iterator import Frame, FrameIterator

__all__ = ["decode_frame", "has_id3v2_tag", "parse_tag"]


def has_id3v2_tag(cursor: ByteCursor) -> bool:
    """Whether the cursor is positioned at an ``ID3`` marker (nothing is consumed)."""
    return cursor.peek(len(ID3V2_MARKER)) == ID3V2_MARKER


def decode_frame(frame: Frame) -> str:
    """Decode a frame body into the value stored on the record."""
    text = decode_text(frame.body)
    if frame.field == "genre":
        return resolve_genre(text)
    return text


def parse_tag(cursor: ByteCursor) -> TagRecord:
    """Parse the ID3v2 tag at the cursor.

    Only the allowlisted fields are kept; for repeated frames the last one
    wins. Iteration is bounded by the header's declared size, so a size
    shorter than the frames simply ends iteration early.

    Raises:
        NoMarkerFoundError: The cursor is not at an ``ID3`` marker.
        HeaderReadError: The header is truncated.
        UnsupportedVersionError: The major version is not 2, 3 or 4.
        ShortReadError, SkipError: A frame runs past the end of input.
        UnrecognizedEncodingError, UnsupportedEncodingError: A text frame
            cannot be decoded.
    """
    if not has_id3v2_tag(cursor):
        raise NoMarkerFoundError("ID3v2 tag not found")

    header = parse_header(cursor)
    layout = layout_for(header.version)
    logger.debug(
        "ID3v2.%d.%d tag, %d bytes, flags unsync=%s extended=%s",
        header.version,
        header.minor_version,
        header.size,
        header.unsynchronization,
        header.extended,
    )

    record = TagRecord(header=header)
    frames = FrameIterator(ByteCursor(cursor, limit=header.size), layout)
    for frame in frames:
        record.set_field(frame.field, decode_frame(frame))
    logger.debug(
        "Read fields %s, skipped %d frame(s)", record.populated_fields(), frames.skipped
    )
    return record
