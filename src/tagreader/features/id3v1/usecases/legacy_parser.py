"""ID3v1 trailer decoding.

Where: src/tagreader/features/id3v1/usecases/legacy_parser.py
What: Read the fixed 128-byte ``TAG`` trailer at the end of a seekable stream.
Why: Older files carry only this tag; its fields fill gaps left by ID3v2.
"""

from __future__ import annotations

import io
from typing import BinaryIO, Final

from tagreader.features.id3v2.domain.genres import genre_name
from tagreader.platform.logging import logger
from tagreader.shared.byte_cursor import ByteCursor
from tagreader.shared.errors import NoMarkerFoundError
from tagreader.shared.tag_record import TagRecord

__all__ = [
    "ID3V1_MARKER",
    "ID3V1_SIZE",
    "UNSPECIFIED_GENRE",
    "has_id3v1_tag",
    "parse_legacy_tag",
]

ID3V1_SIZE: Final[int] = 128
ID3V1_MARKER: Final[bytes] = b"TAG"
UNSPECIFIED_GENRE: Final[str] = "Unspecified"

# (field, width) after the marker; "comment" is read for the ID3v1.1 track byte.
_LAYOUT: Final[tuple[tuple[str, int], ...]] = (
    ("title", 30),
    ("artist", 30),
    ("album", 30),
    ("year", 4),
    ("comment", 30),
    ("genre", 1),
)


def _seek_trailer(stream: BinaryIO) -> bool:
    end = stream.seek(0, io.SEEK_END)
    if end < ID3V1_SIZE:
        return False
    _ = stream.seek(end - ID3V1_SIZE)
    return True


def _text(data: bytes) -> str:
    return data.decode("latin-1").rstrip("\x00")


def has_id3v1_tag(stream: BinaryIO) -> bool:
    """Whether the stream ends with a ``TAG`` trailer; the position is restored."""
    origin = stream.tell()
    try:
        return _seek_trailer(stream) and stream.read(len(ID3V1_MARKER)) == ID3V1_MARKER
    finally:
        _ = stream.seek(origin)


def parse_legacy_tag(stream: BinaryIO) -> TagRecord:
    """Parse the ID3v1 (or ID3v1.1) trailer.

    Text is ISO-8859-1 with trailing NULs removed. When the comment's 29th
    byte is zero and the 30th is not, the 30th byte is the track number.
    Genre codes outside the table become ``"Unspecified"``.

    The stream position is restored before returning or raising.

    Raises:
        NoMarkerFoundError: The stream is too short or has no ``TAG`` marker.
        ShortReadError: The trailer is truncated.
    """
    origin = stream.tell()
    try:
        if not _seek_trailer(stream):
            raise NoMarkerFoundError("Stream too short for an ID3v1 tag")

        cursor = ByteCursor(stream, limit=ID3V1_SIZE)
        if cursor.read_exact(len(ID3V1_MARKER)) != ID3V1_MARKER:
            raise NoMarkerFoundError("ID3v1 tag not found")

        raw = {name: cursor.read_exact(width) for name, width in _LAYOUT}
    finally:
        _ = stream.seek(origin)

    record = TagRecord(
        title=_text(raw["title"]),
        artist=_text(raw["artist"]),
        album=_text(raw["album"]),
        year=_text(raw["year"]),
        genre=genre_name(raw["genre"][0], default=UNSPECIFIED_GENRE),
    )
    comment = raw["comment"]
    if comment[28] == 0 and comment[29] != 0:
        record.track = str(comment[29])

    logger.debug("ID3v1 fields %s", record.populated_fields())
    return record
