"""ID3v2 tag header.

Where: src/tagreader/features/id3v2/domain/header.py
What: Parse the fixed 10-byte header that precedes the frame region.
Why: The header's version selects the frame layout and its size bounds the frame region.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from tagreader.shared.byte_cursor import ByteCursor
from tagreader.shared.errors import HeaderReadError, ShortReadError

from .size_codec import decode_syncsafe

__all__ = ["HEADER_SIZE", "ID3V2_MARKER", "TagHeader", "parse_header"]

HEADER_SIZE: Final[int] = 10
ID3V2_MARKER: Final[bytes] = b"ID3"

_FLAG_UNSYNCHRONIZATION: Final[int] = 1 << 7
_FLAG_EXTENDED: Final[int] = 1 << 6
_FLAG_EXPERIMENTAL: Final[int] = 1 << 5
_FLAG_FOOTER: Final[int] = 1 << 4


@dataclass(slots=True, frozen=True)
class TagHeader:
    """Parsed ID3v2 header (section 3.1 of the ID3v2.4 structure document).

    ``size`` excludes the header itself.
    """

    version: int
    minor_version: int
    unsynchronization: bool
    extended: bool
    experimental: bool
    footer: bool
    size: int


def parse_header(cursor: ByteCursor) -> TagHeader:
    """Read the header; the ``ID3`` marker is assumed to be checked already.

    Raises:
        HeaderReadError: Fewer than 10 bytes are available.
    """
    try:
        data = cursor.read_exact(HEADER_SIZE)
    except ShortReadError as exc:
        raise HeaderReadError(f"Could not read ID3v2 header: {exc}") from exc

    flags = data[5]
    return TagHeader(
        version=data[3],
        minor_version=data[4],
        unsynchronization=bool(flags & _FLAG_UNSYNCHRONIZATION),
        extended=bool(flags & _FLAG_EXTENDED),
        experimental=bool(flags & _FLAG_EXPERIMENTAL),
        footer=bool(flags & _FLAG_FOOTER),
        size=decode_syncsafe(data[6:10]),
    )
