"""Top-level tag reading.

Where: src/tagreader/features/reader/usecases/read_file.py
What: Read ID3v2 and ID3v1 tags from a stream or path and merge them into one record.
Why: Offer the single entry point callers and the CLI use.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from tagreader.features.id3v1.usecases.legacy_parser import has_id3v1_tag, parse_legacy_tag
from tagreader.features.id3v2.usecases.tag_parser import parse_tag
from tagreader.platform.logging import logger
from tagreader.shared.byte_cursor import ByteCursor
from tagreader.shared.errors import TagReadError
from tagreader.shared.tag_record import TagRecord

from .tag_merge import merge_records

__all__ = ["read_file", "read_path", "read_stream"]


def _try_id3v2(stream: BinaryIO) -> TagRecord | None:
    try:
        return parse_tag(ByteCursor(stream))
    except TagReadError as exc:
        logger.debug("ID3v2 unavailable: %s", exc)
        return None


def _try_id3v1(stream: BinaryIO) -> TagRecord | None:
    if not has_id3v1_tag(stream):
        return None
    try:
        return parse_legacy_tag(stream)
    except TagReadError as exc:
        logger.debug("ID3v1 unavailable: %s", exc)
        return None


def read_file(stream: BinaryIO) -> TagRecord:
    """Read and merge both tag formats from a seekable stream.

    The ID3v2 tag is expected at offset 0 and the ID3v1 trailer at the last
    128 bytes. A failure in one format only means that format contributes
    nothing; the stream position is restored afterwards.

    Raises:
        NoTagsFoundError: Neither format produced a populated field.
        OSError: The stream itself failed.
    """
    origin = stream.tell()
    try:
        _ = stream.seek(0)
        id3v2 = _try_id3v2(stream)
        _ = stream.seek(0)
        id3v1 = _try_id3v1(stream)
    finally:
        _ = stream.seek(origin)
    return merge_records(id3v2, id3v1)


def read_stream(stream: BinaryIO) -> TagRecord:
    """Read only the ID3v2 tag from a non-seekable stream.

    No partial record is returned: any failure after the marker propagates.

    Raises:
        NoMarkerFoundError: The stream does not start with ``ID3``.
        TagReadError: Any other parse failure.
    """
    return parse_tag(ByteCursor(stream))


def read_path(path: Path | str) -> TagRecord:
    """Open ``path`` and read it with :func:`read_file`."""
    with open(path, "rb") as stream:
        return read_file(stream)
