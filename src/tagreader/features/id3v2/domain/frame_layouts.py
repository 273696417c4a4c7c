"""Per-version frame layouts.

Where: src/tagreader/features/id3v2/domain/frame_layouts.py
What: Describe identifier width, flag bytes, size codec and field table for ID3v2.2, 2.3 and 2.4.
Why: The frame iterator stays version-agnostic by reading everything version-specific from a layout.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from tagreader.shared.byte_cursor import ByteCursor
from tagreader.shared.errors import UnsupportedVersionError

from .size_codec import read_syncsafe, read_uint24, read_uint32

__all__ = [
    "FLAG_BYTES",
    "FrameLayout",
    "ID3V22_FIELDS",
    "ID3V23_FIELDS",
    "ID3V24_FIELDS",
    "LAYOUTS",
    "layout_for",
]

FLAG_BYTES: Final[int] = 2

ID3V22_FIELDS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "TT2": "title",
        "TP1": "artist",
        "TAL": "album",
        "TYE": "year",
        "TRK": "track",
        "TPA": "disc",
        "TCO": "genre",
    }
)

ID3V23_FIELDS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "TIT2": "title",
        "TPE1": "artist",
        "TALB": "album",
        "TYER": "year",
        "TRCK": "track",
        "TPOS": "disc",
        "TCON": "genre",
        "TLEN": "length",
    }
)

ID3V24_FIELDS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "TIT2": "title",
        "TPE1": "artist",
        "TALB": "album",
        "TDRC": "year",
        "TRCK": "track",
        "TPOS": "disc",
        "TCON": "genre",
        "TLEN": "length",
    }
)


@dataclass(slots=True, frozen=True)
class FrameLayout:
    """Everything that differs between ID3v2 versions at the frame level."""

    version: int
    id_width: int
    has_flags: bool
    read_size: Callable[[ByteCursor], int]
    fields: Mapping[str, str]


LAYOUTS: Final[Mapping[int, FrameLayout]] = MappingProxyType(
    {
        2: FrameLayout(
            version=2, id_width=3, has_flags=False, read_size=read_uint24, fields=ID3V22_FIELDS
        ),
        3: FrameLayout(
            version=3, id_width=4, has_flags=True, read_size=read_uint32, fields=ID3V23_FIELDS
        ),
        4: FrameLayout(
            version=4, id_width=4, has_flags=True, read_size=read_syncsafe, fields=ID3V24_FIELDS
        ),
    }
)


def layout_for(version: int) -> FrameLayout:
    """Return the layout for a major version.

    Raises:
        UnsupportedVersionError: For any version other than 2, 3 or 4.
    """
    try:
        return LAYOUTS[version]
    except KeyError:
        raise UnsupportedVersionError(version) from None
