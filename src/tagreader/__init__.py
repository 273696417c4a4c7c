"""Read ID3v1 and ID3v2 tags from MP3 files.

Only a fixed set of descriptive fields is exposed (title, artist, album,
year, track, disc, genre, length); ID3v2 values take priority over ID3v1.
"""

from .features.id3v2.domain.header import TagHeader
from .features.reader import merge_records, read_file, read_path, read_stream
from .shared import (
    FIELD_NAMES,
    HeaderReadError,
    NoMarkerFoundError,
    NoTagsFoundError,
    ShortReadError,
    SkipError,
    TagReadError,
    TagRecord,
    UnrecognizedEncodingError,
    UnsupportedEncodingError,
    UnsupportedVersionError,
)

__version__ = "0.1.0"

__all__ = [
    "FIELD_NAMES",
    "TagHeader",
    "TagRecord",
    "merge_records",
    "read_file",
    "read_path",
    "read_stream",
    "TagReadError",
    "NoMarkerFoundError",
    "HeaderReadError",
    "UnsupportedVersionError",
    "UnrecognizedEncodingError",
    "UnsupportedEncodingError",
    "ShortReadError",
    "SkipError",
    "NoTagsFoundError",
]
