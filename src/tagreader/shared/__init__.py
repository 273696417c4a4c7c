# Where: tagreader.shared.__init__
# What: Provide a concise import surface for the record, cursor and error types.
# Why: Encourage consistent reuse of shared helpers across features.

"""Shared cross-cutting types exposed at the package level."""

from .byte_cursor import SKIP_CHUNK_SIZE, ByteCursor
from .errors import (
    HeaderReadError,
    NoMarkerFoundError,
    NoTagsFoundError,
    ShortReadError,
    SkipError,
    TagReadError,
    UnrecognizedEncodingError,
    UnsupportedEncodingError,
    UnsupportedVersionError,
)
from .tag_record import FIELD_NAMES, TagRecord

__all__ = [
    "ByteCursor",
    "SKIP_CHUNK_SIZE",
    "FIELD_NAMES",
    "TagRecord",
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
