# Where: tagreader.features.id3v2.domain.__init__
# What: Expose the pure ID3v2 building blocks (header, layouts, codecs, genres).
# Why: Keep use cases importing from one place.

from .frame_layouts import LAYOUTS, FrameLayout, layout_for
from .genres import GENRES, genre_name, resolve_genre
from .header import HEADER_SIZE, ID3V2_MARKER, TagHeader, parse_header
from .size_codec import decode_syncsafe, encode_syncsafe, read_syncsafe, read_uint24, read_uint32
from .text_encoding import decode_text

__all__ = [
    "LAYOUTS",
    "FrameLayout",
    "layout_for",
    "GENRES",
    "genre_name",
    "resolve_genre",
    "HEADER_SIZE",
    "ID3V2_MARKER",
    "TagHeader",
    "parse_header",
    "decode_syncsafe",
    "encode_syncsafe",
    "read_syncsafe",
    "read_uint24",
    "read_uint32",
    "decode_text",
]
