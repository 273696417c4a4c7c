"""Integer size encodings used by ID3v2 headers and frames.

Where: src/tagreader/features/id3v2/domain/size_codec.py
What: Read 24-bit, 32-bit and sync-safe big-endian sizes from a cursor.
Why: Each tag version stores frame sizes differently; the layout picks one of these readers.
"""

from __future__ import annotations

import struct
from typing import Final

from tagreader.shared.byte_cursor import ByteCursor

__all__ = [
    "SYNCSAFE_WIDTH",
    "decode_syncsafe",
    "encode_syncsafe",
    "read_syncsafe",
    "read_uint24",
    "read_uint32",
]

SYNCSAFE_WIDTH: Final[int] = 4

_UINT32: Final[struct.Struct] = struct.Struct(">I")


def decode_syncsafe(data: bytes) -> int:
    """Decode a big-endian integer stored 7 bits per byte.

    The top bit of every byte is ignored rather than rejected, since some
    encoders set it anyway.
    """
    size = 0
    for byte in data:
        size = (size << 7) | (byte & 0x7F)
    return size


def encode_syncsafe(value: int, width: int = SYNCSAFE_WIDTH) -> bytes:
    """Encode ``value`` into ``width`` sync-safe bytes."""
    if value < 0 or value >= 1 << (7 * width):
        raise ValueError(f"{value} does not fit in {width} sync-safe bytes")
    return bytes((value >> (7 * shift)) & 0x7F for shift in reversed(range(width)))


def read_uint24(cursor: ByteCursor) -> int:
    """ID3v2.2 frame size: plain 24-bit big-endian."""
    b0, b1, b2 = cursor.read_exact(3)
    return b0 << 16 | b1 << 8 | b2


def read_uint32(cursor: ByteCursor) -> int:
    """ID3v2.3 frame size: plain (not sync-safe) 32-bit big-endian."""
    (size,) = _UINT32.unpack(cursor.read_exact(4))
    return size


def read_syncsafe(cursor: ByteCursor, width: int = SYNCSAFE_WIDTH) -> int:
    """ID3v2.4 frame size and every tag header size."""
    return decode_syncsafe(cursor.read_exact(width))
