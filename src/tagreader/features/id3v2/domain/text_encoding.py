"""Text frame decoding.

Where: src/tagreader/features/id3v2/domain/text_encoding.py
What: Turn a raw text frame body into a ``str`` according to its leading encoding byte.
Why: Every allowlisted frame is a text frame, so this is the single place bytes become strings.
"""

from __future__ import annotations

from typing import Final

from tagreader.shared.errors import UnrecognizedEncodingError, UnsupportedEncodingError

__all__ = [
    "LATIN_1",
    "UTF_16",
    "UTF_16_BE",
    "UTF_8",
    "decode_text",
]

LATIN_1: Final[int] = 0
UTF_16: Final[int] = 1
UTF_16_BE: Final[int] = 2
UTF_8: Final[int] = 3

_BOM_LE: Final[bytes] = b"\xff\xfe"
_BOM_BE: Final[bytes] = b"\xfe\xff"


def _decode_utf16(data: bytes) -> str:
    if len(data) < 2:
        return ""
    if len(data) % 2:
        data += b"\x00"

    bom, payload = data[:2], data[2:]
    if bom == _BOM_LE:
        codec = "utf-16-le"
    elif bom == _BOM_BE:
        codec = "utf-16-be"
    else:
        raise UnrecognizedEncodingError(f"Missing UTF-16 byte-order mark: {bom.hex()}")
    return payload.decode(codec, errors="replace")


def decode_text(body: bytes) -> str:
    """Decode a text frame body.

    The first byte selects the encoding:

    * ``0``: ISO-8859-1
    * ``1``: UTF-16 with byte-order mark
    * ``2``: UTF-16BE without byte-order mark (rejected)
    * ``3``: UTF-8

    Any other first byte means the frame carries no selector and the whole
    body is ISO-8859-1. Trailing NUL characters are removed.

    Raises:
        UnrecognizedEncodingError: UTF-16 text without a valid byte-order mark.
        UnsupportedEncodingError: UTF-16BE text without a byte-order mark.
    """
    if not body:
        return ""

    selector, payload = body[0], body[1:]
    if selector == LATIN_1:
        text = payload.decode("latin-1")
    elif selector == UTF_16:
        text = _decode_utf16(payload)
    elif selector == UTF_16_BE:
        raise UnsupportedEncodingError(selector, "UTF-16BE")
    elif selector == UTF_8:
        text = payload.decode("utf-8", errors="replace")
    else:
        text = body.decode("latin-1")
    return text.rstrip("\x00")
