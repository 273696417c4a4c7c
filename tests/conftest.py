"""Shared pytest fixtures that build ID3 tags byte by byte."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from tagreader.features.id3v2.domain.size_codec import encode_syncsafe

FrameBuilder = Callable[..., bytes]
TagBuilder = Callable[..., bytes]
TrailerBuilder = Callable[..., bytes]


def _frame(version: int, identifier: str, body: bytes, flags: bytes = b"\x00\x00") -> bytes:
    """Encode one frame with the size layout of ``version``."""

    if version == 2:
        size = len(body).to_bytes(3, "big")
        flags = b""
    elif version == 3:
        size = len(body).to_bytes(4, "big")
    else:
        size = encode_syncsafe(len(body))
    return identifier.encode("ascii") + size + flags + body


def _tag(
    version: int,
    frames: bytes,
    *,
    padding: int = 0,
    flags: int = 0,
    revision: int = 0,
    declared_size: int | None = None,
) -> bytes:
    """Prefix ``frames`` (plus zero padding) with a 10-byte ID3v2 header."""

    payload = frames + b"\x00" * padding
    size = len(payload) if declared_size is None else declared_size
    return b"ID3" + bytes([version, revision, flags]) + encode_syncsafe(size) + payload


def _trailer(
    *,
    title: str = "",
    artist: str = "",
    album: str = "",
    year: str = "",
    comment: bytes = b"",
    track: int | None = None,
    genre: int = 255,
) -> bytes:
    """Build a 128-byte ID3v1 trailer (ID3v1.1 when ``track`` is given)."""

    def fixed(value: bytes, width: int) -> bytes:
        return value[:width].ljust(width, b"\x00")

    comment_field = fixed(comment, 30)
    if track is not None:
        comment_field = comment_field[:28] + b"\x00" + bytes([track])

    return (
        b"TAG"
        + fixed(title.encode("latin-1"), 30)
        + fixed(artist.encode("latin-1"), 30)
        + fixed(album.encode("latin-1"), 30)
        + fixed(year.encode("latin-1"), 4)
        + comment_field
        + bytes([genre])
    )


def utf8(text: str) -> bytes:
    """Text frame body with the UTF-8 encoding selector."""

    return b"\x03" + text.encode("utf-8")


@pytest.fixture
def id3v2_frame() -> FrameBuilder:
    """Return the frame builder ``(version, identifier, body, flags=...)``."""

    return _frame


@pytest.fixture
def id3v2_tag() -> TagBuilder:
    """Return the tag builder ``(version, frames, padding=..., declared_size=...)``."""

    return _tag


@pytest.fixture
def id3v1_trailer() -> TrailerBuilder:
    """Return the ID3v1 trailer builder."""

    return _trailer


@pytest.fixture
def utf8_body() -> Callable[[str], bytes]:
    """Return a helper that encodes text as a UTF-8 text frame body."""

    return utf8
