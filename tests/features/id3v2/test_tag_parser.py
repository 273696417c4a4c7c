"""Tests for the ID3v2 record builder."""

from collections.abc import Callable
from io import BytesIO

import pytest

from tagreader.features.id3v2.usecases.tag_parser import has_id3v2_tag, parse_tag
from tagreader.shared.byte_cursor import ByteCursor
from tagreader.shared.errors import (
    HeaderReadError,
    NoMarkerFoundError,
    ShortReadError,
    UnsupportedEncodingError,
    UnsupportedVersionError,
)
from tagreader.shared.tag_record import TagRecord

FIELD_IDS: dict[int, dict[str, str]] = {
    2: {
        "title": "TT2",
        "artist": "TP1",
        "album": "TAL",
        "year": "TYE",
        "track": "TRK",
        "disc": "TPA",
        "genre": "TCO",
    },
    3: {
        "title": "TIT2",
        "artist": "TPE1",
        "album": "TALB",
        "year": "TYER",
        "track": "TRCK",
        "disc": "TPOS",
        "genre": "TCON",
        "length": "TLEN",
    },
    4: {
        "title": "TIT2",
        "artist": "TPE1",
        "album": "TALB",
        "year": "TDRC",
        "track": "TRCK",
        "disc": "TPOS",
        "genre": "TCON",
        "length": "TLEN",
    },
}

VALUES: dict[str, str] = {
    "title": "Ünïcødé & <Title> \"quoted\"",
    "artist": "Sigur Rós",
    "album": "( ) Album",
    "year": "2002",
    "track": "3/8",
    "disc": "1/1",
    "genre": "Post-Rock",
    "length": "431000",
}


def _parse(data: bytes) -> TagRecord:
    return parse_tag(ByteCursor(BytesIO(data)))


@pytest.mark.parametrize("version", [2, 3, 4])
def test_all_allowlisted_fields_decode_exactly(
    version: int,
    id3v2_frame: Callable[..., bytes],
    id3v2_tag: Callable[..., bytes],
    utf8_body: Callable[[str], bytes],
) -> None:
    frames = b"".join(
        id3v2_frame(version, identifier, utf8_body(VALUES[field]))
        for field, identifier in FIELD_IDS[version].items()
    )

    record = _parse(id3v2_tag(version, frames, padding=32))

    for field in FIELD_IDS[version]:
        assert record.get_field(field) == VALUES[field]
    if version == 2:
        assert record.length == ""
    assert record.header is not None
    assert record.header.version == version


def test_numeric_genre_is_resolved(
    id3v2_frame: Callable[..., bytes],
    id3v2_tag: Callable[..., bytes],
) -> None:
    record = _parse(id3v2_tag(3, id3v2_frame(3, "TCON", b"\x00(17)Rock & Roll")))
    assert record.genre == "Rock"


def test_last_occurrence_wins(
    id3v2_frame: Callable[..., bytes],
    id3v2_tag: Callable[..., bytes],
    utf8_body: Callable[[str], bytes],
) -> None:
    frames = id3v2_frame(4, "TIT2", utf8_body("First")) + id3v2_frame(4, "TIT2", utf8_body("Second"))
    assert _parse(id3v2_tag(4, frames)).title == "Second"


def test_invalid_identifier_keeps_earlier_frames(
    id3v2_frame: Callable[..., bytes],
    id3v2_tag: Callable[..., bytes],
    utf8_body: Callable[[str], bytes],
) -> None:
    frames = (
        id3v2_frame(4, "TPE1", utf8_body("Artist"))
        + id3v2_frame(4, "Tit2", utf8_body("Hidden"))
        + id3v2_frame(4, "TALB", utf8_body("Also hidden"))
    )
    record = _parse(id3v2_tag(4, frames))
    assert record.artist == "Artist"
    assert record.title == ""
    assert record.album == ""


def test_declared_size_shorter_than_frames_truncates(
    id3v2_frame: Callable[..., bytes],
    id3v2_tag: Callable[..., bytes],
    utf8_body: Callable[[str], bytes],
) -> None:
    first = id3v2_frame(4, "TIT2", utf8_body("Title"))
    frames = first + id3v2_frame(4, "TPE1", utf8_body("Artist"))

    record = _parse(id3v2_tag(4, frames, declared_size=len(first)))

    assert record.title == "Title"
    assert record.artist == ""


def test_declared_size_splitting_a_frame_fails(
    id3v2_frame: Callable[..., bytes],
    id3v2_tag: Callable[..., bytes],
    utf8_body: Callable[[str], bytes],
) -> None:
    frame = id3v2_frame(4, "TIT2", utf8_body("A long title"))
    with pytest.raises(ShortReadError):
        _ = _parse(id3v2_tag(4, frame, declared_size=len(frame) - 3))


def test_unsupported_version_fails_before_frames(
    id3v2_frame: Callable[..., bytes],
    id3v2_tag: Callable[..., bytes],
) -> None:
    with pytest.raises(UnsupportedVersionError):
        _ = _parse(id3v2_tag(5, id3v2_frame(4, "TIT2", b"\x03x")))


def test_unsupported_text_encoding_is_fatal(
    id3v2_frame: Callable[..., bytes],
    id3v2_tag: Callable[..., bytes],
) -> None:
    with pytest.raises(UnsupportedEncodingError):
        _ = _parse(id3v2_tag(4, id3v2_frame(4, "TIT2", b"\x02\x00A")))


def test_missing_marker() -> None:
    with pytest.raises(NoMarkerFoundError):
        _ = _parse(b"\xff\xfb\x90\x00" + b"\x00" * 32)


def test_truncated_header() -> None:
    with pytest.raises(HeaderReadError):
        _ = _parse(b"ID3\x03\x00")


def test_has_id3v2_tag_does_not_consume() -> None:
    cursor = ByteCursor(BytesIO(b"ID3\x04"))
    assert has_id3v2_tag(cursor)
    assert cursor.position == 0
    assert not has_id3v2_tag(ByteCursor(BytesIO(b"TAG")))
