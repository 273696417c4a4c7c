"""Tests for the ID3v1 trailer decoder."""

from collections.abc import Callable
from io import BytesIO

import pytest

from tagreader.features.id3v1.usecases.legacy_parser import has_id3v1_tag, parse_legacy_tag
from tagreader.shared.errors import NoMarkerFoundError

AUDIO: bytes = b"\xff\xfb" + b"\x00" * 300


def test_parse_id3v1_fields(id3v1_trailer: Callable[..., bytes]) -> None:
    stream = BytesIO(
        AUDIO
        + id3v1_trailer(
            title="Title", artist="Artist", album="Album", year="1999", genre=17
        )
    )

    record = parse_legacy_tag(stream)

    assert record.title == "Title"
    assert record.artist == "Artist"
    assert record.album == "Album"
    assert record.year == "1999"
    assert record.genre == "Rock"
    assert record.track == ""
    assert record.header is None


def test_id3v11_track_number(id3v1_trailer: Callable[..., bytes]) -> None:
    record = parse_legacy_tag(BytesIO(AUDIO + id3v1_trailer(comment=b"nice", track=7)))
    assert record.track == "7"


def test_full_length_comment_has_no_track(id3v1_trailer: Callable[..., bytes]) -> None:
    record = parse_legacy_tag(BytesIO(AUDIO + id3v1_trailer(comment=b"x" * 30)))
    assert record.track == ""


def test_out_of_range_genre_is_unspecified(id3v1_trailer: Callable[..., bytes]) -> None:
    record = parse_legacy_tag(BytesIO(AUDIO + id3v1_trailer(title="T", genre=255)))
    assert record.genre == "Unspecified"


def test_latin1_text(id3v1_trailer: Callable[..., bytes]) -> None:
    record = parse_legacy_tag(BytesIO(AUDIO + id3v1_trailer(artist="Motörhead")))
    assert record.artist == "Motörhead"


def test_missing_marker_restores_position() -> None:
    stream = BytesIO(AUDIO + b"\x00" * 128)
    _ = stream.seek(5)

    with pytest.raises(NoMarkerFoundError):
        _ = parse_legacy_tag(stream)
    assert stream.tell() == 5


def test_short_stream_has_no_tag() -> None:
    stream = BytesIO(b"TAG" + b"\x00" * 20)
    with pytest.raises(NoMarkerFoundError):
        _ = parse_legacy_tag(stream)
    assert not has_id3v1_tag(stream)


def test_position_restored_after_success(id3v1_trailer: Callable[..., bytes]) -> None:
    stream = BytesIO(AUDIO + id3v1_trailer(title="T"))
    _ = stream.seek(42)

    _ = parse_legacy_tag(stream)
    assert has_id3v1_tag(stream)
    assert stream.tell() == 42
