"""Tests for genre resolution."""

import pytest

from tagreader.features.id3v2.domain.genres import GENRES, genre_name, resolve_genre


def test_table_has_standard_size() -> None:
    assert len(GENRES) == 148
    assert GENRES[0] == "Blues"
    assert GENRES[147] == "Synthpop"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("5", "Funk"),
        ("999", "Unknown"),
        ("(5) extra text", "Funk"),
        ("(5)", "Funk"),
        ("Speed Metal", "Speed Metal"),
        ("RX", "Remix"),
        ("(RX)", "Remix"),
        ("(RX) Club mix", "Remix"),
        ("CR", "Cover"),
        ("(CR)Acoustic", "Cover"),
        ("-1", "Unknown"),
        ("(-3)", "Unknown"),
        ("", ""),
    ],
)
def test_resolve_genre(text: str, expected: str) -> None:
    assert resolve_genre(text) == expected


def test_numeric_and_parenthesized_forms_agree() -> None:
    assert resolve_genre("(17) whatever") == resolve_genre("17") == "Rock"


def test_boundary_index_uses_strict_bound() -> None:
    """The last entry resolves and the index equal to the table length does not."""
    assert resolve_genre(str(len(GENRES) - 1)) == "Synthpop"
    assert resolve_genre(str(len(GENRES))) == "Unknown"
    assert resolve_genre(f"({len(GENRES)})") == "Unknown"


def test_text_with_leading_number_is_unchanged() -> None:
    assert resolve_genre("80s Pop") == "80s Pop"


def test_oversized_numeric_codes_are_unknown() -> None:
    """Codes too long to convert to an integer still fall back to Unknown."""
    assert resolve_genre("9" * 5000) == "Unknown"
    assert resolve_genre("(" + "9" * 5000 + ")") == "Unknown"
    assert resolve_genre("(" + "9" * 5000 + ") Rock") == "Unknown"
    assert resolve_genre("1" + "0" * 4400) == "Unknown"


def test_leading_zeros_do_not_count_against_code_length() -> None:
    assert resolve_genre("0" * 10 + "17") == "Rock"
    assert resolve_genre("0" * 5000 + "17") == "Rock"
    assert resolve_genre("-0") == "Blues"
    assert resolve_genre("(0008)") == "Jazz"


def test_genre_name_default() -> None:
    assert genre_name(255, default="Unspecified") == "Unspecified"
    assert genre_name(8) == "Jazz"
