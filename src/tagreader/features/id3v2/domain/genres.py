"""Genre table and genre string resolution.

Where: src/tagreader/features/id3v2/domain/genres.py
What: Hold the standard numeric genre list and map genre frame text onto it.
Why: ID3v2 genre frames may reference the ID3v1 list by number instead of spelling the name.
"""

from __future__ import annotations

import re
from typing import Final

__all__ = ["GENRES", "UNKNOWN_GENRE", "genre_name", "resolve_genre"]

UNKNOWN_GENRE: Final[str] = "Unknown"

# Index is the numeric genre code (0-79 original list, 80-147 Winamp extension).
GENRES: Final[tuple[str, ...]] = (
    "Blues", "Classic Rock", "Country", "Dance", "Disco", "Funk", "Grunge",
    "Hip-Hop", "Jazz", "Metal", "New Age", "Oldies", "Other", "Pop", "R&B",
    "Rap", "Reggae", "Rock", "Techno", "Industrial", "Alternative", "Ska",
    "Death Metal", "Pranks", "Soundtrack", "Euro-Techno", "Ambient",
    "Trip-Hop", "Vocal", "Jazz+Funk", "Fusion", "Trance", "Classical",
    "Instrumental", "Acid", "House", "Game", "Sound Clip", "Gospel", "Noise",
    "Alternative Rock", "Bass", "Soul", "Punk", "Space", "Meditative",
    "Instrumental Pop", "Instrumental Rock", "Ethnic", "Gothic", "Darkwave",
    "Techno-Industrial", "Electronic", "Pop-Folk", "Eurodance", "Dream",
    "Southern Rock", "Comedy", "Cult", "Gangsta", "Top 40", "Christian Rap",
    "Pop/Funk", "Jungle", "Native American", "Cabaret", "New Wave",
    "Psychadelic", "Rave", "Showtunes", "Trailer", "Lo-Fi", "Tribal",
    "Acid Punk", "Acid Jazz", "Polka", "Retro", "Musical", "Rock & Roll",
    "Hard Rock", "Folk", "Folk-Rock", "National Folk", "Swing", "Fast Fusion",
    "Bebob", "Latin", "Revival", "Celtic", "Bluegrass", "Avantgarde",
    "Gothic Rock", "Progressive Rock", "Psychedelic Rock", "Symphonic Rock",
    "Slow Rock", "Big Band", "Chorus", "Easy Listening", "Acoustic", "Humour",
    "Speech", "Chanson", "Opera", "Chamber Music", "Sonata", "Symphony",
    "Booty Bass", "Primus", "Porn Groove", "Satire", "Slow Jam", "Club",
    "Tango", "Samba", "Folklore", "Ballad", "Power Ballad", "Rhythmic Soul",
    "Freestyle", "Duet", "Punk Rock", "Drum Solo", "A capella", "Euro-House",
    "Dance Hall", "Goa", "Drum & Bass", "Club-House", "Hardcore", "Terror",
    "Indie", "BritPop", "Negerpunk", "Polsk Punk", "Beat",
    "Christian Gangsta Rap", "Heavy Metal", "Black Metal", "Crossover",
    "Contemporary Christian", "Christian Rock", "Merengue", "Salsa",
    "Thrash Metal", "Anime", "JPop", "Synthpop",
)

_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_PAREN_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\(([+-]?[0-9]+)\)")

# Longest code the table can hold, ignoring sign and leading zeros.
_MAX_CODE_DIGITS: Final[int] = len(str(len(GENRES) - 1))


def genre_name(code: int, default: str = UNKNOWN_GENRE) -> str:
    """Return the genre name for ``code`` or ``default`` when out of range."""
    if 0 <= code < len(GENRES):
        return GENRES[code]
    return default


def _code_name(digits: str) -> str:
    magnitude = digits.lstrip("+-").lstrip("0")
    if len(magnitude) > _MAX_CODE_DIGITS:
        return UNKNOWN_GENRE
    code = int(magnitude or "0")
    return genre_name(-code if digits.startswith("-") else code)


def resolve_genre(text: str) -> str:
    """Resolve genre frame text to a genre name.

    ID3v2.2 and 2.3 write numeric references as ``"(NN)"``, optionally
    followed by free text; ID3v2.4 writes a bare ``"NN"``. ``RX`` and ``CR``
    are shorthand for Remix and Cover. Anything else is already a name.
    """
    if text == "RX" or text.startswith("(RX)"):
        return "Remix"
    if text == "CR" or text.startswith("(CR)"):
        return "Cover"

    if _CODE_PATTERN.fullmatch(text):
        return _code_name(text)

    match = _PAREN_CODE_PATTERN.match(text)
    if match is not None:
        return _code_name(match.group(1))

    return text
