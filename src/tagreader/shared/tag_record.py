# Where: tagreader.shared.tag_record
# What: Canonical TagRecord dataclass produced by both tag decoders.
# Why: Let the ID3v1, ID3v2 and merge layers share a single record shape.

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from tagreader.features.id3v2.domain.header import TagHeader

# Fixed allowlist of exposed fields, in display order.
FIELD_NAMES: Final[tuple[str, ...]] = (
    "title",
    "artist",
    "album",
    "year",
    "track",
    "disc",
    "genre",
    "length",
)


@dataclass
class TagRecord:
    """Descriptive metadata for one file; empty strings mean absent."""

    title: str = ""
    artist: str = ""
    album: str = ""
    year: str = ""
    track: str = ""
    disc: str = ""
    genre: str = ""
    length: str = ""
    header: TagHeader | None = None

    def set_field(self, name: str, value: str) -> None:
        """Assign an allowlisted field, replacing any previous value."""
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown tag field: {name}")
        setattr(self, name, value)

    def get_field(self, name: str) -> str:
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown tag field: {name}")
        value: str = getattr(self, name)
        return value

    def populated_fields(self) -> list[str]:
        return [name for name in FIELD_NAMES if self.get_field(name)]

    def is_empty(self) -> bool:
        return not self.populated_fields()

    def as_dict(self) -> dict[str, str]:
        """Return the allowlisted fields (header excluded)."""
        return {name: self.get_field(name) for name in FIELD_NAMES}

    def copy(self) -> TagRecord:
        return replace(self)


__all__ = ["FIELD_NAMES", "TagRecord"]
