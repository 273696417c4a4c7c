"""Error types raised while reading tags.

Where: src/tagreader/shared/errors.py
What: Define the exception hierarchy shared by the ID3v1, ID3v2 and merge layers.
Why: Give callers one base class to catch while keeping each failure kind distinct.
"""

from __future__ import annotations

__all__ = [
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


class TagReadError(ValueError):
    """Base class for every failure of a single tag read."""


class NoMarkerFoundError(TagReadError):
    """The ``ID3`` or ``TAG`` marker is missing (the file may simply be untagged)."""


class HeaderReadError(TagReadError):
    """The 10-byte ID3v2 header could not be read."""


class UnsupportedVersionError(TagReadError):
    """The ID3v2 major version is not 2, 3 or 4."""

    version: int

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"Unsupported ID3v2 version: 2.{version}")


class UnrecognizedEncodingError(TagReadError):
    """A UTF-16 text frame does not start with a byte-order mark."""


class UnsupportedEncodingError(TagReadError):
    """A text frame uses an encoding that is deliberately not decoded."""

    selector: int

    def __init__(self, selector: int, name: str) -> None:
        self.selector = selector
        super().__init__(f"Unsupported text encoding {name} (selector {selector})")


class _IncompleteReadError(TagReadError):
    expected: int
    received: int

    def __init__(self, message: str, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(f"{message}, {received}/{expected} bytes")


class ShortReadError(_IncompleteReadError):
    """Fewer bytes than requested were available before end of input."""

    def __init__(self, expected: int, received: int, position: int | None = None) -> None:
        message = "Short read" if position is None else f"Short read at offset {position}"
        super().__init__(message, expected, received)


class SkipError(_IncompleteReadError):
    """Input ended while discarding bytes."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__("Failed to skip bytes", expected, received)


class NoTagsFoundError(TagReadError):
    """Neither tag format yielded any usable field."""
