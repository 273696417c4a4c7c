"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class ReadArgs:
    """Command line arguments for reading tags from one or more files."""

    paths: list[Path]
    stream: bool
    show_header: bool
    verbose: bool
    quiet: bool


__all__ = ["ReadArgs"]
