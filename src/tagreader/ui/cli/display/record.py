"""Where: src/tagreader/ui/cli/display/record.py
What: Render a TagRecord as a Rich table.
Why: Keep console output formatting in one place.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.table import Table

from tagreader.shared.tag_record import FIELD_NAMES, TagRecord


@final
class RecordDisplay:
    """Handles record display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()

    @staticmethod
    def build_table(path: Path, record: TagRecord, *, show_header: bool = False) -> Table:
        """Build the table for one file: header rows first, then populated fields."""
        table = Table(title=str(path), show_header=False, title_justify="left")
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Value", style="white")

        if show_header and record.header is not None:
            header = record.header
            table.add_row("Version", f"ID3v2.{header.version}.{header.minor_version}")
            table.add_row("Size", str(header.size))
            flags = [
                name
                for name, enabled in (
                    ("unsynchronization", header.unsynchronization),
                    ("extended", header.extended),
                    ("experimental", header.experimental),
                    ("footer", header.footer),
                )
                if enabled
            ]
            table.add_row("Flags", ", ".join(flags) or "-")

        for name in FIELD_NAMES:
            value = record.get_field(name)
            if value:
                table.add_row(name.capitalize(), value)
        return table

    def show_record(self, path: Path, record: TagRecord, *, show_header: bool = False) -> None:
        """Print one file's record."""
        self.console.print(self.build_table(path, record, show_header=show_header))


__all__ = ["RecordDisplay"]
