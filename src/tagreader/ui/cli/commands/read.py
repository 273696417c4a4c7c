"""Where: src/tagreader/ui/cli/commands/read.py
What: Read tags for each path given on the command line and display them.
Why: Keep per-file error handling out of the entry point.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tagreader.features.reader import read_path, read_stream
from tagreader.platform.logging import logger
from tagreader.shared.errors import NoMarkerFoundError, NoTagsFoundError, TagReadError
from tagreader.shared.tag_record import TagRecord
from tagreader.ui.cli.args.options import ReadArgs
from tagreader.ui.cli.display.record import RecordDisplay


@dataclass(slots=True)
class ReadResult:
    """Outcome of reading one file."""

    path: Path
    record: TagRecord | None = None
    error_message: str | None = None

    @property
    def success(self) -> bool:
        return self.record is not None


class ReadCommand:
    """Read and print tags for every requested file."""

    args: ReadArgs
    display: RecordDisplay

    def __init__(self, args: ReadArgs, display: RecordDisplay | None = None) -> None:
        self.args = args
        self.display = display if display is not None else RecordDisplay()

    def _read(self, path: Path) -> TagRecord:
        if not self.args.stream:
            return read_path(path)
        with open(path, "rb") as stream:
            return read_stream(stream)

    def read_one(self, path: Path) -> ReadResult:
        """Read a single file, converting failures into a result."""
        try:
            record = self._read(path)
        except (NoTagsFoundError, NoMarkerFoundError) as exc:
            logger.warning(
                "No ID3 tags in %s: %s",
                path,
                exc,
                extra={"tag_event": "tag.file.untagged", "source_path": str(path)},
            )
            return ReadResult(path=path, error_message=str(exc))
        except (TagReadError, OSError) as exc:
            logger.error(
                "Failed to read %s: %s",
                path,
                exc,
                extra={
                    "tag_event": "tag.file.error",
                    "source_path": str(path),
                    "error_message": str(exc),
                },
            )
            return ReadResult(path=path, error_message=str(exc))

        logger.debug(
            "Read %s",
            path,
            extra={
                "tag_event": "tag.file.read",
                "source_path": str(path),
                "field_count": len(record.populated_fields()),
                "id3v2_version": record.header.version if record.header else None,
            },
        )
        return ReadResult(path=path, record=record)

    def execute(self) -> list[ReadResult]:
        """Read every path in order and display each record.

        Returns:
            List of per-file results.
        """
        results: list[ReadResult] = []
        for path in self.args.paths:
            result = self.read_one(path)
            if result.record is not None and not self.args.quiet:
                self.display.show_record(path, result.record, show_header=self.args.show_header)
            results.append(result)
        return results


__all__ = ["ReadCommand", "ReadResult"]
