"""Rich console handler for tagreader log records.

Where: platform/logging/handlers.py
What: Render per-file tag events with an icon and a compact path.
Why: Keep CLI output readable when many files are inspected in one run.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class TagReaderRichHandler(RichHandler):
    """Rich handler that styles records carrying a ``tag_event`` extra."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "tag.file.read": ("🎧", "green"),
        "tag.file.untagged": ("ℹ️", "yellow"),
        "tag.file.error": ("⛔", "red"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "tag.file.read": "Read ",
        "tag.file.untagged": "No tags in ",
        "tag.file.error": "Failed ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _format_path(self, path: str) -> Text:
        """Keep the last few path segments, prefixing an ellipsis when trimmed."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        parts = [part for part in pure_path.parts if part and part != pure_path.anchor]

        if len(parts) > self._PATH_SEGMENT_LIMIT:
            display = "…" + separator + separator.join(parts[-self._PATH_SEGMENT_LIMIT:])
        else:
            display = str(pure_path)

        text = Text()
        for char in display:
            color = "magenta" if char in {separator, "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    def _render_tag_event(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "tag_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_PREFIXES.get(event, ""))

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))

        details: list[str] = []
        if event == "tag.file.read":
            fields = getattr(record, "field_count", None)
            if isinstance(fields, int):
                details.append(f"fields={fields}")
            version = getattr(record, "id3v2_version", None)
            if isinstance(version, int):
                details.append(f"ID3v2.{version}")
        else:
            error_message = getattr(record, "error_message", None)
            if error_message:
                details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        tag_text = self._render_tag_event(record)
        if tag_text is not None:
            return tag_text
        return super().render_message(record, message)


__all__ = ["TagReaderRichHandler"]
