"""Console display helpers for CLI."""

from tagreader.ui.cli.display.record import RecordDisplay

__all__ = ["RecordDisplay"]
