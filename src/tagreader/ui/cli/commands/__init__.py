"""Command execution package for CLI."""

from tagreader.ui.cli.commands.read import ReadCommand, ReadResult

__all__ = ["ReadCommand", "ReadResult"]
