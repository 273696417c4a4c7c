"""Command line interface package."""

from tagreader.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
