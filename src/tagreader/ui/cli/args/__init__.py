"""Command line argument handling."""

from tagreader.ui.cli.args.options import ReadArgs
from tagreader.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "ReadArgs"]
