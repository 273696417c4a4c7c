# Where: tagreader.features.reader.__init__
# What: Expose the top-level read operations and the merge step.
# Why: Provide a cohesive import surface for the package root and CLI.

from .usecases.read_file import read_file, read_path, read_stream
from .usecases.tag_merge import merge_records

__all__ = ["merge_records", "read_file", "read_path", "read_stream"]
