# Where: tagreader.features.id3v2.__init__
# What: Expose the ID3v2 parser and its header type.
# Why: Let the reader feature depend on a single import path.

from .domain.header import TagHeader
from .usecases.tag_parser import has_id3v2_tag, parse_tag

__all__ = ["TagHeader", "has_id3v2_tag", "parse_tag"]
