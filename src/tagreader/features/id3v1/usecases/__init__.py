# Where: tagreader.features.id3v1.usecases.__init__
# What: Expose the ID3v1 trailer parser.
# Why: Provide a cohesive import surface for the reader feature.

from .legacy_parser import ID3V1_SIZE, has_id3v1_tag, parse_legacy_tag

__all__ = ["ID3V1_SIZE", "has_id3v1_tag", "parse_legacy_tag"]
