# Where: tagreader.features.id3v2.usecases.__init__
# What: Expose the ID3v2 record builder and frame iterator.
# Why: Provide a cohesive import surface for the reader feature.

from .frame_iterator import Frame, FrameIterator, FrameState
from .tag_parser import decode_frame, has_id3v2_tag, parse_tag

__all__ = [
    "Frame",
    "FrameIterator",
    "FrameState",
    "decode_frame",
    "has_id3v2_tag",
    "parse_tag",
]
