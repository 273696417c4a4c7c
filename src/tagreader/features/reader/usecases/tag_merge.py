"""Tag merge.

Where: src/tagreader/features/reader/usecases/tag_merge.py
What: Combine an ID3v2 record with an ID3v1 record, ID3v2 values first.
Why: Files often carry both formats, each with gaps the other can fill.
"""

from __future__ import annotations

from tagreader.shared.errors import NoTagsFoundError
from tagreader.shared.tag_record import FIELD_NAMES, TagRecord

__all__ = ["merge_records"]


def merge_records(primary: TagRecord | None, legacy: TagRecord | None) -> TagRecord:
    """Fill empty fields of ``primary`` from ``legacy``.

    ``None`` stands for a tag that was absent or failed to parse. Neither
    input is modified; the result keeps the primary record's header.

    Raises:
        NoTagsFoundError: Both inputs are ``None`` or the merge populates nothing.
    """
    if primary is None and legacy is None:
        raise NoTagsFoundError("Could not parse ID3 tags")

    merged = primary.copy() if primary is not None else TagRecord()
    if legacy is not None:
        for name in FIELD_NAMES:
            if not merged.get_field(name):
                merged.set_field(name, legacy.get_field(name))

    if merged.is_empty():
        raise NoTagsFoundError("No ID3 tags")
    return merged
