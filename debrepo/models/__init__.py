"""debrepo data models — Pydantic v2, frozen (immutable)."""

from debrepo.models.checksums import ChecksumInfo, PublishedFile

__all__ = [
    "ChecksumInfo",
    "PublishedFile",
]
