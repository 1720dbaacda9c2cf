"""Checksum and published-file models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChecksumInfo(BaseModel):
    """Size and digests of a single file.

    Digests are lowercase hex. ``md5`` doubles as the pool key for the
    file (see ``Repository.pool_path``).
    """

    model_config = ConfigDict(frozen=True)

    size: int = Field(ge=0)
    md5: str
    sha1: str = ""
    sha256: str = ""


class PublishedFile(BaseModel):
    """A package file linked into the public tree, with its checksums.

    ``filename`` is relative to the distribution prefix, suitable for a
    ``Filename:`` field in a package index.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str
    component: str
    filename: str
    checksums: ChecksumInfo
