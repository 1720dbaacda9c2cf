"""Checksum helpers for published archive files.

Files are read once in fixed-size chunks; MD5, SHA-1 and SHA-256 are fed
from the same buffer so large packages never sit in memory whole.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from debrepo.models.checksums import ChecksumInfo

_CHUNK_SIZE = 1 << 16


def md5_hex(data: bytes) -> str:
    """Return the MD5 hex digest of raw bytes."""
    return hashlib.md5(data).hexdigest()


def checksums_for_file(path: Path | str) -> ChecksumInfo:
    """Compute size and digests of the file at ``path``.

    Raises ``FileNotFoundError`` (or another ``OSError``) when the file
    cannot be read.
    """
    md5 = hashlib.md5()
    sha1 = hashlib.sha1()
    sha256 = hashlib.sha256()
    size = 0

    with open(path, "rb") as fh:
        while True:
            chunk = fh.read(_CHUNK_SIZE)
            if not chunk:
                break
            size += len(chunk)
            md5.update(chunk)
            sha1.update(chunk)
            sha256.update(chunk)

    return ChecksumInfo(
        size=size,
        md5=md5.hexdigest(),
        sha1=sha1.hexdigest(),
        sha256=sha256.hexdigest(),
    )
