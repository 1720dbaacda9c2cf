"""debrepo: package pool and published tree layout for Debian-style archives.

  - Content-addressed pool keyed on the MD5 of each package file
  - Published tree of hard links under ``public/<prefix>/pool/...``
  - First-letter / ``lib``-prefix bucketing of source packages
  - Single-pass size, MD5, SHA-1 and SHA-256 checksums
"""

__version__ = "0.1.0"
__description__ = "Package pool and published tree layout for Debian-style archives"

from debrepo.core.repository import (
    InvalidDigestError,
    InvalidFilenameError,
    Repository,
    RepositoryError,
    ShortSourceNameError,
)
from debrepo.models.checksums import ChecksumInfo, PublishedFile

__all__ = [
    "Repository",
    "RepositoryError",
    "InvalidFilenameError",
    "InvalidDigestError",
    "ShortSourceNameError",
    "ChecksumInfo",
    "PublishedFile",
    "__version__",
]
