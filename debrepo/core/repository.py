"""Archive root: content-addressed package pool plus published tree.

Layout::

    <root>
    ├── pool/
    │   └── ab/
    │       └── ae/
    │           └── package.deb          (keyed on MD5 of contents)
    └── public/
        └── <prefix>/
            ├── dists/<dist>/...         (written via mkdir/create_file)
            └── pool/<component>/<subdir>/<source>/package.deb
                                         (hard link into the pool)

``subdir`` is the first letter of the source package name, or the first
four characters for ``lib*`` sources.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, BinaryIO

from debrepo.core.checksums import checksums_for_file
from debrepo.models.checksums import ChecksumInfo, PublishedFile

if TYPE_CHECKING:
    from debrepo.config import RepositoryConfig

logger = logging.getLogger(__name__)

_DIGEST_PREFIX = re.compile(r"[0-9a-fA-F]{4}")
_MIN_SOURCE_LENGTH = 2


class RepositoryError(Exception):
    """Base class for invalid input rejected before touching the filesystem."""


class InvalidFilenameError(RepositoryError, ValueError):
    """Raised when a filename has no usable base name."""


class InvalidDigestError(RepositoryError, ValueError):
    """Raised when an MD5 digest is too short to derive pool buckets."""


class ShortSourceNameError(RepositoryError, ValueError):
    """Raised when a source package name is too short to bucket."""


def _base_name(filename: str) -> str:
    """Last path element, with trailing separators ignored.

    An empty string yields ``"."`` and a string of only separators
    yields ``"/"``, so both can be rejected by the caller.
    """
    if not filename:
        return "."
    stripped = filename.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def source_subdir(source: str) -> str:
    """Bucket directory for a source package name.

    ``libfoo`` -> ``libf``, ``bar`` -> ``b``.
    """
    if len(source) < _MIN_SOURCE_LENGTH:
        raise ShortSourceNameError(f"package source {source!r} too short")
    if source.startswith("lib"):
        return source[:4]
    return source[:1]


class Repository:
    """Archive root holding the package pool and the public tree.

    All paths are derived from ``root_path``; nothing is created until an
    operation needs it.

    Parameters
    ----------
    root_path:
        Archive root directory. Need not exist yet.
    checksum_func:
        Callable computing ``ChecksumInfo`` for an absolute path.
    dir_mode:
        Permission bits for directories created under the public tree.
    """

    def __init__(
        self,
        root_path: Path | str,
        *,
        checksum_func: Callable[[Path], ChecksumInfo] = checksums_for_file,
        dir_mode: int = 0o755,
    ) -> None:
        self.root_path = Path(root_path)
        self._checksum_func = checksum_func
        self._dir_mode = dir_mode

    @classmethod
    def from_config(cls, config: RepositoryConfig) -> Repository:
        """Build a repository rooted at ``config.root_path``."""
        return cls(config.root_path, dir_mode=config.dir_mode)

    def __repr__(self) -> str:
        return f"Repository({str(self.root_path)!r})"

    # ------------------------------------------------------------------
    # Path derivation
    # ------------------------------------------------------------------

    def pool_path(self, filename: str, hash_md5: str) -> Path:
        """Full path to a package file in the pool.

        Only the base name of ``filename`` is used. The first four
        characters of ``hash_md5`` select two bucket directories.
        """
        base = _base_name(filename)
        if base in (".", "/", ".."):
            raise InvalidFilenameError(f"filename {filename!r} is invalid")
        if not _DIGEST_PREFIX.match(hash_md5):
            raise InvalidDigestError(f"md5 digest {hash_md5!r} is invalid")

        return self.root_path / "pool" / hash_md5[0:2] / hash_md5[2:4] / base

    def public_path(self) -> Path:
        """Root of the public (published) part of the archive."""
        return self.root_path / "public"

    def _public_join(self, *parts: str) -> Path:
        # Arguments are always relative to the public root, even with a
        # leading separator.
        return self.public_path().joinpath(*(p.lstrip("/") for p in parts))

    def _make_dirs(self, target: Path) -> None:
        """Create ``target`` and every missing ancestor with ``dir_mode``.

        ``Path.mkdir(parents=True)`` only applies the mode to the leaf, so
        missing ancestors are created one level at a time, top down.
        """
        missing = []
        current = target
        while not current.exists() and current.parent != current:
            missing.append(current)
            current = current.parent
        for directory in reversed(missing):
            directory.mkdir(mode=self._dir_mode, exist_ok=True)
        # Raises FileExistsError when target exists but is not a directory.
        target.mkdir(mode=self._dir_mode, exist_ok=True)

    # ------------------------------------------------------------------
    # Public tree mutation
    # ------------------------------------------------------------------

    def mkdir(self, path: str) -> None:
        """Create a directory (and missing parents) under the public tree."""
        target = self._public_join(path)
        self._make_dirs(target)
        logger.debug("Ensured public directory %s", target)

    def create_file(self, path: str) -> BinaryIO:
        """Open a file under the public tree for writing, truncating it.

        The parent directory must already exist. The caller owns the
        returned handle and should close it with a ``with`` block.
        """
        return open(self._public_join(path), "wb")

    def link_from_pool(
        self,
        prefix: str,
        component: str,
        filename: str,
        hash_md5: str,
        source: str,
    ) -> str:
        """Hard-link a pool file into the distribution's pool location.

        Returns the path relative to ``public/<prefix>``, e.g.
        ``pool/main/libf/libfoo/libfoo_1.0.deb``. Linking onto an existing
        destination is a no-op that returns the same path.
        """
        source_path = self.pool_path(filename, hash_md5)
        subdir = source_subdir(source)

        base = _base_name(filename)
        rel_path = str(PurePosixPath("pool", component, subdir, source, base))
        dest_dir = self._public_join(prefix, "pool", component, subdir, source)
        dest = dest_dir / base

        self._make_dirs(dest_dir)

        if dest.exists():
            logger.debug("Already linked %s, skipping", dest)
            return rel_path

        try:
            os.link(source_path, dest)
        except FileExistsError:
            # A dangling symlink also fails the probe above; only a
            # destination that now resolves counts as already linked.
            if not dest.exists():
                raise
            # Lost a race with another publisher after the probe above.
            logger.debug("Concurrently linked %s, skipping", dest)
            return rel_path

        logger.debug("Linked %s -> %s", source_path, dest)
        return rel_path

    # ------------------------------------------------------------------
    # Checksums
    # ------------------------------------------------------------------

    def checksums_for_file(self, path: str) -> ChecksumInfo:
        """Checksums of a file under the public tree. Not cached."""
        return self._checksum_func(self._public_join(path))

    def publish_from_pool(
        self,
        prefix: str,
        component: str,
        filename: str,
        hash_md5: str,
        source: str,
    ) -> PublishedFile:
        """Link a pool file into ``prefix`` and checksum the published copy."""
        rel_path = self.link_from_pool(prefix, component, filename, hash_md5, source)
        checksums = self.checksums_for_file(str(PurePosixPath(prefix, rel_path)))
        return PublishedFile(
            prefix=prefix,
            component=component,
            filename=rel_path,
            checksums=checksums,
        )
