"""Shared test fixtures for debrepo."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from debrepo.core.checksums import md5_hex
from debrepo.core.repository import Repository


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test archives."""
    return tmp_path


@pytest.fixture
def repo(tmp_dir: Path) -> Repository:
    """Provide a Repository rooted in a fresh temp directory."""
    return Repository(tmp_dir / "archive")


@pytest.fixture
def make_pool_file(repo: Repository) -> Callable[..., tuple[str, str]]:
    """Factory fixture: place content in the pool, return (filename, md5).

    Stands in for the ingest step that normally fills the pool.
    """

    def _factory(
        filename: str = "libfoo_1.0_amd64.deb",
        content: bytes = b"!<arch>\ndebian-binary\n",
    ) -> tuple[str, str]:
        digest = md5_hex(content)
        path = repo.pool_path(filename, digest)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return filename, digest

    return _factory


@pytest.fixture
def md5_digest() -> str:
    """A well-formed 32-character MD5 digest."""
    return "0123456789abcdef0123456789abcdef"
