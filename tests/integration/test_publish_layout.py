"""Integration test: publish a small distribution end to end.

Pool files are linked into two distributions, a Packages index is
written through the public tree, and every Filename entry is checked to
resolve to a file sharing its inode with the pool original.
"""

from __future__ import annotations

import os

from debrepo.core.checksums import md5_hex
from debrepo.core.repository import Repository

_PACKAGES = [
    # (filename, source, contents)
    ("libfoo1_1.0_amd64.deb", "libfoo", b"libfoo1 binary"),
    ("libfoo-dev_1.0_amd64.deb", "libfoo", b"libfoo-dev binary"),
    ("bar_2.1_all.deb", "bar", b"bar binary"),
    ("zsh_5.0_amd64.deb", "zsh", b"zsh binary"),
]


def _ingest(repo: Repository) -> list[tuple[str, str, str]]:
    ingested = []
    for filename, source, contents in _PACKAGES:
        digest = md5_hex(contents)
        path = repo.pool_path(filename, digest)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(contents)
        ingested.append((filename, digest, source))
    return ingested


def _publish(repo: Repository, prefix: str, ingested) -> list[str]:
    entries = []
    for filename, digest, source in ingested:
        published = repo.publish_from_pool(prefix, "main", filename, digest, source)
        assert published.checksums.md5 == digest
        entries.append(
            f"Filename: {published.filename}\n"
            f"Size: {published.checksums.size}\n"
            f"MD5sum: {published.checksums.md5}\n"
        )

    index_dir = f"{prefix}/dists/{prefix}/main/binary-amd64"
    repo.mkdir(index_dir)
    with repo.create_file(f"{index_dir}/Packages") as fh:
        fh.write("\n".join(entries).encode("utf-8"))
    return entries


class TestPublishLayout:
    def test_full_publish(self, repo: Repository):
        ingested = _ingest(repo)
        entries = _publish(repo, "squeeze", ingested)

        filenames = [e.splitlines()[0].removeprefix("Filename: ") for e in entries]
        assert filenames == [
            "pool/main/libf/libfoo/libfoo1_1.0_amd64.deb",
            "pool/main/libf/libfoo/libfoo-dev_1.0_amd64.deb",
            "pool/main/b/bar/bar_2.1_all.deb",
            "pool/main/z/zsh/zsh_5.0_amd64.deb",
        ]
        for (filename, digest, _), rel in zip(ingested, filenames):
            published = repo.public_path() / "squeeze" / rel
            assert os.stat(published).st_ino == os.stat(repo.pool_path(filename, digest)).st_ino

        index = repo.checksums_for_file("squeeze/dists/squeeze/main/binary-amd64/Packages")
        packages_bytes = (
            repo.public_path() / "squeeze/dists/squeeze/main/binary-amd64/Packages"
        ).read_bytes()
        assert index.md5 == md5_hex(packages_bytes)

    def test_republish_is_idempotent(self, repo: Repository):
        ingested = _ingest(repo)
        first = _publish(repo, "squeeze", ingested)
        second = _publish(repo, "squeeze", ingested)
        assert first == second
        for filename, digest, _ in ingested:
            assert os.stat(repo.pool_path(filename, digest)).st_nlink == 2

    def test_two_distributions_share_pool(self, repo: Repository):
        ingested = _ingest(repo)
        _publish(repo, "squeeze", ingested)
        _publish(repo, "wheezy", ingested)
        for filename, digest, _ in ingested:
            assert os.stat(repo.pool_path(filename, digest)).st_nlink == 3
