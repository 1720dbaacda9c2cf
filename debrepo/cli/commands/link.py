"""``debrepo link`` and ``debrepo publish`` — expose pool files in a distribution.

Both hard-link ``pool/<md5[0:2]>/<md5[2:4]>/<file>`` to
``public/<prefix>/pool/<component>/<subdir>/<source>/<file>``.
``publish`` additionally checksums the published file and shows the
fields a package index entry needs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from debrepo.cli.commands._common import (
    ROOT_OPTION,
    console,
    open_repository,
    print_path,
    reported_errors,
)

_PREFIX_ARG = typer.Argument(..., help="Distribution prefix in the public tree.")
_COMPONENT_ARG = typer.Argument(..., help="Archive component, e.g. main.")
_FILENAME_ARG = typer.Argument(..., help="Package file name.")
_MD5_ARG = typer.Argument(..., help="MD5 hex digest of the file contents.")
_SOURCE_ARG = typer.Argument(..., help="Source package name.")


def link_cmd(
    prefix: str = _PREFIX_ARG,
    component: str = _COMPONENT_ARG,
    filename: str = _FILENAME_ARG,
    md5: str = _MD5_ARG,
    source: str = _SOURCE_ARG,
    root: Optional[Path] = ROOT_OPTION,
) -> None:
    """Link a pool file into the public tree and print its relative path."""
    repo = open_repository(root)
    with reported_errors():
        print_path(repo.link_from_pool(prefix, component, filename, md5, source))


def publish_cmd(
    prefix: str = _PREFIX_ARG,
    component: str = _COMPONENT_ARG,
    filename: str = _FILENAME_ARG,
    md5: str = _MD5_ARG,
    source: str = _SOURCE_ARG,
    root: Optional[Path] = ROOT_OPTION,
) -> None:
    """Link a pool file into the public tree and show its index fields."""
    repo = open_repository(root)
    with reported_errors():
        published = repo.publish_from_pool(prefix, component, filename, md5, source)

    table = Table(title=f"Published in {published.prefix}/{published.component}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", overflow="fold")
    table.add_row("Filename", published.filename)
    table.add_row("Size", str(published.checksums.size))
    table.add_row("MD5sum", published.checksums.md5)
    table.add_row("SHA1", published.checksums.sha1)
    table.add_row("SHA256", published.checksums.sha256)
    console.print(table)
