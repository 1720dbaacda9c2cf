"""``debrepo mkdir`` and ``debrepo checksums`` — work with the public tree."""

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


def mkdir_cmd(
    path: str = typer.Argument(..., help="Directory relative to the public root."),
    root: Optional[Path] = ROOT_OPTION,
) -> None:
    """Create a directory (and parents) under the public tree."""
    repo = open_repository(root)
    with reported_errors():
        repo.mkdir(path)
    print_path(repo.public_path() / path.lstrip("/"))


def checksums_cmd(
    path: str = typer.Argument(..., help="File relative to the public root."),
    root: Optional[Path] = ROOT_OPTION,
) -> None:
    """Show size and digests of a file in the public tree."""
    repo = open_repository(root)
    with reported_errors():
        info = repo.checksums_for_file(path)

    table = Table(title=path)
    table.add_column("Field", style="cyan")
    table.add_column("Value", overflow="fold")
    table.add_row("Size", str(info.size))
    table.add_row("MD5", info.md5)
    table.add_row("SHA1", info.sha1)
    table.add_row("SHA256", info.sha256)
    console.print(table)
