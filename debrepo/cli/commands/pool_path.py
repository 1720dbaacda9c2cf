"""``debrepo pool-path FILENAME MD5`` — show where a package lives in the pool."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from debrepo.cli.commands._common import (
    ROOT_OPTION,
    open_repository,
    print_path,
    reported_errors,
)


def pool_path_cmd(
    filename: str = typer.Argument(..., help="Package file name."),
    md5: str = typer.Argument(..., help="MD5 hex digest of the file contents."),
    root: Optional[Path] = ROOT_OPTION,
) -> None:
    """Print the pool path for a package file and its MD5 digest."""
    repo = open_repository(root)
    with reported_errors():
        print_path(repo.pool_path(filename, md5))
