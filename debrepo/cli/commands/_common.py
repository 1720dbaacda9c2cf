"""Shared helpers for debrepo CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from debrepo.config import config
from debrepo.core.repository import Repository, RepositoryError

console = Console()

ROOT_OPTION = typer.Option(
    None,
    "--root",
    "-r",
    help="Archive root directory (defaults to DEBREPO_ROOT_PATH).",
)


def open_repository(root: Path | None) -> Repository:
    """Repository at ``root``, or at the configured root when omitted."""
    if root is None:
        return Repository.from_config(config)
    return Repository(root, dir_mode=config.dir_mode)


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn invalid input and filesystem failures into exit code 1."""
    try:
        yield
    except RepositoryError as exc:
        console.print(f"[bold red]Invalid input:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    except OSError as exc:
        console.print(f"[bold red]Filesystem error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)


def print_path(path: object) -> None:
    """Print a path verbatim, without wrapping or highlighting."""
    console.print(str(path), soft_wrap=True, highlight=False, markup=False)
