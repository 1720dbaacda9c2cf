"""Main Typer application — imports and registers all CLI commands.

Entry point: ``debrepo`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from debrepo.cli.commands.link import link_cmd, publish_cmd
from debrepo.cli.commands.pool_path import pool_path_cmd
from debrepo.cli.commands.public import checksums_cmd, mkdir_cmd
from debrepo.config import config

app = typer.Typer(
    name="debrepo",
    help="debrepo: package pool and published tree of a Debian-style archive.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="pool-path", help="Show the pool path of a package file.")(pool_path_cmd)
app.command(name="link", help="Hard-link a pool file into a distribution.")(link_cmd)
app.command(name="publish", help="Link a pool file and show its index fields.")(publish_cmd)
app.command(name="mkdir", help="Create a directory under the public tree.")(mkdir_cmd)
app.command(name="checksums", help="Show checksums of a published file.")(checksums_cmd)


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to DEBREPO_LOG_LEVEL).",
    ),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
