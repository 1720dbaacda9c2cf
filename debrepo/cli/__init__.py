"""debrepo CLI — Typer-based command-line interface.

Provides the ``debrepo`` command with subcommands for deriving pool
paths, linking pool files into distributions, creating public
directories and checksumming published files.

All output uses Rich for formatted terminal display.
"""
