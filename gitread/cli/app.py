"""Main Typer application — imports and registers all CLI commands.

Entry point: ``gitread`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from gitread import __version__
from gitread.cli.commands.cat_file import cat_file_cmd
from gitread.cli.commands.log_cmd import log_cmd
from gitread.config import config
from gitread.display.renderer import ObjectRenderer

console = Console()

app = typer.Typer(
    name="gitread",
    help="gitread: read loose objects and history from a git object store.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="cat-file", help="Show the decoded content of an object.")(cat_file_cmd)
app.command(name="log", help="Show commit history from a commit.")(log_cmd)


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else config.log_level.upper()
    if not isinstance(logging.getLevelName(level), int):
        ObjectRenderer(console=console).print_error(
            f"Unknown log level {config.log_level!r} (set GITREAD_LOG_LEVEL to "
            "DEBUG, INFO, WARNING, ERROR or CRITICAL)"
        )
        raise typer.Exit(code=1)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gitread {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log object lookups at DEBUG level."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    _configure_logging(verbose)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
