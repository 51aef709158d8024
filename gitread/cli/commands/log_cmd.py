"""``gitread log SHA`` — show the first-parent history from a commit."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from gitread.core.errors import GitReadError
from gitread.core.repository import Repository
from gitread.display.renderer import ObjectRenderer

console = Console()


def log_cmd(
    sha: str = typer.Argument(
        ...,
        help="The commit id from which to start the history log.",
    ),
    repo_dir: Path = typer.Option(
        None,
        "--repo",
        "-C",
        help="Start repository discovery here instead of the current directory.",
    ),
    max_count: int = typer.Option(
        None,
        "--max-count",
        "-n",
        min=1,
        help="Limit the number of commits shown.",
    ),
) -> None:
    """Show commit history, newest first, following first parents."""
    renderer = ObjectRenderer(console=console)
    try:
        repo = Repository.open(repo_dir)
        commits = repo.log(sha, max_count=max_count)
    except GitReadError as exc:
        renderer.print_error(str(exc))
        raise typer.Exit(code=1)

    renderer.print_log(commits)
