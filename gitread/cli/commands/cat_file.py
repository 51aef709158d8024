"""``gitread cat-file SHA`` — show a single object.

Trees are listed as ``mode name id`` rows, commits print their message and
blobs print a placeholder unless ``--raw`` is given.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from gitread.core.errors import GitReadError
from gitread.core.repository import Repository
from gitread.display.renderer import ObjectRenderer
from gitread.models.objects import Blob

console = Console()


def cat_file_cmd(
    sha: str = typer.Argument(
        ...,
        help="The object id to show information for.",
    ),
    repo_dir: Path = typer.Option(
        None,
        "--repo",
        "-C",
        help="Start repository discovery here instead of the current directory.",
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Write blob content to stdout unchanged.",
    ),
) -> None:
    """Show the decoded content of an object."""
    renderer = ObjectRenderer(console=console)
    try:
        repo = Repository.open(repo_dir)
        obj = repo.find_object(sha)
    except GitReadError as exc:
        renderer.print_error(str(exc))
        raise typer.Exit(code=1)

    if raw and isinstance(obj, Blob):
        typer.echo(obj.data, nl=False)
        return

    renderer.print_object(obj)
