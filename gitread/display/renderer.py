"""Rich terminal renderer for decoded objects and commit history.

Color scheme
------------
- yellow    : commit header line
- cyan      : tree entries that are sub-trees
- dim       : placeholder for binary blob content
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from gitread.models.objects import Blob, Commit, GitObject, Tree


class ObjectRenderer:
    """Renders objects and log entries to a Rich console.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # ------------------------------------------------------------------
    # Single objects
    # ------------------------------------------------------------------

    def render_tree(self, tree: Tree) -> Text:
        """Tree entries as ``mode name id`` rows, mode zero-padded to six."""
        text = Text()
        for entry in tree.entries:
            text.append(f"{entry.mode:0>6} ")
            text.append(f"{entry.filename:30}", style="cyan" if entry.is_tree else None)
            text.append(f" {entry.id}\n")
        return text

    def print_object(self, obj: GitObject) -> None:
        if isinstance(obj, Tree):
            self.console.print(self.render_tree(obj), end="", soft_wrap=True)
        elif isinstance(obj, Commit):
            self.console.print(Text(obj.message), end="", soft_wrap=True)
        elif isinstance(obj, Blob):
            self.console.print("[dim]... binary ...[/dim]")
        else:
            raise TypeError(f"Unsupported object: {obj!r}")

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def render_log_entry(self, commit: Commit) -> Text:
        text = Text()
        text.append(f"commit {commit.id}\n", style="yellow")
        text.append(f"Author: {commit.author}\n")
        for line in commit.message.splitlines():
            text.append(f"    {line}\n")
        return text

    def print_log(self, commits: list[Commit]) -> None:
        for commit in commits:
            self.console.print(self.render_log_entry(commit), soft_wrap=True)

    def print_error(self, message: str) -> None:
        self.console.print(Text(f"Error: {message}", style="red"), soft_wrap=True)
