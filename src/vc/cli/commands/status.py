"""Show working tree status."""

from pathlib import Path

import typer
from rich.console import Console

from vc.git.repository import GitError, GitRepository

console = Console()


def status() -> None:
    """Show the working tree status, untracked files included.

    Examples:
        vc s
    """
    try:
        GitRepository(Path.cwd()).run("status", "-u")
    except GitError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
