"""Commit with the verbose editor."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from vc.git.repository import GitError, GitRepository

logger = logging.getLogger(__name__)

console = Console()


def commit(
    amend: Annotated[
        bool,
        typer.Option("--amend", help="Pass --amend to git commit"),
    ] = False,
    update: Annotated[
        bool,
        typer.Option("--update", help="Alias for --amend"),
    ] = False,
) -> None:
    """Commit staged changes, allowing empty commits.

    Examples:
        vc c
        vc c --amend
    """
    args = ["commit", "-v", "--allow-empty"]
    if amend or update:
        args.append("--amend")

    try:
        GitRepository(Path.cwd()).run(*args)
    except GitError as e:
        logger.error(f"commit: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
