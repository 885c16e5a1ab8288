"""Stage a file picked from the status listing."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from vc.git.picker import PickerError, parse_status_line, skim_pipe
from vc.git.repository import GitError, GitRepository

logger = logging.getLogger(__name__)

console = Console()


def add(
    auto: Annotated[
        bool,
        typer.Option("--auto", "-a", help="Stage all tracked files and commit"),
    ] = False,
) -> None:
    """Pick a changed file with sk and stage it.

    With --auto, commits every tracked change instead (git commit -av).

    Examples:
        vc a
        vc a --auto
    """
    cwd = Path.cwd()

    if auto:
        try:
            GitRepository(cwd).run("commit", "-av")
        except GitError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)
        return

    try:
        selection = skim_pipe(["git", "status", "-s", "-u"], cwd=cwd)
    except PickerError as e:
        logger.error(f"run skim pipe: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    state, filename = parse_status_line(selection)
    logger.debug(f"state={state} filename={filename}")

    if not filename:
        console.print("[yellow]No file selected[/yellow]")
        raise typer.Exit(0)

    try:
        GitRepository(cwd).output("add", filename)
    except GitError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]Staged:[/green] {filename}")
