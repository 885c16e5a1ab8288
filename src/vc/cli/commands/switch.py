"""Toggle persisted switches."""

from pathlib import Path

import typer
from rich.console import Console

from vc.cli.options import open_context
from vc.context.store import ContextError
from vc.models.context import KEY_DRY_MODE, ReleaseState

console = Console()


def dry() -> None:
    """Toggle the persisted dry-run switch.

    While dry mode is on, push and tag commands only print what they
    would run.

    Examples:
        vc switch dry
    """
    cwd = Path.cwd()

    try:
        store = open_context(cwd)
        state = ReleaseState.from_store(store)
    except ContextError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if state.dry_mode:
        console.print("[yellow]now you need to be careful[/yellow] 🛃 --dry-run=false")
    else:
        console.print("[green]you are safe[/green] 🍃")

    updated = state.with_dry_mode(not state.dry_mode)
    console.print(f"dry {updated.dry_mode}", markup=False, highlight=False)

    store.set(KEY_DRY_MODE, updated.dry_mode)
    try:
        store.flush()
    except ContextError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
