"""Initialize the vc context in the current directory."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from vc.cli.options import open_context
from vc.context.store import ContextError
from vc.git.repository import is_git_repository
from vc.models.context import ReleaseState

console = Console()


def init() -> None:
    """Write the default context document.

    Creates .vc.yaml with dry mode on and the release counter at its
    defaults, and keeps it out of git.

    Examples:
        vc init
    """
    cwd = Path.cwd()

    if not is_git_repository(cwd):
        console.print("[red]Error:[/red] Not a git repository")
        console.print("Run 'git init' first or navigate to a git repository.")
        raise typer.Exit(1)

    try:
        store = open_context(cwd)
        if store.exists:
            console.print("[yellow]Already initialized[/yellow]")
            console.print(f"Context file at {store.path}")
            return

        state = ReleaseState.from_store(store)
        state.to_store(store)
        store.flush()
    except ContextError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        _update_gitignore(cwd / ".gitignore", store.path.name)
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot update .gitignore: {e}")
        raise typer.Exit(1)

    console.print(
        Panel(
            f"[green]Initialized in {cwd.name}[/green]\n\n"
            f"[bold]Current tag:[/bold] {state.version}\n"
            f"[bold]Remote:[/bold]      {state.remote}\n"
            f"[bold]Dry mode:[/bold]    {state.dry_mode}\n\n"
            f"[bold]Release commands:[/bold]\n"
            f"  [cyan]vc t[/cyan]            Increment and tag\n"
            f"  [cyan]vc new -v <ver>[/cyan] Tag a new version\n"
            f"  [cyan]vc switch dry[/cyan]   Toggle dry mode",
            title="vc",
            border_style="green",
        )
    )


def _update_gitignore(gitignore_path: Path, entry: str) -> None:
    """Add the context file to .gitignore."""
    if gitignore_path.exists():
        content = gitignore_path.read_text()

        if entry in content.splitlines():
            return
        if content and not content.endswith("\n"):
            content += "\n"
        content += entry + "\n"
    else:
        content = entry + "\n"

    gitignore_path.write_text(content)
