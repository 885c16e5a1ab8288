"""Push the current branch."""

from pathlib import Path

import typer
from rich.console import Console

from vc.cli.options import ModeOption, effective_mode, open_context
from vc.context.store import ContextError
from vc.git.repository import GitError, GitRepository, format_command
from vc.models.context import ReleaseState

console = Console()

PUSH_OPTIONS = ("ci.skip",)


def push(ctx: typer.Context, mode: ModeOption = None) -> None:
    """Push the current branch to the configured remote, skipping CI.

    In dry mode the push command is printed instead.

    Examples:
        vc p
        vc p --mode run
    """
    cwd = Path.cwd()

    try:
        state = ReleaseState.from_store(open_context(cwd))
    except ContextError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    repository = GitRepository(cwd, remote=state.remote)

    try:
        head = repository.current_branch()
    except GitError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    remote = repository.remote_name()

    if state.is_dry_run(effective_mode(ctx, mode)):
        args = ["push"]
        for option in PUSH_OPTIONS:
            args.extend(["-o", option])
        console.print(f"dry mode: {format_command(*args, remote, head)}", markup=False, highlight=False)
        return

    try:
        repository.push(remote, head, options=PUSH_OPTIONS)
    except GitError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
