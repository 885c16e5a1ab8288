"""CLI module for vc."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from vc import __version__
from vc.cli.options import ModeOption
from vc.git.repository import GitError, GitRepository

console = Console()

app = typer.Typer(
    name="vc",
    help="Short-alias git workflow with release tagging.",
    add_completion=False,
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[dim]vc[/dim] v{__version__}")
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    more: bool = typer.Option(False, "--more", help="Display the full git log."),
    mode: ModeOption = None,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Short-alias git workflow with release tagging.

    Without a subcommand, shows the last commit and a short status.
    """
    _configure_logging(debug)
    ctx.obj = {"mode": mode}

    if ctx.invoked_subcommand is not None:
        return

    console.clear()
    console.print()

    repository = GitRepository(Path.cwd())
    log_args = ["log"]
    if not more:
        log_args.append("-1")

    for args in (log_args, ["status", "-s"]):
        try:
            repository.run(*args)
        except GitError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)
        console.print()


from vc.cli.commands import add, commit, init, push, status, switch, tag

app.command(name="s")(status.status)
app.command(name="a")(add.add)
app.command(name="c")(commit.commit)
app.command(name="p")(push.push)
app.command(name="t")(tag.tag)
app.command(name="inc")(tag.inc)
app.command(name="new")(tag.new)
app.command()(init.init)

# Switches persisted in the context document
switch_app = typer.Typer(
    name="switch",
    help="Toggle persisted switches.",
    no_args_is_help=True,
)
switch_app.command(name="dry")(switch.dry)
app.add_typer(switch_app)


if __name__ == "__main__":
    app()
