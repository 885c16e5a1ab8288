"""Create and push release tags."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from vc.cli.options import Mode, ModeOption, effective_mode, open_context
from vc.context.store import ContextError
from vc.git.repository import GitError, GitRepository
from vc.models.context import ReleaseState
from vc.release.apply import ApplyError
from vc.release.engine import (
    Increment,
    PlainDefault,
    ResolutionError,
    TagEngine,
    new_version_attempts,
    wants_increment,
)

console = Console()

DEFAULT_MAJOR, DEFAULT_MINOR, DEFAULT_PATCH, DEFAULT_RC = 0, 1, 0, 1
DEFAULT_RC_NAME = "alpha"


def tag(
    ctx: typer.Context,
    major: Annotated[int, typer.Option("--major", min=0, help="Set major version (new tag)")] = DEFAULT_MAJOR,
    minor: Annotated[int, typer.Option("--minor", min=0, help="Set minor version (new tag)")] = DEFAULT_MINOR,
    patch: Annotated[int, typer.Option("--patch", min=0, help="Set patch version (new tag)")] = DEFAULT_PATCH,
    rc: Annotated[int, typer.Option("--rc", min=0, help="Set pre-release count (new tag)")] = DEFAULT_RC,
    rc_name: Annotated[str, typer.Option("--rc-name", help="Set pre-release name (new tag)")] = DEFAULT_RC_NAME,
    new: Annotated[bool, typer.Option("--new", help="Overwrite the tag counter with a new version")] = False,
    inc: Annotated[bool, typer.Option("--inc/--no-inc", help="Increment the tag counter")] = True,
    imajor: Annotated[bool, typer.Option("--imajor/--no-imajor", help="Increment major")] = False,
    iminor: Annotated[bool, typer.Option("--iminor/--no-iminor", help="Increment minor")] = False,
    ipatch: Annotated[bool, typer.Option("--ipatch/--no-ipatch", help="Increment patch")] = False,
    irc: Annotated[bool, typer.Option("--irc/--no-irc", help="Increment pre-release count")] = True,
    mode: ModeOption = None,
) -> None:
    """Tag a release, incrementing the last one unless --new is given.

    Examples:
        vc t
        vc t --ipatch --no-irc
        vc t --new --major 1 --minor 0 --rc-name beta
    """
    _release(
        ctx,
        mode,
        alias_invoked=False,
        increment_requested=False,
        increment=Increment(imajor, iminor, ipatch, irc),
        fallback=PlainDefault(major, minor, patch, rc, rc_name),
        flag_new=new,
        flag_inc=inc,
    )


def inc(
    ctx: typer.Context,
    maj: Annotated[bool, typer.Option("--maj/--no-maj", help="Increment major semantic version")] = False,
    min_: Annotated[bool, typer.Option("--min/--no-min", help="Increment minor semantic version")] = False,
    p: Annotated[bool, typer.Option("--p/--no-p", help="Increment patch semantic version")] = False,
    c: Annotated[bool, typer.Option("--c/--no-c", help="Increment pre-release count")] = True,
    mode: ModeOption = None,
) -> None:
    """Tag a release by incrementing the last one.

    Examples:
        vc inc
        vc inc --min --no-c
    """
    _release(
        ctx,
        mode,
        alias_invoked=True,
        increment_requested=True,
        increment=Increment(maj, min_, p, c),
        fallback=PlainDefault(),
    )


def new(
    ctx: typer.Context,
    maj: Annotated[int, typer.Option("--maj", min=0, help="Set new major")] = DEFAULT_MAJOR,
    min_: Annotated[int, typer.Option("--min", min=0, help="Set new minor")] = DEFAULT_MINOR,
    p: Annotated[int, typer.Option("--p", min=0, help="Set new patch")] = DEFAULT_PATCH,
    c: Annotated[int, typer.Option("--c", min=0, help="Set new pre-release count")] = DEFAULT_RC,
    rc: Annotated[str, typer.Option("--rc", help="Set new pre-release name")] = DEFAULT_RC_NAME,
    version: Annotated[str, typer.Option("--version", "-v", help="Set with a semantic version")] = "",
    mode: ModeOption = None,
) -> None:
    """Tag a release with a new version.

    A valid --version takes precedence; otherwise the version is built
    from the individual fields.

    Examples:
        vc new --version v2.3.4-rc.5
        vc new --maj 1 --min 0 --p 0 --rc beta --c 1
    """
    _release(
        ctx,
        mode,
        alias_invoked=True,
        increment_requested=False,
        increment=Increment(),
        fallback=PlainDefault(maj, min_, p, c, rc),
        explicit=version,
    )


def _release(
    ctx: typer.Context,
    mode: Optional[Mode],
    alias_invoked: bool,
    increment_requested: bool,
    increment: Increment,
    fallback: PlainDefault,
    explicit: str = "",
    flag_new: bool = False,
    flag_inc: bool = True,
) -> None:
    """Shared body of the tag commands."""
    cwd = Path.cwd()

    try:
        store = open_context(cwd)
        state = ReleaseState.from_store(store)
    except ContextError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    repository = GitRepository(cwd, remote=state.remote)
    engine = TagEngine(store, repository, mode=effective_mode(ctx, mode), console=console, state=state)

    if wants_increment(alias_invoked, increment_requested, flag_new, flag_inc):
        attempts = [increment]
    else:
        attempts = new_version_attempts(explicit, fallback)

    try:
        engine.release(attempts)
    except (ApplyError, GitError, ContextError, ResolutionError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
