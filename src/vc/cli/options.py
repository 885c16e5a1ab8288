"""Options and helpers shared by vc commands."""

from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer

from vc.context.store import ContextStore, context_path


class Mode(str, Enum):
    """Per-invocation dry-run override."""

    DRY = "dry"
    RUN = "run"


ModeOption = Annotated[
    Optional[Mode],
    typer.Option("--mode", help="--mode=dry or --mode=run overwrite dry-run state"),
]


def effective_mode(ctx: typer.Context, mode: Optional[Mode]) -> str:
    """Pick the command's --mode, else the root one, else none."""
    if mode is not None:
        return mode.value
    root_mode = (ctx.obj or {}).get("mode")
    return root_mode.value if root_mode is not None else ""


def open_context(cwd: Path) -> ContextStore:
    """Load the context document for a working directory.

    Raises:
        ContextError: If the document exists but cannot be read.
    """
    return ContextStore(context_path(cwd)).load()
