"""Apply a resolved release tag: create it, push it, record it."""

from __future__ import annotations

import logging
from typing import Any, Optional

from rich.console import Console

from vc.git.repository import GitError, format_command
from vc.models.context import ReleaseState
from vc.release.version import Version

logger = logging.getLogger(__name__)

DRY_NOTICE = """
dry mode
-

change dry behavior with subcommand

    vc switch dry

-
"""

STAGE_TAG = "run tag"
STAGE_PUSH = "run push"


class ApplyError(Exception):
    """Exception raised when tagging or pushing fails.

    Attributes:
        stage: ``"run tag"`` or ``"run push"``.
    """

    def __init__(self, stage: str, cause: Exception):
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage}: {cause}")


def apply_release(
    version: Version,
    state: ReleaseState,
    store: Any,
    repository: Any,
    dry_run: bool,
    console: Optional[Console] = None,
) -> ReleaseState:
    """Tag and push a version, then persist it as the current one.

    In dry-run mode the git commands are printed instead of executed, but
    the version is still persisted. Tagging always precedes pushing and a
    failed tag is never pushed. Nothing is persisted after a failure, and
    a created tag is left in place if the push fails.

    Args:
        version: Version to release.
        state: Release state loaded for this invocation.
        store: Context store to write the new version into.
        repository: Git actions (``tag``, ``push``, ``remote_name``).
        dry_run: Print commands instead of running them.
        console: Output console.

    Returns:
        The release state holding the new version.

    Raises:
        ApplyError: If the tag or push command fails.
        ContextError: If the context cannot be written.
    """
    console = console or Console()
    tag = version.render()
    remote = repository.remote_name()

    if dry_run:
        console.print(DRY_NOTICE, markup=False, highlight=False)
        console.print(format_command("tag", tag), markup=False, highlight=False)
    else:
        try:
            repository.tag(tag)
        except GitError as e:
            raise ApplyError(STAGE_TAG, e) from e

    if dry_run:
        console.print(format_command("push", remote, tag), markup=False, highlight=False)
    else:
        try:
            repository.push(remote, tag)
        except GitError as e:
            raise ApplyError(STAGE_PUSH, e) from e

    updated = state.with_version(version)
    updated.write_version(store)
    store.flush()

    logger.debug(f"Recorded {tag} as current (dry_run={dry_run})")
    return updated
