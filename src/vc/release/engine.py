"""Release tag resolution.

The ``t``, ``inc`` and ``new`` commands each turn their flags into an
ordered list of resolution attempts. The engine takes the first attempt
that yields a version and hands it to :func:`vc.release.apply.apply_release`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from rich.console import Console

from vc.models.context import ReleaseState
from vc.release.apply import apply_release
from vc.release.version import Version, parse_semver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Increment:
    """Bump the persisted version."""

    major: bool = False
    minor: bool = False
    patch: bool = False
    revision: bool = True

    def attempt(self, current: Version) -> Optional[Version]:
        return current.increment(self.major, self.minor, self.patch, self.revision)


@dataclass(frozen=True)
class Explicit:
    """Use a semantic version string, when it parses."""

    text: str = ""

    def attempt(self, current: Version) -> Optional[Version]:
        return parse_semver(self.text)


@dataclass(frozen=True)
class PlainDefault:
    """Build a version from individual fields."""

    major: int = 0
    minor: int = 1
    patch: int = 0
    count: int = 1
    name: str = "alpha"

    def attempt(self, current: Version) -> Optional[Version]:
        return Version(self.major, self.minor, self.patch, self.name, self.count)


Attempt = Union[Increment, Explicit, PlainDefault]


class ResolutionError(Exception):
    """Exception raised when no resolution attempt applies."""

    pass


def wants_increment(
    alias_invoked: bool,
    increment_requested: bool,
    flag_new: bool = False,
    flag_inc: bool = True,
) -> bool:
    """Decide between the increment and the new-version path.

    Aliased commands (``inc``, ``new``) keep their own decision. The plain
    ``t`` command increments unless ``--new`` is given; ``--new`` wins over
    ``--inc``.
    """
    increment = increment_requested
    if not alias_invoked:
        if not flag_new or flag_inc:
            increment = True
        if flag_new:
            increment = False
    return increment


def new_version_attempts(explicit: str, fallback: PlainDefault) -> list[Attempt]:
    """Attempts for the new-version path: explicit string first, then fields."""
    return [Explicit(explicit), fallback]


def resolve_attempt(current: Version, attempts: Sequence[Attempt]) -> tuple[Attempt, Version]:
    """Run attempts in order and return the first applicable one with its version.

    Raises:
        ResolutionError: If no attempt applies.
    """
    for attempt in attempts:
        version = attempt.attempt(current)
        if version is not None:
            logger.debug(f"{type(attempt).__name__} resolved {version}")
            return attempt, version
        logger.debug(f"{type(attempt).__name__} not applicable")

    raise ResolutionError("No resolution attempt produced a version")


def resolve(current: Version, attempts: Sequence[Attempt]) -> Version:
    """Resolve the target version from ordered attempts."""
    _, version = resolve_attempt(current, attempts)
    return version


class TagEngine:
    """Resolve and apply release tags against a context store.

    The store is read when the engine is built and written once, after a
    successful apply.
    """

    def __init__(
        self,
        store: Any,
        repository: Any,
        mode: str = "",
        console: Optional[Console] = None,
        state: Optional[ReleaseState] = None,
    ):
        """Initialize the engine.

        Args:
            store: Loaded context store (``get``/``set``/``flush``).
            repository: Branch lookup and git actions.
            mode: Per-invocation dry-run override (``dry``, ``run`` or empty).
            console: Output console.
            state: Release state already read from the store.

        Raises:
            ContextError: If the stored state is invalid.
            ValueError: If mode is not recognized.
        """
        self.store = store
        self.repository = repository
        self.console = console or Console()
        self.state = state if state is not None else ReleaseState.from_store(store)
        self.dry_run = self.state.is_dry_run(mode)

    @property
    def current(self) -> Version:
        """The persisted current version."""
        return self.state.version

    def release(self, attempts: Sequence[Attempt]) -> Version:
        """Resolve a version from attempts and apply it.

        Returns:
            The applied version.

        Raises:
            GitError: If the branch lookup fails (before anything is applied).
            ApplyError: If tagging or pushing fails.
            ContextError: If the new version cannot be persisted.
        """
        attempt, version = resolve_attempt(self.current, attempts)

        if isinstance(attempt, Increment):
            self.console.print(f"inc --> {version}", markup=False, highlight=False)
            head, branches = self.repository.branch()
            self.console.print(f"head: {head}", markup=False, highlight=False)
            self.console.print("branches:")
            for i, name in enumerate(branches):
                self.console.print(f"{i} {name}", markup=False, highlight=False)
        elif isinstance(attempt, PlainDefault):
            self.console.print(f"new {version}", markup=False, highlight=False)

        self.state = apply_release(
            version,
            self.state,
            self.store,
            self.repository,
            self.dry_run,
            console=self.console,
        )
        return version
