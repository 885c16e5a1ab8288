"""Semantic version values for release tags."""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass, replace
from typing import Optional

logger = logging.getLogger(__name__)

_SEMVER_RE = re.compile(
    r"^v?(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


def slugify(name: str) -> str:
    """Normalize a pre-release name to a lowercase slug joined by underscores.

    Examples:
        >>> slugify("Release Candidate")
        'release_candidate'
        >>> slugify("release_candidate")
        'release_candidate'
    """
    text = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]+", "_", text.lower()).strip("_")


@dataclass(frozen=True)
class Version:
    """A release version rendered as ``v{major}.{minor}.{patch}-{name}.{count}``."""

    major: int = 0
    minor: int = 1
    patch: int = 0
    pre_release_name: str = "alpha"
    pre_release_count: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "pre_release_name", slugify(self.pre_release_name))

    def render(self) -> str:
        """Canonical tag name."""
        return (
            f"v{self.major}.{self.minor}.{self.patch}"
            f"-{self.pre_release_name}.{self.pre_release_count}"
        )

    def __str__(self) -> str:
        return self.render()

    def increment(
        self,
        major: bool = False,
        minor: bool = False,
        patch: bool = False,
        revision: bool = False,
    ) -> "Version":
        """Return a new version with each selected field bumped by one.

        Args:
            major: Bump the major number.
            minor: Bump the minor number.
            patch: Bump the patch number.
            revision: Bump the pre-release count.

        Returns:
            The incremented Version. Unselected fields are copied unchanged.
        """
        return replace(
            self,
            major=self.major + int(major),
            minor=self.minor + int(minor),
            patch=self.patch + int(patch),
            pre_release_count=self.pre_release_count + int(revision),
        )


def parse_semver(text: str) -> Optional[Version]:
    """Parse a semantic version string such as ``v2.3.4-rc.5``.

    A pre-release made of exactly two identifiers, the first one
    alphanumeric, gives the pre-release name and count. Any other
    pre-release shape leaves the name empty and the count at zero.

    Args:
        text: Version string, with or without a leading ``v``.

    Returns:
        The parsed Version, or None if the text is not a semantic version.
    """
    match = _SEMVER_RE.match(text.strip()) if text else None
    if match is None:
        logger.debug(f"Not a semantic version: {text!r}")
        return None

    name, count = "", 0
    pre = match.group("pre")
    if pre:
        parts = pre.split(".")
        if len(parts) == 2 and not parts[0].isdigit():
            name = parts[0]
            count = int(parts[1]) if parts[1].isdigit() else 0

    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        pre_release_name=name,
        pre_release_count=count,
    )
