"""Release state model backed by the context document."""

from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from vc.context.store import ContextError
from vc.release.version import Version

KEY_DRY_MODE = "dry_mode"
KEY_REMOTE = "remote"
KEY_DRAFT = "draft"
KEY_REVISION = "current.tag.revision"
KEY_MAJOR = "current.tag.version.major"
KEY_MINOR = "current.tag.version.minor"
KEY_PATCH = "current.tag.version.patch"
KEY_RELEASE_NAME = "current.tag.release.name"

_FIELD_KEYS = {
    "dry_mode": KEY_DRY_MODE,
    "remote": KEY_REMOTE,
    "draft": KEY_DRAFT,
    "revision": KEY_REVISION,
    "major": KEY_MAJOR,
    "minor": KEY_MINOR,
    "patch": KEY_PATCH,
    "release_name": KEY_RELEASE_NAME,
}


class ReleaseState(BaseModel):
    """The last version vc knows about, plus the switches around it.

    Mirrors the context document: every field maps to one dotted key.
    """

    dry_mode: bool = True
    remote: str = Field(default="origin", min_length=1)
    draft: bool = True

    major: int = Field(default=0, ge=0)
    minor: int = Field(default=0, ge=0)
    patch: int = Field(default=0, ge=0)
    release_name: str = "alpha"
    revision: int = Field(default=1, ge=0)

    model_config = {"frozen": True}

    @field_validator("release_name", mode="before")
    @classmethod
    def coerce_release_name(cls, v: Any) -> Any:
        """Accept unquoted numeric names from a hand-edited document."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def version(self) -> Version:
        """The current version."""
        return Version(
            major=self.major,
            minor=self.minor,
            patch=self.patch,
            pre_release_name=self.release_name,
            pre_release_count=self.revision,
        )

    def with_version(self, version: Version) -> "ReleaseState":
        """Return a copy holding the given version as current."""
        return self.model_copy(
            update={
                "major": version.major,
                "minor": version.minor,
                "patch": version.patch,
                "release_name": version.pre_release_name,
                "revision": version.pre_release_count,
            }
        )

    def with_dry_mode(self, dry_mode: bool) -> "ReleaseState":
        """Return a copy with the dry-run switch set."""
        return self.model_copy(update={"dry_mode": dry_mode})

    def is_dry_run(self, mode: str = "") -> bool:
        """Resolve the effective dry-run flag.

        Args:
            mode: Per-invocation override, ``"dry"``, ``"run"`` or empty.

        Returns:
            The override when given, otherwise the persisted switch.

        Raises:
            ValueError: If mode is not one of the accepted values.
        """
        if mode == "dry":
            return True
        if mode == "run":
            return False
        if mode:
            raise ValueError(f"Unknown mode {mode!r}, expected 'dry' or 'run'")
        return self.dry_mode

    @classmethod
    def from_store(cls, store: Any) -> "ReleaseState":
        """Build the state from a context store, defaulting absent keys."""
        marker = object()
        values = {}
        for field_name, key in _FIELD_KEYS.items():
            value = store.get(key, marker)
            if value is not marker and value is not None:
                values[field_name] = value
        try:
            return cls(**values)
        except ValidationError as e:
            raise ContextError(f"Invalid context: {e}") from e

    def to_store(self, store: Any) -> None:
        """Write every field into a context store."""
        for field_name, key in _FIELD_KEYS.items():
            store.set(key, getattr(self, field_name))

    def write_version(self, store: Any) -> None:
        """Write only the version fields into a context store."""
        store.set(KEY_REVISION, self.revision)
        store.set(KEY_MAJOR, self.major)
        store.set(KEY_MINOR, self.minor)
        store.set(KEY_PATCH, self.patch)
        store.set(KEY_RELEASE_NAME, self.release_name)
