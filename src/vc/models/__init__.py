"""Data models for vc."""

from vc.models.context import ReleaseState

__all__ = ["ReleaseState"]
