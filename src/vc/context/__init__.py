"""Persisted context for vc."""

from vc.context.store import ContextError, ContextStore, context_path

__all__ = [
    "ContextError",
    "ContextStore",
    "context_path",
]
