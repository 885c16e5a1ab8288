"""Key/value context persisted to a YAML document.

Dotted keys such as ``current.tag.version.major`` address nested maps in
the document, so the file on disk reads::

    dry_mode: true
    remote: origin
    current:
      tag:
        revision: 1
        version:
          major: 0
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

CONTEXT_FILE = ".vc.yaml"
CONTEXT_ENV = "VC_CONTEXT"


class ContextError(Exception):
    """Exception raised when the context document cannot be read or written."""

    pass


def context_path(cwd: Optional[Path] = None) -> Path:
    """Resolve the context document path.

    Args:
        cwd: Directory holding the document (defaults to the current directory).

    Returns:
        ``$VC_CONTEXT`` when set, otherwise ``<cwd>/.vc.yaml``.
    """
    override = os.environ.get(CONTEXT_ENV)
    if override:
        return Path(override)
    return (cwd or Path.cwd()) / CONTEXT_FILE


class ContextStore:
    """Read and write the vc context document.

    The document is read once by :meth:`load` and written back whole by
    :meth:`flush`.
    """

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: Location of the YAML document.
        """
        self.path = path
        self._data: dict = {}

    @property
    def exists(self) -> bool:
        """Whether the document exists on disk."""
        return self.path.exists()

    def load(self) -> "ContextStore":
        """Read the document from disk.

        A missing document loads as empty so every key falls back to its
        default.

        Returns:
            The store itself.

        Raises:
            ContextError: If the document cannot be read or parsed.
        """
        if not self.path.exists():
            logger.debug(f"No context at {self.path}, using defaults")
            self._data = {}
            return self

        try:
            raw = yaml.safe_load(self.path.read_text())
        except (OSError, yaml.YAMLError) as e:
            raise ContextError(f"Cannot read context {self.path}: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ContextError(f"Context {self.path} is not a mapping")

        logger.debug(f"Loaded context from {self.path}")
        self._data = raw
        return self

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dotted key."""
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key: str, value: Any) -> None:
        """Set a value by dotted key, creating intermediate maps."""
        parts = key.split(".")
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value

    def flush(self) -> None:
        """Overwrite the document on disk with the current values.

        Raises:
            ContextError: If the document cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(yaml.safe_dump(self._data, default_flow_style=False, sort_keys=False))
        except OSError as e:
            raise ContextError(f"Cannot write context {self.path}: {e}") from e

        logger.debug(f"Wrote context to {self.path}")

