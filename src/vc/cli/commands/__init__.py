"""CLI commands for vc."""

from vc.cli.commands import (
    add,
    commit,
    init,
    push,
    status,
    switch,
    tag,
)

__all__ = [
    "add",
    "commit",
    "init",
    "push",
    "status",
    "switch",
    "tag",
]
