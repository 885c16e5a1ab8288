"""Git integration for vc."""

from vc.git.picker import PickerError, skim_pipe
from vc.git.repository import GitError, GitRepository, format_command, is_git_repository

__all__ = [
    "GitError",
    "GitRepository",
    "PickerError",
    "format_command",
    "is_git_repository",
    "skim_pipe",
]
