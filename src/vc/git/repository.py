"""Git lookups and actions used by vc commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Exception raised for git command failures."""

    pass


class GitRepository:
    """Runs git against a working directory.

    Lookups capture and parse git's line-oriented output. Actions run with
    inherited standard streams so git can prompt and report directly to the
    terminal.
    """

    def __init__(self, repo_path: Path, remote: str = "origin"):
        """Initialize the repository wrapper.

        Args:
            repo_path: Path to the working directory.
            remote: Remote that tags and branches are pushed to.
        """
        self.repo_path = repo_path
        self.remote = remote

    def _run_git(self, *args: str, check: bool = True) -> str:
        """Execute a git command and return its output.

        Args:
            *args: Git command arguments.
            check: Whether to raise on non-zero exit.

        Returns:
            Command stdout.

        Raises:
            GitError: If the command fails and check is True.
        """
        logger.debug(f"git {' '.join(args)}")
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=self.repo_path,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise GitError("git not found in PATH") from e

        if check and result.returncode != 0:
            raise GitError(f"Git command failed: {result.stderr.strip()}")

        return result.stdout.rstrip("\n")

    def _exec_git(self, *args: str) -> None:
        """Execute a git command attached to the terminal.

        Raises:
            GitError: If the command cannot start or exits non-zero.
        """
        logger.debug(f"git {' '.join(args)} (attached)")
        try:
            subprocess.run(["git", *args], cwd=self.repo_path, check=True)
        except FileNotFoundError as e:
            raise GitError("git not found in PATH") from e
        except subprocess.CalledProcessError as e:
            raise GitError(f"git {' '.join(args)} exited with status {e.returncode}") from e

    def branch(self) -> tuple[str, list[str]]:
        """Evaluate ``git branch``.

        Returns:
            The HEAD branch (empty if none is marked) and every line of the
            listing as printed by git.
        """
        output = self._run_git("branch")

        head = ""
        branches = []
        for line in output.split("\n"):
            if not line:
                continue
            if line.startswith("* "):
                head = line[2:]
            branches.append(line)

        return head, branches

    def current_branch(self) -> str:
        """Get the HEAD branch name."""
        head, _ = self.branch()
        return head

    def all_branches(self) -> list[str]:
        """Get the raw ``git branch`` listing."""
        _, branches = self.branch()
        return branches

    def remote_name(self) -> str:
        """Get the configured remote."""
        return self.remote

    def tag(self, name: str) -> None:
        """Create a lightweight tag at HEAD."""
        self._exec_git("tag", name)

    def push(self, remote: str, ref: str, options: Sequence[str] = ()) -> None:
        """Push a ref to a remote.

        Args:
            remote: Remote name.
            ref: Branch or tag to push.
            options: Push options, each passed as ``-o <option>``.
        """
        args = ["push"]
        for option in options:
            args.extend(["-o", option])
        args.extend([remote, ref])
        self._exec_git(*args)

    def run(self, *args: str) -> None:
        """Run an arbitrary git command attached to the terminal."""
        self._exec_git(*args)

    def output(self, *args: str, check: bool = True) -> str:
        """Run an arbitrary git command and capture its output."""
        return self._run_git(*args, check=check)


def format_command(*args: str) -> str:
    """Render a git command line for display."""
    return " ".join(["git", *args])


def is_git_repository(path: Optional[Path] = None) -> bool:
    """Check whether a directory is a git working tree root."""
    cwd = path or Path.cwd()
    return (cwd / ".git").exists() or (cwd / ".git").is_file()
