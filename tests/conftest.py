import re
from pathlib import Path
from typing import Optional

import pytest
import yaml

from vc.context.store import ContextError
from vc.git.repository import GitError

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def plain(s: str) -> str:
    return _ANSI_RE.sub("", s)


class MemoryStore:
    """In-memory context store keyed by dotted names."""

    def __init__(self, data: Optional[dict] = None, fail_flush: bool = False):
        self.data = dict(data or {})
        self.fail_flush = fail_flush
        self.flushes = 0

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        self.data[key] = value

    def flush(self):
        if self.fail_flush:
            raise ContextError("Cannot write context: disk full")
        self.flushes += 1


class FakeRepository:
    """Records git actions instead of running them."""

    def __init__(
        self,
        head: str = "main",
        branches: Optional[list] = None,
        remote: str = "origin",
        fail_on: tuple = (),
    ):
        self.head = head
        self.branches = branches if branches is not None else ["* main", "  feature/x"]
        self.remote = remote
        self.fail_on = fail_on
        self.calls: list = []

    def branch(self):
        self.calls.append(("branch",))
        if "branch" in self.fail_on:
            raise GitError("Git command failed: not a git repository")
        return self.head, list(self.branches)

    def current_branch(self):
        head, _ = self.branch()
        return head

    def all_branches(self):
        _, branches = self.branch()
        return branches

    def remote_name(self):
        return self.remote

    def tag(self, name):
        self.calls.append(("tag", name))
        if "tag" in self.fail_on:
            raise GitError(f"git tag {name} exited with status 128")

    def push(self, remote, ref, options=()):
        self.calls.append(("push", remote, ref, tuple(options)))
        if "push" in self.fail_on:
            raise GitError(f"git push {remote} {ref} exited with status 1")

    def actions(self) -> list:
        return [call for call in self.calls if call[0] in ("tag", "push")]


def stored_version(**overrides) -> dict:
    data = {
        "dry_mode": True,
        "remote": "origin",
        "current.tag.revision": 1,
        "current.tag.version.major": 0,
        "current.tag.version.minor": 1,
        "current.tag.version.patch": 0,
        "current.tag.release.name": "alpha",
    }
    data.update(overrides)
    return data


@pytest.fixture
def memory_store():
    return MemoryStore(stored_version())


@pytest.fixture
def fake_repository():
    return FakeRepository()


@pytest.fixture
def repo_dir(tmp_path: Path, monkeypatch) -> Path:
    """A directory that looks like a git working tree, used as cwd."""
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("VC_CONTEXT", raising=False)
    return tmp_path


@pytest.fixture
def patched_repository(monkeypatch, fake_repository):
    """Route every GitRepository the commands build to the fake."""

    def factory(repo_path, remote="origin"):
        fake_repository.remote = remote
        return fake_repository

    monkeypatch.setattr("vc.cli.commands.tag.GitRepository", factory)
    monkeypatch.setattr("vc.cli.commands.push.GitRepository", factory)
    return fake_repository


def write_context(path: Path, document: dict) -> None:
    path.write_text(yaml.safe_dump(document))


def read_context(path: Path) -> dict:
    return yaml.safe_load(path.read_text())
