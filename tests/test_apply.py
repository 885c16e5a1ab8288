import pytest

from tests.conftest import FakeRepository, MemoryStore, stored_version
from vc.context.store import ContextError
from vc.models.context import ReleaseState
from vc.release.apply import STAGE_PUSH, STAGE_TAG, ApplyError, apply_release
from vc.release.version import Version

TARGET = Version(0, 1, 0, "alpha", 2)


def _state(store: MemoryStore) -> ReleaseState:
    return ReleaseState.from_store(store)


def test_dry_run_prints_commands_and_persists(memory_store, fake_repository, capsys):
    updated = apply_release(TARGET, _state(memory_store), memory_store, fake_repository, dry_run=True)

    out = capsys.readouterr().out
    assert "dry mode" in out
    assert "vc switch dry" in out
    assert "git tag v0.1.0-alpha.2" in out
    assert "git push origin v0.1.0-alpha.2" in out

    assert fake_repository.actions() == []
    assert memory_store.flushes == 1
    assert memory_store.data["current.tag.revision"] == 2
    assert updated.version == TARGET


def test_run_tags_then_pushes_then_persists(memory_store, fake_repository, capsys):
    apply_release(TARGET, _state(memory_store), memory_store, fake_repository, dry_run=False)

    assert fake_repository.actions() == [
        ("tag", "v0.1.0-alpha.2"),
        ("push", "origin", "v0.1.0-alpha.2", ()),
    ]
    assert memory_store.flushes == 1
    assert memory_store.data["current.tag.revision"] == 2
    assert "dry mode" not in capsys.readouterr().out


def test_push_uses_configured_remote(memory_store):
    repository = FakeRepository(remote="upstream")

    apply_release(TARGET, _state(memory_store), memory_store, repository, dry_run=False)

    assert ("push", "upstream", "v0.1.0-alpha.2", ()) in repository.actions()


def test_tag_failure_skips_push_and_persistence(memory_store):
    repository = FakeRepository(fail_on=("tag",))

    with pytest.raises(ApplyError) as excinfo:
        apply_release(TARGET, _state(memory_store), memory_store, repository, dry_run=False)

    assert excinfo.value.stage == STAGE_TAG
    assert str(excinfo.value).startswith("run tag: ")
    assert repository.actions() == [("tag", "v0.1.0-alpha.2")]
    assert memory_store.flushes == 0
    assert memory_store.data == stored_version()


def test_push_failure_leaves_tag_and_skips_persistence(memory_store):
    repository = FakeRepository(fail_on=("push",))

    with pytest.raises(ApplyError) as excinfo:
        apply_release(TARGET, _state(memory_store), memory_store, repository, dry_run=False)

    assert excinfo.value.stage == STAGE_PUSH
    assert [call[0] for call in repository.actions()] == ["tag", "push"]
    assert memory_store.flushes == 0


def test_flush_failure_surfaces_after_apply(fake_repository):
    store = MemoryStore(stored_version(), fail_flush=True)

    with pytest.raises(ContextError):
        apply_release(TARGET, _state(store), store, fake_repository, dry_run=False)

    assert len(fake_repository.actions()) == 2
