from pathlib import Path

import pytest

from tests.conftest import read_context
from vc.context.store import ContextError, ContextStore, context_path


def test_missing_document_loads_empty(tmp_path: Path):
    store = ContextStore(tmp_path / ".vc.yaml").load()

    assert not store.exists
    assert store.get("dry_mode") is None
    assert store.get("dry_mode", True) is True


def test_dotted_keys_map_to_nested_document(tmp_path: Path):
    path = tmp_path / ".vc.yaml"
    store = ContextStore(path).load()

    store.set("remote", "upstream")
    store.set("current.tag.version.major", 2)
    store.set("current.tag.revision", 5)
    store.flush()

    assert read_context(path) == {
        "remote": "upstream",
        "current": {"tag": {"version": {"major": 2}, "revision": 5}},
    }


def test_reload_reads_flushed_values(tmp_path: Path):
    path = tmp_path / ".vc.yaml"
    store = ContextStore(path).load()
    store.set("current.tag.release.name", "beta")
    store.flush()

    reloaded = ContextStore(path).load()

    assert reloaded.exists
    assert reloaded.get("current.tag.release.name") == "beta"
    assert reloaded.get("current.tag.release.other") is None


def test_set_replaces_scalar_with_map(tmp_path: Path):
    store = ContextStore(tmp_path / ".vc.yaml").load()
    store.set("current", "scalar")
    store.set("current.tag.revision", 1)

    assert store.get("current.tag.revision") == 1


def test_malformed_document_is_fatal(tmp_path: Path):
    path = tmp_path / ".vc.yaml"
    path.write_text("dry_mode: [unclosed\n")

    with pytest.raises(ContextError):
        ContextStore(path).load()


def test_non_mapping_document_is_fatal(tmp_path: Path):
    path = tmp_path / ".vc.yaml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ContextError, match="not a mapping"):
        ContextStore(path).load()


def test_empty_document_loads_empty(tmp_path: Path):
    path = tmp_path / ".vc.yaml"
    path.write_text("")

    assert ContextStore(path).load().get("remote") is None


def test_flush_failure_is_context_error(tmp_path: Path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    store = ContextStore(blocker / ".vc.yaml")
    store.set("remote", "origin")

    with pytest.raises(ContextError):
        store.flush()


def test_context_path_defaults_to_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("VC_CONTEXT", raising=False)
    assert context_path(tmp_path) == tmp_path / ".vc.yaml"


def test_context_path_env_override(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("VC_CONTEXT", str(tmp_path / "elsewhere.yaml"))
    assert context_path(tmp_path) == tmp_path / "elsewhere.yaml"
