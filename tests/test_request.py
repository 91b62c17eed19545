import json
from pathlib import Path

import pytest

from osearch.errors import UsageError
from osearch.request import SearchMode, join_terms, resolve_request


def _registry(tmp_path: Path, vaults: dict) -> Path:
    path = tmp_path / "obsidian.json"
    path.write_text(json.dumps({"vaults": vaults}), encoding="utf-8")
    return path


def test_join_terms():
    assert join_terms(["quick", "brown", "fox"]) == "quick brown fox"


def test_join_terms_requires_a_word():
    with pytest.raises(UsageError):
        join_terms([])


def test_explicit_vault_skips_registry(tmp_path):
    request = resolve_request(
        ["plan"], "work", "/vaults/work", registry_path=tmp_path / "missing.json"
    )
    assert request.vault.name == "work"
    assert request.directory == Path("/vaults/work")
    assert request.mode is SearchMode.FILENAME
    assert request.term == "plan"


def test_defaults_come_from_open_vault(tmp_path):
    registry = _registry(tmp_path, {"work": {"path": "/vaults/work", "ts": 1, "open": True}})
    request = resolve_request(["plan"], registry_path=registry)
    assert request.directory == Path("/vaults/work")
    assert request.vault.name == "work"


def test_explicit_name_keeps_registry_path(tmp_path):
    registry = _registry(tmp_path, {"abc123": {"path": "/vaults/work", "open": True}})
    request = resolve_request(["plan"], "Work", registry_path=registry)
    assert request.vault.name == "Work"
    assert request.directory == Path("/vaults/work")


def test_vault_path_is_expanded(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    request = resolve_request(["plan"], "work", "~/vaults/work", mode=SearchMode.CONTENT)
    assert request.directory == tmp_path / "vaults" / "work"
    assert request.mode is SearchMode.CONTENT


def test_missing_vault_name_without_registry():
    with pytest.raises(UsageError, match="vault name"):
        resolve_request(["plan"], "", "/vaults/work")


def test_missing_vault_path_without_open_vault(tmp_path):
    registry = _registry(tmp_path, {"work": {"path": "/vaults/work", "open": False}})
    with pytest.raises(UsageError, match="vault path"):
        resolve_request(["plan"], "work", registry_path=registry)
