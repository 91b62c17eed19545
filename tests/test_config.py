from pathlib import Path

from osearch.config import default_registry_path, load_settings


def test_default_registry_path_macos(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    expected = tmp_path / "Library" / "Application Support" / "obsidian" / "obsidian.json"
    assert default_registry_path("darwin") == expected


def test_default_registry_path_linux(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_registry_path("linux") == tmp_path / ".config" / "obsidian" / "obsidian.json"


def test_default_registry_path_windows(monkeypatch):
    monkeypatch.setenv("APPDATA", "/appdata")
    assert default_registry_path("win32") == Path("/appdata") / "obsidian" / "obsidian.json"


def test_load_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("OBSIDIAN_CONFIG", "~/obsidian.json")
    monkeypatch.setenv("OSEARCH_FD", "/usr/local/bin/fd")
    monkeypatch.setenv("OSEARCH_RG", "/usr/local/bin/rg")
    monkeypatch.setenv("OSEARCH_VAULT", "work")
    monkeypatch.setenv("OSEARCH_VAULT_PATH", "~/vaults/work")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.registry_path == tmp_path / "obsidian.json"
    assert settings.fd_command == "/usr/local/bin/fd"
    assert settings.rg_command == "/usr/local/bin/rg"
    assert settings.vault_name == "work"
    assert settings.vault_path == "~/vaults/work"
    assert settings.log_level == "DEBUG"


def test_load_settings_defaults(monkeypatch):
    for name in ("OBSIDIAN_CONFIG", "OSEARCH_FD", "OSEARCH_RG", "OSEARCH_VAULT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.registry_path == default_registry_path()
    assert settings.fd_command == "fd"
    assert settings.rg_command == "rg"
    assert settings.vault_name == ""
    assert settings.log_level == "WARNING"
