"""Environment driven settings."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .paths import expand_home

load_dotenv()

MACOS_REGISTRY = "~/Library/Application Support/obsidian/obsidian.json"
LINUX_REGISTRY = "~/.config/obsidian/obsidian.json"


@dataclass(slots=True)
class Settings:
    registry_path: Path
    fd_command: str
    rg_command: str
    vault_name: str
    vault_path: str
    log_level: str


def default_registry_path(platform: str | None = None) -> Path:
    """Return where Obsidian keeps its vault registry on *platform*."""

    platform = platform or sys.platform
    if platform == "darwin":
        return expand_home(MACOS_REGISTRY)
    if platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "obsidian" / "obsidian.json"
        return Path.home() / "AppData" / "Roaming" / "obsidian" / "obsidian.json"
    return expand_home(LINUX_REGISTRY)


def load_settings() -> Settings:
    """Load configuration from environment variables."""

    raw_registry = os.environ.get("OBSIDIAN_CONFIG", "")
    registry_path = expand_home(raw_registry) if raw_registry else default_registry_path()

    fd_command = os.environ.get("OSEARCH_FD", "fd")
    rg_command = os.environ.get("OSEARCH_RG", "rg")
    vault_name = os.environ.get("OSEARCH_VAULT", "")
    vault_path = os.environ.get("OSEARCH_VAULT_PATH", "")

    # stdout carries the result document; logging.basicConfig writes to stderr.
    log_level = os.environ.get("LOG_LEVEL", "warning").upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.WARNING))

    return Settings(
        registry_path=registry_path,
        fd_command=fd_command,
        rg_command=rg_command,
        vault_name=vault_name,
        vault_path=vault_path,
        log_level=log_level,
    )
