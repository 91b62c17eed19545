"""Reading the Obsidian vault registry (``obsidian.json``)."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import AmbiguousConfigError, ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
    """One vault known to the Obsidian application."""

    identifier: str
    path: str
    ts: int = 0
    open: bool = False


def parse_registry(raw: Mapping[str, Any], source: Path) -> dict[str, RegistryEntry]:
    """Parse the decoded registry document into entries keyed by vault identifier."""

    vaults = raw.get("vaults", {})
    if not isinstance(vaults, Mapping):
        raise ConfigError(f"Could not parse {source}: 'vaults' is not an object")

    entries: dict[str, RegistryEntry] = {}
    for identifier, data in vaults.items():
        if not isinstance(data, Mapping):
            raise ConfigError(f"Could not parse {source}: vault {identifier!r} is not an object")
        try:
            ts = int(data.get("ts", 0) or 0)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Could not parse {source}: vault {identifier!r} has bad ts") from exc
        path = data.get("path", "")
        if not isinstance(path, str):
            raise ConfigError(f"Could not parse {source}: vault {identifier!r} has bad path")
        entries[identifier] = RegistryEntry(
            identifier=identifier,
            path=path,
            ts=ts,
            open=data.get("open") is True,
        )
    return entries


def load_registry(path: Path) -> dict[str, RegistryEntry]:
    """Load the registry file at *path*."""

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"could not open {path}") from exc

    try:
        raw = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Could not parse {path}: {content}") from exc

    if not isinstance(raw, Mapping):
        raise ConfigError(f"Could not parse {path}: {content}")
    return parse_registry(raw, path)


def open_vault(entries: Mapping[str, RegistryEntry]) -> RegistryEntry | None:
    """Return the single vault marked open, or ``None`` when no vault is open."""

    candidates = [entry for entry in entries.values() if entry.open]
    if len(candidates) > 1:
        names = ", ".join(sorted(entry.identifier for entry in candidates))
        raise AmbiguousConfigError(f"More than one vault is open: {names}")
    if not candidates:
        return None
    return candidates[0]


def get_defaults(path: Path) -> tuple[str, str]:
    """Return ``(vault identifier, vault path)`` of the open vault in the registry at *path*.

    Both values are empty strings when no vault is open.
    """

    entry = open_vault(load_registry(path))
    if entry is None:
        logger.debug("No open vault in %s", path)
        return "", ""
    logger.debug("Using open vault %s at %s", entry.identifier, entry.path)
    return entry.identifier, entry.path
