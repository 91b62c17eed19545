"""Utilities for working with vault paths and note links."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from .errors import DirectoryError

MARKDOWN_SUFFIX = ".md"
OBSIDIAN_URL = "obsidian://open?vault={vault}&file={file}"


@dataclass(frozen=True)
class Vault:
    """Container representing a vault root."""

    name: str
    root: Path


def expand_home(path: str) -> Path:
    """Expand a leading ``~/`` in *path* to the invoking user's home directory."""

    if path.startswith("~/"):
        return Path.home() / path[2:]
    return Path(path)


def ensure_directory(path: Path) -> Path:
    """Ensure *path* is an existing directory that can be searched."""

    if not path.is_dir():
        raise DirectoryError(f"no such directory {path}")
    if not os.access(path, os.R_OK | os.X_OK):
        raise DirectoryError(f"directory is not accessible {path}")
    return path


def note_title(path: str) -> str:
    """Return the base filename of *path* without a trailing ``.md``."""

    name = Path(path).name
    if name.endswith(MARKDOWN_SUFFIX):
        return name[: -len(MARKDOWN_SUFFIX)]
    return name


def obsidian_url(path: str | bytes, vault: str) -> str:
    """Build the ``obsidian://open`` link for the note at *path* in *vault*."""

    return OBSIDIAN_URL.format(vault=quote(vault, safe=""), file=quote(path, safe=""))
