"""Resolution of invocation parameters into a :class:`SearchRequest`."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import UsageError
from .paths import Vault, expand_home
from .registry import get_defaults

logger = logging.getLogger(__name__)


class SearchMode(enum.Enum):
    FILENAME = "filename"
    CONTENT = "content"


@dataclass(frozen=True)
class SearchRequest:
    """A single search, fully resolved."""

    term: str
    vault: Vault
    mode: SearchMode = SearchMode.FILENAME
    ignore_case: bool = True

    @property
    def directory(self) -> Path:
        return self.vault.root


def join_terms(words: Sequence[str]) -> str:
    """Join the trailing invocation words into one search term."""

    if not words:
        raise UsageError("a search term is required")
    return " ".join(words)


def resolve_request(
    words: Sequence[str],
    vault_name: str = "",
    vault_path: str = "",
    *,
    mode: SearchMode = SearchMode.FILENAME,
    ignore_case: bool = True,
    registry_path: Path | None = None,
) -> SearchRequest:
    """Build a :class:`SearchRequest`, falling back to the vault registry.

    The registry at *registry_path* is read only when the vault name or path is
    still empty. Passing ``None`` disables the lookup.
    """

    term = join_terms(words)

    if (not vault_name or not vault_path) and registry_path is not None:
        default_name, default_path = get_defaults(registry_path)
        vault_name = vault_name or default_name
        vault_path = vault_path or default_path

    if not vault_name:
        raise UsageError("no vault name given and no open vault found")
    if not vault_path:
        raise UsageError("no vault path given and no open vault found")

    vault = Vault(name=vault_name, root=expand_home(vault_path))
    logger.debug("Searching %s (%s) for %r in %s mode", vault.name, vault.root, term, mode.value)
    return SearchRequest(term=term, vault=vault, mode=mode, ignore_case=ignore_case)
