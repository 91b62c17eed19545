"""Error types raised while resolving, running and parsing a search."""

from __future__ import annotations


class OsearchError(RuntimeError):
    """Base class for failures that end an invocation."""

    exit_code = 1


class UsageError(OsearchError):
    """Raised when a required input is missing from the invocation."""

    exit_code = 2


class ConfigError(OsearchError):
    """Raised when the Obsidian vault registry cannot be used."""


class AmbiguousConfigError(ConfigError):
    """Raised when more than one vault is marked open in the registry."""


class DirectoryError(OsearchError):
    """Raised when the vault directory is missing or inaccessible."""


class ExecutionError(OsearchError):
    """Raised when an external search tool fails."""


class ParseError(OsearchError):
    """Raised when the content search stream holds a malformed line."""
