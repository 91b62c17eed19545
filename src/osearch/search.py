"""Search utilities delegating to ``fd`` and ``rg``."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .errors import ExecutionError
from .paths import ensure_directory
from .request import SearchMode, SearchRequest
from .results import ResultItem, parse_file_list, parse_match_stream

logger = logging.getLogger(__name__)


def fd_command(term: str, executable: str = "fd") -> list[str]:
    return [executable, "-0", "--type=f", "--glob", "--", term]


def rg_command(term: str, ignore_case: bool = True, executable: str = "rg") -> list[str]:
    command = [executable, "--json"]
    if ignore_case:
        command.append("--ignore-case")
    command.extend(["--sortr", "modified", "--", term])
    return command


def run_fd(term: str, directory: Path, executable: str = "fd") -> bytes:
    """Return the raw ``fd`` output for *term* run inside *directory*."""

    command = fd_command(term, executable)
    logger.debug("Running %s in %s", command, directory)
    try:
        completed = subprocess.run(
            command, cwd=directory, stdin=subprocess.DEVNULL, capture_output=True, check=False
        )
    except OSError as exc:
        raise ExecutionError(f"could not run {executable}: {exc}") from exc
    if completed.returncode != 0:
        stderr = completed.stderr.decode("utf-8", errors="replace").strip()
        raise ExecutionError(f"{executable} exited with status {completed.returncode}: {stderr}")
    return completed.stdout


def run_rg(term: str, directory: Path, ignore_case: bool = True, executable: str = "rg") -> str:
    """Return the raw ``rg --json`` output for *term* run inside *directory*.

    A non-zero exit status is not an error: ``rg`` exits with 1 when nothing
    matched. If the process cannot be started at all the output is empty.
    """

    command = rg_command(term, ignore_case, executable)
    logger.debug("Running %s in %s", command, directory)
    try:
        completed = subprocess.run(
            command, cwd=directory, stdin=subprocess.DEVNULL, capture_output=True, check=False
        )
    except OSError as exc:
        logger.warning("could not run %s: %s", executable, exc)
        return ""
    return completed.stdout.decode("utf-8", errors="replace")


def find_matching_files(
    term: str, directory: Path, vault: str, executable: str = "fd"
) -> list[ResultItem]:
    """Search file names under *directory* with the glob *term*."""

    ensure_directory(directory)
    return parse_file_list(run_fd(term, directory, executable), vault)


def grep_matching_files(
    term: str,
    directory: Path,
    vault: str,
    ignore_case: bool = True,
    executable: str = "rg",
) -> list[ResultItem]:
    """Search file contents under *directory*, one result per matching file."""

    ensure_directory(directory)
    raw = run_rg(term, directory, ignore_case, executable)
    return parse_match_stream(raw, term, vault, ignore_case=ignore_case)


def search(request: SearchRequest, fd: str = "fd", rg: str = "rg") -> list[ResultItem]:
    """Run *request* in the mode it asks for."""

    if request.mode is SearchMode.CONTENT:
        return grep_matching_files(
            request.term, request.directory, request.vault.name, request.ignore_case, rg
        )
    return find_matching_files(request.term, request.directory, request.vault.name, fd)
