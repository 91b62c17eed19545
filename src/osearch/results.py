"""Shaping raw search tool output into Alfred script filter results."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .errors import ParseError
from .paths import note_title, obsidian_url

logger = logging.getLogger(__name__)

LEAD_CONTEXT = 10
BREAK_WINDOW = 5
# An escaped ampersand not preceded by an escaping backslash.
ESCAPED_AMPERSAND = re.compile(r"(?<!\\)((?:\\\\)*)\\u0026")


@dataclass(frozen=True)
class ResultItem:
    """One row of the launcher's result list."""

    title: str
    arg: str
    subtitle: str = ""
    type: str = "default"

    @classmethod
    def for_note(cls, path: str, vault: str, subtitle: str = "") -> ResultItem:
        return cls(title=note_title(path), arg=obsidian_url(path, vault), subtitle=subtitle)

    def as_dict(self) -> dict[str, str]:
        return {
            "type": self.type,
            "title": self.title,
            "subtitle": self.subtitle,
            "arg": self.arg,
        }


@dataclass(frozen=True)
class ContentMatch:
    """A ``match`` record from the ``rg --json`` stream."""

    path: str
    line: str


def fruncate(
    line: str,
    term: str,
    lead: int = LEAD_CONTEXT,
    window: int = BREAK_WINDOW,
    ignore_case: bool = False,
) -> str:
    """Truncate *line* from the front so it starts shortly before *term*.

    The cut is placed *lead* characters before the first occurrence of *term*.
    A space up to *window* characters before the cut is preferred so a word is
    not split. Lines where the term starts within *lead* characters, or does
    not occur at all, are returned unchanged.
    """

    if ignore_case:
        found = re.search(re.escape(term), line, re.IGNORECASE)
        index = found.start() if found else -1
    else:
        index = line.find(term)
    if index <= lead:
        return line

    cut = index - lead
    break_index = line.rfind(" ", 0, cut)
    if break_index > 0 and break_index >= cut - window:
        return line[break_index + 1 :]
    return line[cut:]


def parse_file_list(raw: bytes, vault: str) -> list[ResultItem]:
    """Build results from the NUL separated output of ``fd -0``."""

    items = []
    for token in raw.split(b"\0"):
        if not token:
            continue
        title = note_title(token.decode("utf-8", errors="replace"))
        items.append(ResultItem(title=title, arg=obsidian_url(token, vault)))
    return items


def _decode_line(line: str) -> dict[str, Any]:
    try:
        record = json.loads(line)
    except json.JSONDecodeError as exc:
        raise ParseError(f"could not parse {line}") from exc
    if not isinstance(record, dict):
        raise ParseError(f"could not parse {line}")
    return record


def _field(record: dict[str, Any], key: str, line: str) -> dict[str, Any]:
    value = record.get(key) or {}
    if not isinstance(value, dict):
        raise ParseError(f"could not parse {line}")
    return value


def iter_matches(raw: str) -> Iterator[ContentMatch]:
    """Yield the ``match`` records of an ``rg --json`` stream in order."""

    for line in raw.split("\n"):
        if not line.startswith("{"):
            continue
        record = _decode_line(line)
        if record.get("type") != "match":
            continue
        data = _field(record, "data", line)
        path = _field(data, "path", line).get("text", "")
        text = _field(data, "lines", line).get("text", "")
        if not isinstance(path, str) or not isinstance(text, str):
            raise ParseError(f"could not parse {line}")
        yield ContentMatch(path=path, line=text.rstrip("\r\n"))


def parse_match_stream(
    raw: str, term: str, vault: str, ignore_case: bool = False
) -> list[ResultItem]:
    """Build one result per matching file, keeping the first matching line."""

    items = []
    seen: set[str] = set()
    for match in iter_matches(raw):
        if match.path in seen:
            continue
        subtitle = fruncate(match.line, term, ignore_case=ignore_case)
        items.append(ResultItem.for_note(match.path, vault, subtitle))
        seen.add(match.path)
    logger.debug("%d matching files", len(items))
    return items


def unescape_ampersands(rendered: str) -> str:
    """Turn \\u0026 escapes in serialized JSON back into a literal ``&``."""

    return ESCAPED_AMPERSAND.sub(r"\1&", rendered)


def render_results(items: Iterable[ResultItem]) -> str:
    """Serialize *items* as the Alfred script filter document."""

    document = {"items": [item.as_dict() for item in items]}
    rendered = json.dumps(document, indent=2, ensure_ascii=False)
    return unescape_ampersands(rendered)
