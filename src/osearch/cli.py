"""Command line entry point producing Alfred script filter JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .config import Settings, load_settings
from .errors import OsearchError, UsageError
from .paths import expand_home
from .request import SearchMode, SearchRequest, resolve_request
from .results import render_results
from .search import search

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osearch",
        description="Search an Obsidian vault and print Alfred script filter results.",
    )
    parser.add_argument("--grep", action="store_true", help="search file contents")
    parser.add_argument("--vault", default="", help="name of vault to search")
    parser.add_argument("--path", default="", help="path to vault directory")
    parser.add_argument(
        "--ignore-case",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="match contents case-insensitively (with --grep)",
    )
    parser.add_argument("--registry", default="", help="path to Obsidian's obsidian.json")
    parser.add_argument(
        "--no-registry",
        action="store_true",
        help="never fall back to the open vault from obsidian.json",
    )
    # Everything from the first plain word on is the term, even words starting with "-".
    parser.add_argument("term", nargs=argparse.REMAINDER, help="search term")
    return parser


def request_from_args(args: argparse.Namespace, settings: Settings) -> SearchRequest:
    """Resolve parsed arguments, environment defaults and the vault registry."""

    if args.no_registry:
        registry_path = None
    elif args.registry:
        registry_path = expand_home(args.registry)
    else:
        registry_path = settings.registry_path

    return resolve_request(
        args.term,
        args.vault or settings.vault_name,
        args.path or settings.vault_path,
        mode=SearchMode.CONTENT if args.grep else SearchMode.FILENAME,
        ignore_case=args.ignore_case,
        registry_path=registry_path,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Run one search and print its results."""

    settings = load_settings()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        request = request_from_args(args, settings)
        items = search(request, fd=settings.fd_command, rg=settings.rg_command)
    except UsageError as exc:
        logger.error("%s", exc)
        parser.print_usage(sys.stderr)
        raise SystemExit(exc.exit_code) from exc
    except OsearchError as exc:
        logger.error("%s", exc)
        raise SystemExit(exc.exit_code) from exc

    print(render_results(items))


if __name__ == "__main__":
    main()
