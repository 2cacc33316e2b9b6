"""Command-line front door for archivenav.

Loads a JSON catalog, positions a browser session from CLI options, and
prints one page of folder/file rows. Also converts TXT catalog exports (or
merges them into an existing catalog) and shows the recent-search history.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from .catalog import CatalogError, dump_records, load_records, merge_records, parse_txt_catalog
from .logging import setup_logging
from .runtime import PAGE_SIZE, BrowserSession, HistoryStore, ListingPage, RootRegistry
from .runtime.config import (
    ConfigStore,
    load_catalog_path,
    load_custom_roots,
    save_catalog_path,
    save_custom_roots,
)
from .search import SCOPE_GLOBAL

FOLDER_TAG = "[dir] "
FILE_TAG = "[file]"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def read_text(path: Path) -> str:
    for encoding in ("utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def render_listing(page: ListingPage, page_number: int = 1) -> str:
    """Format revealed rows, one per line, followed by a paging footer."""
    out: list[str] = []
    for item in page.items:
        tag = FOLDER_TAG if item.is_folder else FILE_TAG
        out.append(f"{tag} {item.label}  ({item.path})\n")
    shown = len(page.items)
    footer = f"{shown} of {page.total} shown"
    if page.has_more:
        footer += f"; more with --page {page_number + 1}"
    out.append(footer + "\n")
    return "".join(out)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse and search a flat audio catalog as a folder tree."
    )
    parser.add_argument(
        "catalog",
        nargs="?",
        default=None,
        help="JSON catalog file. Defaults to the last catalog opened.",
    )
    parser.add_argument("--root", default=None, help="Root to open (defaults to the first fixed root).")
    parser.add_argument("--path", default=None, help="Folder path to open, including its root segment.")
    parser.add_argument("--query", default=None, help="Search text; records the term in history.")
    parser.add_argument("--global", dest="global_scope", action="store_true", help="Search the whole catalog.")
    parser.add_argument(
        "--limit",
        type=_positive_int,
        default=PAGE_SIZE,
        help=f"Rows revealed per page (default: {PAGE_SIZE}).",
    )
    parser.add_argument("--page", type=_positive_int, default=1, help="Number of result pages to reveal.")
    parser.add_argument("--roots", action="store_true", help="List roots that hold records and exit.")
    parser.add_argument("--add-root", metavar="NAME", default=None, help="Register a custom root and exit.")
    parser.add_argument(
        "--import-txt",
        metavar="FILE",
        default=None,
        help="Convert a TXT export to JSON on stdout, or merge it into the given catalog.",
    )
    parser.add_argument("--root-context", default="Importado", help="Root name for --import-txt records.")
    parser.add_argument("--history", action="store_true", help="Print recent searches and exit.")
    parser.add_argument("--clear-history", action="store_true", help="Forget recent searches and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def main(default_catalog: Path | None = None) -> None:
    """Parse CLI arguments and print the requested listing.

    ``default_catalog`` is primarily for tests; when omitted the catalog path
    saved in the config is used.
    """
    args = _build_parser().parse_args()
    setup_logging(args.verbose)

    if args.import_txt is not None:
        source = Path(args.import_txt)
        if not source.exists():
            raise SystemExit(f"Path not found: {source}")
        records = parse_txt_catalog(read_text(source), args.root_context)
        logger.info("Imported {} records from {}", len(records), source)
        if args.catalog is None:
            sys.stdout.write(dump_records(records))
            return
        catalog_path = Path(args.catalog)
        try:
            current = load_records(catalog_path) if catalog_path.exists() else []
        except CatalogError as exc:
            raise SystemExit(str(exc)) from exc
        result = merge_records(current, records)
        catalog_path.write_text(dump_records(result.records), encoding="utf-8")
        sys.stdout.write(f"{catalog_path}: {result.updated} updated, {result.added} added\n")
        return

    history = HistoryStore(ConfigStore())
    if args.history or args.clear_history:
        history.activate()
        if args.clear_history:
            history.clear()
            return
        for item in history.items():
            sys.stdout.write(f"{item.term}\t{item.age_bucket}\n")
        return

    roots = RootRegistry(load_custom_roots())
    if args.add_root is not None:
        added = roots.add_custom(args.add_root)
        if added is None:
            raise SystemExit(f"Cannot add root: {args.add_root!r}")
        save_custom_roots(roots.custom)
        return

    catalog_path = Path(args.catalog) if args.catalog else (default_catalog or load_catalog_path())
    if catalog_path is None:
        raise SystemExit("No catalog given and none remembered.")
    try:
        records = load_records(catalog_path)
    except CatalogError as exc:
        raise SystemExit(str(exc)) from exc
    save_catalog_path(catalog_path.resolve())

    session = BrowserSession(records, roots=roots, history=history, page_size=args.limit)
    if args.roots:
        for folder in session.root_folders():
            sys.stdout.write(f"{FOLDER_TAG} {folder.name}\n")
        return

    if args.root is not None:
        session.select_root(roots.find(args.root) or args.root)
    if args.path is not None:
        session.navigate_into(args.path)
    if args.query is not None:
        session.focus_search()
        session.type_query(args.query)
        session.commit_search()
        if args.global_scope:
            session.set_scope(SCOPE_GLOBAL)

    for _ in range(args.page - 1):
        if not session.load_more():
            break
    sys.stdout.write(render_listing(session.listing(), args.page))


if __name__ == "__main__":
    main()
