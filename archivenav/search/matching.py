"""Free-text matching over record names and the folders along record paths."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from ..catalog.types import Record
from ..tree_model.listing import sorted_listing
from ..tree_model.normalize import normalize, normalized_segments, segments_start_with, split_segments
from ..tree_model.types import FileNode, FolderNode, Listing

SCOPE_LOCAL = "local"
SCOPE_GLOBAL = "global"
SCOPES = (SCOPE_LOCAL, SCOPE_GLOBAL)


def record_matches(record: Record, needle: str) -> bool:
    """Substring test of a normalized needle against name and searchable fields."""
    if needle in normalize(record.display_name):
        return True
    return any(needle in normalize(value) for value in record.searchable_fields)


def search(
    records: Sequence[Record],
    query: str,
    scope: str,
    target_path: str,
) -> Listing:
    """Match ``query`` against files and folders in the scoped record pool.

    Local scope restricts the pool, and every folder match, to paths under
    ``target_path``; global scope ignores the target. Root segments are never
    reported as folder matches. A folder reached by several records is kept
    once, spelled as in the first record scanned.
    """
    needle = normalize(query.strip())
    if not needle:
        return Listing()
    if scope not in SCOPES:
        raise ValueError(f"unknown search scope: {scope!r}")

    local = scope == SCOPE_LOCAL
    target = normalized_segments(target_path) if local else []

    files: list[FileNode] = []
    folders: dict[str, FolderNode] = {}
    pool_size = 0
    for record in records:
        raw_segments = split_segments(record.path)
        segments = [normalize(segment) for segment in raw_segments]
        if local and not segments_start_with(segments, target):
            continue
        pool_size += 1

        if record_matches(record, needle):
            files.append(FileNode(record))

        for idx in range(1, len(segments)):
            if needle not in segments[idx]:
                continue
            prefix = segments[: idx + 1]
            if local and not segments_start_with(prefix, target):
                continue
            key = "/".join(prefix)
            if key not in folders:
                folders[key] = FolderNode("/".join(raw_segments[: idx + 1]))

    logger.debug(
        "Search {!r} ({}) at {!r}: {} folders, {} files from pool of {}",
        query,
        scope,
        target_path,
        len(folders),
        len(files),
        pool_size,
    )
    return sorted_listing(folders.values(), files)
