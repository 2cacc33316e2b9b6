"""Derive folder/file children of a logical location from flat records.

There is no stored hierarchy: every call rescans the record set, so a
replaced collection can never leave a stale tree behind.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from ..catalog.types import Record
from .normalize import (
    collation_key,
    join_segments,
    normalize,
    normalized_segments,
    segments_start_with,
    split_segments,
)
from .types import FileNode, FolderNode, Listing


def folder_sort_key(folder: FolderNode) -> tuple[str, str]:
    return collation_key(folder.path)


def file_sort_key(node: FileNode) -> tuple[tuple[str, str], str]:
    return (collation_key(node.name), node.id)


def sorted_listing(folders: Iterable[FolderNode], files: Iterable[FileNode]) -> Listing:
    """Order folders by path and files by display name, folders first."""
    return Listing(
        folders=sorted(folders, key=folder_sort_key),
        files=sorted(files, key=file_sort_key),
    )


def records_under(records: Iterable[Record], target_path: str) -> list[Record]:
    """Return records whose path starts segment-wise with ``target_path``."""
    target = normalized_segments(target_path)
    return [record for record in records if segments_start_with(normalized_segments(record.path), target)]


def list_children(records: Sequence[Record], target_path: str) -> Listing:
    """List direct folder and file children of ``target_path``.

    A record whose path has exactly the target's depth is a file child. A
    deeper record contributes the folder one level below the target; each
    folder is emitted once, spelled the way the first record that reached it
    spells it. An empty ``target_path`` lists root-level folders.
    """
    target = normalized_segments(target_path)
    depth = len(target)

    folders: dict[str, FolderNode] = {}
    files: list[FileNode] = []
    for record in records:
        raw_segments = split_segments(record.path)
        segments = [normalize(segment) for segment in raw_segments]
        if not segments_start_with(segments, target):
            continue
        if len(segments) == depth:
            if depth:
                files.append(FileNode(record))
            continue
        key = "/".join(segments[: depth + 1])
        if key not in folders:
            folders[key] = FolderNode(join_segments(raw_segments[: depth + 1]))

    logger.debug(
        "Listed {!r}: {} folders, {} files from {} records",
        target_path,
        len(folders),
        len(files),
        len(records),
    )
    return sorted_listing(folders.values(), files)


def list_roots(records: Sequence[Record], root_names: Sequence[str]) -> list[FolderNode]:
    """Return the known roots that hold at least one record, in registry order.

    Records under an undeclared first segment never surface here.
    """
    present = {normalize(record.root_name) for record in records if record.root_name}
    seen: set[str] = set()
    roots: list[FolderNode] = []
    for name in root_names:
        key = normalize(name)
        if key in present and key not in seen:
            seen.add(key)
            roots.append(FolderNode(name))
    return roots
