"""Virtual folder tree derived from flat, path-tagged records.

Defines folder/file node types, text normalization for matching, and the
listing of direct children under a logical location.
"""

from __future__ import annotations

from .listing import list_children, list_roots, records_under, sorted_listing
from .normalize import (
    collation_key,
    normalize,
    normalized_path_key,
    path_starts_with,
    split_segments,
)
from .types import FILE_KIND, FOLDER_KIND, FileNode, FolderNode, Listing, ListingItem

__all__ = [
    "FILE_KIND",
    "FOLDER_KIND",
    "FileNode",
    "FolderNode",
    "Listing",
    "ListingItem",
    "collation_key",
    "list_children",
    "list_roots",
    "normalize",
    "normalized_path_key",
    "path_starts_with",
    "records_under",
    "sorted_listing",
    "split_segments",
]
