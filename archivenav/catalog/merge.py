"""Copy-on-replace helpers for combining and retagging record sets."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from loguru import logger

from ..tree_model.normalize import normalize, split_segments
from .types import Record


@dataclass(frozen=True)
class MergeResult:
    records: list[Record]
    updated: int
    added: int


def _same_track(existing: Record, incoming: Record) -> bool:
    """Same title, and either the same album or the same path (case-folded)."""
    if normalize(existing.display_name) != normalize(incoming.display_name):
        return False
    if existing.album and normalize(existing.album) == normalize(incoming.album):
        return True
    return normalize(existing.path) == normalize(incoming.path)


def merge_records(current: Sequence[Record], incoming: Sequence[Record]) -> MergeResult:
    """Fold ``incoming`` into a new list built from ``current``.

    A matching existing record is replaced by the incoming one but keeps its
    id so references held elsewhere stay valid. Unmatched incoming records are
    appended. ``current`` itself is never modified.
    """
    merged = list(current)
    updated = 0
    added = 0
    for record in incoming:
        for idx, existing in enumerate(merged):
            if _same_track(existing, record):
                merged[idx] = replace(record, id=existing.id)
                updated += 1
                break
        else:
            merged.append(record)
            added += 1
    logger.debug("Merged catalog: {} updated, {} added", updated, added)
    return MergeResult(records=merged, updated=updated, added=added)


def retag_root(records: Sequence[Record], old_name: str, new_name: str) -> list[Record]:
    """Return records with a leading ``old_name`` segment renamed to ``new_name``."""
    old_key = normalize(old_name)
    retagged: list[Record] = []
    for record in records:
        segments = split_segments(record.path)
        if segments and normalize(segments[0]) == old_key:
            record = replace(record, path="/".join([new_name, *segments[1:]]))
        retagged.append(record)
    return retagged
