"""JSON catalog files: decode into records and encode back."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path

from loguru import logger

from .types import Record


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or is not a record list."""


def loads_records(text: str) -> list[Record]:
    """Decode a JSON array of record objects.

    Entries that are not objects or lack an id are skipped with a warning;
    records are never rejected for the shape of their path. A later entry
    reusing an id already seen is dropped.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"invalid catalog JSON: {exc}") from exc
    if isinstance(data, Mapping) and isinstance(data.get("records"), list):
        data = data["records"]
    if not isinstance(data, list):
        raise CatalogError("catalog must be a JSON array of records")

    records: list[Record] = []
    seen_ids: set[str] = set()
    for idx, item in enumerate(data):
        if not isinstance(item, Mapping):
            logger.warning("Skipping catalog entry {}: not an object", idx)
            continue
        record = Record.from_mapping(item)
        if record is None:
            logger.warning("Skipping catalog entry {}: missing id", idx)
            continue
        if record.id in seen_ids:
            logger.warning("Skipping catalog entry {}: duplicate id {!r}", idx, record.id)
            continue
        seen_ids.add(record.id)
        records.append(record)
    logger.debug("Decoded {} records from {} entries", len(records), len(data))
    return records


def load_records(path: Path) -> list[Record]:
    """Read and decode a catalog file."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as exc:
        raise CatalogError(f"cannot read catalog {path}: {exc}") from exc
    return loads_records(text)


def dump_records(records: Iterable[Record]) -> str:
    """Encode records as pretty-printed JSON in the native shape."""
    payload = [record.to_mapping() for record in records]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
