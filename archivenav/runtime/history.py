"""Recent search terms with bounded size and a time-to-live.

Persistence is delegated to a key-value collaborator; this module only owns
the retention and dedup policy.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Protocol

from loguru import logger

HISTORY_KEY = "search_history"
MAX_HISTORY_ENTRIES = 5
HISTORY_TTL_SECONDS = 24 * 60 * 60

AGE_JUST_NOW = "just_now"
AGE_MINUTES = "minutes"
AGE_HOURS = "hours"


class KeyValueStore(Protocol):
    def get(self, key: str) -> object | None: ...

    def set(self, key: str, value: object) -> None: ...


class MemoryStore:
    """In-process ``KeyValueStore``."""

    def __init__(self, initial: Mapping[str, object] | None = None) -> None:
        self.data: dict[str, object] = dict(initial or {})

    def get(self, key: str) -> object | None:
        return self.data.get(key)

    def set(self, key: str, value: object) -> None:
        self.data[key] = value


@dataclass(frozen=True)
class HistoryEntry:
    term: str
    timestamp: float


@dataclass(frozen=True)
class HistoryItem:
    term: str
    age_bucket: str


def age_bucket(entry: HistoryEntry, now: float) -> str:
    age = max(0.0, now - entry.timestamp)
    if age < 60:
        return AGE_JUST_NOW
    if age < 60 * 60:
        return AGE_MINUTES
    return AGE_HOURS


def _coerce_entry(raw: object) -> HistoryEntry | None:
    if not isinstance(raw, Mapping):
        return None
    term = raw.get("term")
    timestamp = raw.get("timestamp")
    if not isinstance(term, str) or not term.strip():
        return None
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        return None
    return HistoryEntry(term=term, timestamp=float(timestamp))


class HistoryStore:
    def __init__(
        self,
        store: KeyValueStore,
        key: str = HISTORY_KEY,
        max_entries: int = MAX_HISTORY_ENTRIES,
        ttl_seconds: float = HISTORY_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.key = key
        self.max_entries = max(1, max_entries)
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self.entries: list[HistoryEntry] = []
        self.loaded = False

    def _is_fresh(self, entry: HistoryEntry, now: float) -> bool:
        return entry.timestamp > now - self.ttl_seconds

    def load_and_prune(self, raw_entries: object, now: float | None = None) -> list[HistoryEntry]:
        """Replace the working set with the unexpired entries of ``raw_entries``.

        Absent or unusable input yields an empty history rather than raising.
        Order is newest first; the bound is re-applied.
        """
        now = self.clock() if now is None else now
        candidates: Iterable[object] = raw_entries if isinstance(raw_entries, list) else []
        entries = [entry for entry in map(_coerce_entry, candidates) if entry is not None]
        entries = [entry for entry in entries if self._is_fresh(entry, now)]
        entries.sort(key=lambda entry: entry.timestamp, reverse=True)
        self.entries = entries[: self.max_entries]
        self.loaded = True
        return list(self.entries)

    def activate(self, now: float | None = None) -> list[HistoryEntry]:
        """Load from the store and prune; called when search gains focus."""
        try:
            raw = self.store.get(self.key)
        except Exception as exc:
            logger.warning("Search history unavailable: {}", exc)
            raw = None
        return self.load_and_prune(raw, now)

    def record(self, term: str, now: float | None = None) -> bool:
        """Put ``term`` first, dropping an earlier case-insensitive duplicate.

        The stored history is loaded first when nothing has been read yet, so
        committing before focus never overwrites earlier sessions.
        """
        stripped = term.strip()
        if not stripped:
            return False
        now = self.clock() if now is None else now
        if not self.loaded:
            self.activate(now)
        folded = stripped.casefold()
        remaining = [entry for entry in self.entries if entry.term.casefold() != folded]
        self.entries = [HistoryEntry(term=stripped, timestamp=now), *remaining][: self.max_entries]
        self._save()
        return True

    def recent(self, now: float | None = None) -> list[HistoryEntry]:
        now = self.clock() if now is None else now
        return [entry for entry in self.entries if self._is_fresh(entry, now)]

    def items(self, now: float | None = None) -> list[HistoryItem]:
        now = self.clock() if now is None else now
        return [HistoryItem(term=entry.term, age_bucket=age_bucket(entry, now)) for entry in self.recent(now)]

    def clear(self) -> None:
        self.entries = []
        self._save()

    def to_raw(self) -> list[dict[str, object]]:
        return [{"term": entry.term, "timestamp": entry.timestamp} for entry in self.entries]

    def _save(self) -> None:
        try:
            self.store.set(self.key, self.to_raw())
        except Exception as exc:
            logger.warning("Could not persist search history: {}", exc)
