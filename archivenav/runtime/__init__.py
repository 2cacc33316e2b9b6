"""Session runtime: navigation state, paging, debounce, history, and config."""

from __future__ import annotations

from .debounce import QUERY_DEBOUNCE_SECONDS, QueryDebouncer
from .history import (
    HISTORY_KEY,
    HISTORY_TTL_SECONDS,
    MAX_HISTORY_ENTRIES,
    HistoryEntry,
    HistoryItem,
    HistoryStore,
    KeyValueStore,
    MemoryStore,
    age_bucket,
)
from .navigation import MODE_BROWSE, MODE_SEARCH, NavigationState
from .pagination import PAGE_SIZE, PaginationController
from .roots import FIXED_ROOTS, RootRegistry
from .session import BrowserSession, ListingPage

__all__ = [
    "BrowserSession",
    "FIXED_ROOTS",
    "HISTORY_KEY",
    "HISTORY_TTL_SECONDS",
    "HistoryEntry",
    "HistoryItem",
    "HistoryStore",
    "KeyValueStore",
    "ListingPage",
    "MAX_HISTORY_ENTRIES",
    "MODE_BROWSE",
    "MODE_SEARCH",
    "MemoryStore",
    "NavigationState",
    "PAGE_SIZE",
    "PaginationController",
    "QUERY_DEBOUNCE_SECONDS",
    "QueryDebouncer",
    "RootRegistry",
    "age_bucket",
]
