"""Browser session: records, navigation, debounced search, and history.

Every listing is recomputed from the current record set at call time; a
record replacement therefore never leaves stale folders or matches behind.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from ..catalog.merge import retag_root
from ..catalog.types import Record
from ..search.matching import search
from ..tree_model.listing import list_children, list_roots
from ..tree_model.types import FolderNode, Listing, ListingItem
from .debounce import QueryDebouncer
from .history import HistoryItem, HistoryStore, MemoryStore
from .navigation import NavigationState
from .pagination import PAGE_SIZE
from .roots import RootRegistry


@dataclass(frozen=True)
class ListingPage:
    """Revealed rows of the current listing plus paging counters."""

    items: list[ListingItem]
    render_limit: int
    total: int

    @property
    def has_more(self) -> bool:
        return self.total > self.render_limit


class BrowserSession:
    def __init__(
        self,
        records: Iterable[Record] = (),
        roots: RootRegistry | None = None,
        history: HistoryStore | None = None,
        debouncer: QueryDebouncer | None = None,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.records: tuple[Record, ...] = tuple(records)
        self.roots = roots if roots is not None else RootRegistry()
        self.history = history if history is not None else HistoryStore(MemoryStore())
        self.debouncer = debouncer if debouncer is not None else QueryDebouncer()
        self.navigation = NavigationState(self.roots, page_size=page_size)

    def replace_records(self, records: Iterable[Record]) -> None:
        self.records = tuple(records)
        logger.debug("Record set replaced: {} records", len(self.records))

    # Navigation

    def select_root(self, root: str) -> None:
        self.debouncer.reset()
        self.navigation.select_root(root)

    def navigate_into(self, folder_path: str) -> None:
        self.debouncer.reset()
        self.navigation.navigate_into(folder_path)

    def navigate_up(self) -> bool:
        return self.navigation.navigate_up()

    def open_item(self, item: ListingItem) -> Record | None:
        """Enter a folder row, or return the record behind a file row."""
        if item.is_folder:
            self.navigate_into(item.key)
            return None
        for record in self.records:
            if record.id == item.key:
                return record
        return None

    def root_folders(self) -> list[FolderNode]:
        return list_roots(self.records, self.roots.names)

    # Search input

    def type_query(self, text: str) -> None:
        """Buffer raw input; the effective query follows after the quiet interval."""
        self.debouncer.push(text)

    def poll(self) -> bool:
        """Apply buffered input whose quiet interval elapsed; True when applied."""
        text = self.debouncer.poll()
        if text is None:
            return False
        self.navigation.set_query(text)
        return True

    def commit_search(self, now: float | None = None) -> bool:
        """Apply the buffered query immediately and remember it in history."""
        text = self.debouncer.flush()
        self.navigation.set_query(text)
        return self.history.record(text, now)

    def apply_history_term(self, term: str, now: float | None = None) -> bool:
        self.debouncer.reset(term)
        return self.commit_search(now)

    def clear_query(self) -> None:
        self.debouncer.reset()
        self.navigation.set_query("")

    def set_scope(self, scope: str) -> bool:
        return self.navigation.set_scope(scope)

    def focus_search(self, now: float | None = None) -> list[HistoryItem]:
        self.history.activate(now)
        return self.history.items(now)

    # Results

    def nodes(self) -> Listing:
        nav = self.navigation
        if nav.is_searching:
            return search(self.records, nav.query, nav.scope, nav.target_path)
        return list_children(self.records, nav.target_path)

    def listing(self) -> ListingPage:
        nodes = self.nodes().nodes()
        pagination = self.navigation.pagination
        return ListingPage(
            items=[ListingItem.from_node(node) for node in pagination.visible(nodes)],
            render_limit=pagination.render_limit,
            total=len(nodes),
        )

    def load_more(self) -> bool:
        return self.navigation.pagination.load_more(len(self.nodes()))

    # Roots

    def add_custom_root(self, name: str) -> str | None:
        return self.roots.add_custom(name)

    def rename_custom_root(self, old_name: str, new_name: str) -> str | None:
        """Rename a custom root, retagging its records and the active location."""
        renamed = self.roots.rename_custom(old_name, new_name)
        if renamed is None:
            return None
        self.replace_records(retag_root(self.records, old_name, renamed))
        self.navigation.rename_root(old_name, renamed)
        return renamed

    def remove_custom_root(self, name: str) -> bool:
        removed = self.roots.remove_custom(name)
        if removed:
            self.navigation.sync_roots()
        return removed
