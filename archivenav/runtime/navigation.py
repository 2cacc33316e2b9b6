"""Browse/search navigation state and its transitions.

This module has no presentation concerns. It tracks where the operator is
(active root and folder), what they are searching for, and how many rows are
revealed; every transition resets the revealed-row limit.
"""

from __future__ import annotations

from loguru import logger

from ..search.matching import SCOPE_LOCAL, SCOPES
from ..tree_model.normalize import join_segments, normalize, split_segments
from .pagination import PAGE_SIZE, PaginationController
from .roots import RootRegistry

MODE_BROWSE = "browse"
MODE_SEARCH = "search"


class NavigationState:
    """Session navigation: ``Browsing(root, path)`` or ``Searching(root, path, query, scope)``.

    ``current_path`` is either empty (the top of ``active_root``) or a path
    that starts with ``active_root``.
    """

    def __init__(
        self,
        roots: RootRegistry,
        active_root: str | None = None,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.roots = roots
        self.active_root = active_root if active_root is not None else roots.default_root
        self.current_path = ""
        self.query = ""
        self.scope = SCOPE_LOCAL
        self.pagination = PaginationController(page_size)

    @property
    def mode(self) -> str:
        return MODE_SEARCH if self.query else MODE_BROWSE

    @property
    def is_searching(self) -> bool:
        return self.mode == MODE_SEARCH

    @property
    def target_path(self) -> str:
        """Location listed or locally searched: the folder, else the root itself."""
        return self.current_path or self.active_root

    @property
    def render_limit(self) -> int:
        return self.pagination.render_limit

    def _clear_search(self) -> None:
        self.query = ""
        self.scope = SCOPE_LOCAL

    def select_root(self, root: str) -> None:
        """Jump to the top of ``root``; re-selecting the active root still resets."""
        self.active_root = root
        self.current_path = ""
        self._clear_search()
        self.pagination.reset()
        logger.debug("Selected root {!r}", root)

    def navigate_into(self, folder_path: str) -> None:
        """Open a folder, leaving search mode if it was active.

        The active root follows the folder: the first registered root named
        like its first segment (fixed roots first), else that segment itself.
        """
        segments = split_segments(folder_path)
        if not segments:
            return
        resolved_root = self.roots.find(segments[0])
        self.active_root = resolved_root if resolved_root is not None else segments[0]
        self.current_path = join_segments(segments)
        self._clear_search()
        self.pagination.reset()
        logger.debug("Navigated into {!r} (root {!r})", self.current_path, self.active_root)

    def navigate_up(self) -> bool:
        """Drop the last folder segment; only valid while browsing below the root."""
        if self.is_searching or not self.current_path:
            return False
        segments = split_segments(self.current_path)
        self.current_path = join_segments(segments[:-1]) if len(segments) > 1 else ""
        self.pagination.reset()
        logger.debug("Navigated up to {!r}", self.current_path or self.active_root)
        return True

    def set_query(self, query: str) -> None:
        """Apply an effective query; blank text returns to browse mode."""
        if query.strip():
            self.query = query
        else:
            self._clear_search()
        self.pagination.reset()

    def set_scope(self, scope: str) -> bool:
        if scope not in SCOPES:
            raise ValueError(f"unknown search scope: {scope!r}")
        if not self.is_searching:
            return False
        self.scope = scope
        self.pagination.reset()
        return True

    def rename_root(self, old_name: str, new_name: str) -> None:
        """Follow a root rename when the renamed root is the active one."""
        if normalize(self.active_root) != normalize(old_name):
            return
        tail = split_segments(self.current_path)[1:]
        self.active_root = new_name
        self.current_path = join_segments([new_name, *tail]) if self.current_path else ""
        self.pagination.reset()

    def sync_roots(self) -> None:
        """Fall back to the default root when the active root was removed."""
        if self.roots.find(self.active_root) is None:
            self.select_root(self.roots.default_root)
