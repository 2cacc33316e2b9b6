"""Incremental reveal of long result lists."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

PAGE_SIZE = 50

T = TypeVar("T")


class PaginationController:
    def __init__(self, page_size: int = PAGE_SIZE) -> None:
        self.page_size = max(1, page_size)
        self.render_limit = self.page_size

    def reset(self) -> None:
        self.render_limit = self.page_size

    def visible(self, items: Sequence[T]) -> list[T]:
        return list(items[: self.render_limit])

    def has_more(self, total: int) -> bool:
        return total > self.render_limit

    def load_more(self, total: int) -> bool:
        """Grow the limit by one page; no-op once everything is revealed."""
        if self.render_limit >= total:
            return False
        self.render_limit += self.page_size
        return True
