"""Quiet-interval debounce for search input.

Keystrokes land in ``buffer`` immediately; the effective query is released
only after ``delay_seconds`` without further input. The caller drives it by
polling, so nothing here sleeps or blocks other transitions.
"""

from __future__ import annotations

import time
from collections.abc import Callable

QUERY_DEBOUNCE_SECONDS = 0.3


class QueryDebouncer:
    def __init__(
        self,
        delay_seconds: float = QUERY_DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.delay_seconds = delay_seconds
        self.clock = clock
        self.buffer = ""
        self._deadline: float | None = None

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def push(self, text: str) -> None:
        """Replace the input buffer and restart the quiet interval."""
        self.buffer = text
        self._deadline = self.clock() + self.delay_seconds

    def cancel(self) -> None:
        self._deadline = None

    def poll(self) -> str | None:
        """Return the buffer once the quiet interval has elapsed, exactly once."""
        if self._deadline is None or self.clock() < self._deadline:
            return None
        self._deadline = None
        return self.buffer

    def flush(self) -> str:
        """Release the buffer now, superseding any pending deadline."""
        self._deadline = None
        return self.buffer

    def reset(self, text: str = "") -> None:
        self.buffer = text
        self._deadline = None
