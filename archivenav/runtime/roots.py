"""Root-name registry: the fixed catalog drives plus user-created roots."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from ..tree_model.normalize import normalize, split_segments

FIXED_ROOTS: tuple[str, ...] = ("Música 1", "Música 2", "Música 3", "Música 4", "Música 5")


class RootRegistry:
    """Ordered root names, fixed first.

    Lookups compare names case- and accent-insensitively. When a custom root
    collides with a fixed one the fixed root always wins.
    """

    def __init__(self, custom: Iterable[str] = (), fixed: Iterable[str] = FIXED_ROOTS) -> None:
        self.fixed: tuple[str, ...] = tuple(fixed)
        self.custom: list[str] = []
        for name in custom:
            self.add_custom(name)

    @property
    def names(self) -> list[str]:
        return [*self.fixed, *self.custom]

    @property
    def default_root(self) -> str:
        names = self.names
        return names[0] if names else ""

    def is_fixed(self, name: str) -> bool:
        key = normalize(name)
        return any(normalize(root) == key for root in self.fixed)

    def find(self, name: str) -> str | None:
        """Return the registered spelling of ``name``, or ``None``."""
        key = normalize(name.strip())
        for root in self.names:
            if normalize(root) == key:
                return root
        return None

    def root_for_path(self, path: str) -> str | None:
        """Resolve the registered root whose name is the first segment of ``path``."""
        segments = split_segments(path)
        if not segments:
            return None
        return self.find(segments[0])

    def add_custom(self, name: str) -> str | None:
        """Register a custom root; returns the stored name or ``None`` if rejected."""
        stripped = name.strip()
        if not stripped or "/" in stripped:
            return None
        if self.find(stripped) is not None:
            return None
        self.custom.append(stripped)
        logger.debug("Added custom root {!r}", stripped)
        return stripped

    def rename_custom(self, old_name: str, new_name: str) -> str | None:
        """Rename a custom root in place, keeping its position."""
        stripped = new_name.strip()
        if not stripped or "/" in stripped:
            return None
        old_key = normalize(old_name)
        for idx, root in enumerate(self.custom):
            if normalize(root) != old_key:
                continue
            existing = self.find(stripped)
            if existing is not None and normalize(existing) != old_key:
                return None
            self.custom[idx] = stripped
            logger.debug("Renamed custom root {!r} -> {!r}", root, stripped)
            return stripped
        return None

    def remove_custom(self, name: str) -> bool:
        key = normalize(name)
        for idx, root in enumerate(self.custom):
            if normalize(root) == key:
                del self.custom[idx]
                logger.debug("Removed custom root {!r}", root)
                return True
        return False
