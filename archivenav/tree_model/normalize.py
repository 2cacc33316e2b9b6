"""Text and path canonicalization used for matching.

Matching is case-insensitive and diacritic-insensitive. The helpers here
never change what gets displayed; callers keep the original strings and
only compare normalized copies.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Sequence

PATH_SEPARATOR = "/"


def normalize(text: str) -> str:
    """Fold case and strip combining marks (``"Música"`` -> ``"musica"``)."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def split_segments(path: str) -> list[str]:
    """Split a logical path on ``/`` and drop empty segments."""
    return [segment for segment in path.split(PATH_SEPARATOR) if segment]


def normalized_segments(path: str) -> list[str]:
    return [normalize(segment) for segment in split_segments(path)]


def join_segments(segments: Sequence[str]) -> str:
    return PATH_SEPARATOR.join(segments)


def segments_start_with(segments: Sequence[str], prefix: Sequence[str]) -> bool:
    """Return whether ``prefix`` is a segment-wise prefix of ``segments``.

    Both sequences must already be normalized. Equal sequences count as a
    prefix; an empty prefix matches everything.
    """
    if len(prefix) > len(segments):
        return False
    return all(segments[idx] == token for idx, token in enumerate(prefix))


def path_starts_with(path: str, prefix: str) -> bool:
    """Segment-wise, normalized prefix test for two logical paths.

    ``"Música 10/Son"`` does not start with ``"Musica 1"`` even though the
    raw strings share a character prefix.
    """
    return segments_start_with(normalized_segments(path), normalized_segments(prefix))


def normalized_path_key(path: str) -> str:
    """Canonical identity of a logical path, used for folder deduplication."""
    return join_segments(normalized_segments(path))


def collation_key(text: str) -> tuple[str, str]:
    """Sort key approximating locale-aware ordering.

    Primary order ignores case and accents; the raw text breaks ties so the
    order stays total and deterministic.
    """
    return (normalize(text), text)
