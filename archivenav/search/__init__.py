"""Search package exports.

Query matching over the flat record set, scoped locally or globally.
"""

from __future__ import annotations

from .matching import SCOPE_GLOBAL, SCOPE_LOCAL, SCOPES, record_matches, search

__all__ = [
    "SCOPES",
    "SCOPE_GLOBAL",
    "SCOPE_LOCAL",
    "record_matches",
    "search",
]
