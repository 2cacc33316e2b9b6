"""Public package surface for archivenav.

Exports ``main`` for programmatic CLI invocation.
The index, search, and session logic live in submodules under ``archivenav``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
