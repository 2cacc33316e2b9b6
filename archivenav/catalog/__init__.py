"""Catalog records: datatype, JSON load/dump, TXT import, and merging."""

from __future__ import annotations

from .loader import CatalogError, dump_records, load_records, loads_records
from .merge import MergeResult, merge_records, retag_root
from .txt_import import clean_source_path, parse_txt_catalog
from .types import UNKNOWN_LABEL, Record

__all__ = [
    "CatalogError",
    "MergeResult",
    "Record",
    "UNKNOWN_LABEL",
    "clean_source_path",
    "dump_records",
    "load_records",
    "loads_records",
    "merge_records",
    "parse_txt_catalog",
    "retag_root",
]
