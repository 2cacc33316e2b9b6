"""Parser for the line-oriented TXT catalog exports.

Each track is a block of ``Key: value`` lines introduced by an
``Archivo #N`` header::

    Archivo #1
    Título: Guantanamera
    Intérprete: Celia Cruz
    Ruta: \\\\10.12.5.2\\Musica3\\Trova\\Guantanamera.mp3

Keys are matched without regard to case or accents. Physical paths are
rewritten into logical paths under ``root_context``.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field

from ..tree_model.normalize import normalize
from .types import UNKNOWN_LABEL, Record

BLOCK_HEADER_PREFIXES = ("archivo #", "archivo n")
AUDIO_SUFFIXES = (".mp3", ".wav")

_UNC_PREFIX_RE = re.compile(r"^[/\\]{2}[^/\\]+[/\\]")
_DRIVE_LETTER_RE = re.compile(r"^[a-zA-Z]:")
_LEADING_JUNK_RE = re.compile(r"^[/\s]+")

# Order matters: the first matching prefix wins.
_FIELD_PREFIXES = (
    ("titulo", "title"),
    ("compositor", "author"),
    ("autor", "author"),
    ("interprete", "performer"),
    ("genero", "genre"),
    ("carpeta", "album"),
    ("album", "album"),
    ("ruta", "source_path"),
)


@dataclass
class _TrackBlock:
    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str:
        return self.values.get(key, "")


def _new_record_id() -> str:
    return f"track-{uuid.uuid4().hex[:12]}"


def _root_variations(root_context: str) -> set[str]:
    """Spellings of the root that may lead a physical path (``Musica3``)."""
    folded = normalize(root_context).strip()
    return {folded, re.sub(r"\s+", "", folded)}


def clean_source_path(raw_path: str, title: str, root_context: str) -> str:
    """Turn a physical or UNC path into a logical path under ``root_context``."""
    cleaned = raw_path.replace("\\", "/")
    cleaned = _UNC_PREFIX_RE.sub("", cleaned)
    cleaned = _DRIVE_LETTER_RE.sub("", cleaned)
    cleaned = _LEADING_JUNK_RE.sub("", cleaned)

    parts = cleaned.split("/")
    last = parts[-1].lower()
    if last.endswith(AUDIO_SUFFIXES) or (title and title.lower() in last):
        parts.pop()
    cleaned = "/".join(parts)

    variations = _root_variations(root_context)
    first, sep, rest = cleaned.partition("/")
    if sep:
        body = rest if normalize(first).strip() in variations else cleaned
    else:
        body = "" if normalize(cleaned).strip() in variations else cleaned

    joined = f"{root_context}/{body}" if body.strip() else root_context
    return "/".join(segment.strip() for segment in joined.split("/") if segment.strip())


def _block_to_record(block: _TrackBlock, root_context: str) -> Record | None:
    title = block.get("title")
    if not title:
        return None

    raw_path = block.get("source_path") or block.get("album")
    if raw_path:
        path = clean_source_path(raw_path, title, root_context)
    else:
        path = f"{root_context}/{UNKNOWN_LABEL}"

    performer = block.get("performer") or UNKNOWN_LABEL
    album = block.get("album") or path.rsplit("/", 1)[-1]
    return Record(
        id=_new_record_id(),
        path=path,
        display_name=title,
        searchable_fields=(title, performer),
        filename=f"{title}.mp3",
        author=block.get("author") or UNKNOWN_LABEL,
        genre=block.get("genre"),
        album=album,
    )


def parse_txt_catalog(text: str, root_context: str = "Importado") -> list[Record]:
    """Parse a TXT export into records rooted at ``root_context``.

    Blocks without a title are dropped.
    """
    cleaned = text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    records: list[Record] = []
    block = _TrackBlock()

    def flush() -> None:
        nonlocal block
        record = _block_to_record(block, root_context)
        if record is not None:
            records.append(record)
        block = _TrackBlock()

    for raw_line in cleaned.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        folded = normalize(line)
        if folded.startswith(BLOCK_HEADER_PREFIXES):
            flush()
            continue
        for prefix, key in _FIELD_PREFIXES:
            if folded.startswith(prefix):
                block.values[key] = line[line.find(":") + 1 :].strip()
                break
    flush()
    return records
