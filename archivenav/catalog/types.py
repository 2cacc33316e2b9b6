"""Catalog record datatype shared by the index, search, and import modules."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

UNKNOWN_LABEL = "Desconocido"


def _text(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


@dataclass(frozen=True)
class Record:
    """One audio-file record tagged with a logical ``/``-delimited path.

    ``display_name`` and ``searchable_fields`` take part in query matching.
    ``filename``, ``author``, ``genre`` and ``album`` are catalog metadata
    kept for display and merging only.
    """

    id: str
    path: str
    display_name: str
    searchable_fields: tuple[str, ...] = ()
    filename: str = ""
    author: str = ""
    genre: str = ""
    album: str = ""
    extra: Mapping[str, object] = field(default_factory=dict, compare=False, hash=False)

    @property
    def root_name(self) -> str:
        """First path segment, or an empty string for a malformed path."""
        for segment in self.path.split("/"):
            if segment:
                return segment
        return ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Record | None:
        """Build a record from a decoded JSON object.

        Accepts the native shape (``display_name``/``searchable_fields``) and
        the track shape exported by the catalog app (``filename`` plus a
        ``metadata`` object). Returns ``None`` when there is no usable id.
        """
        raw_id = data.get("id")
        if isinstance(raw_id, (int, float)) and not isinstance(raw_id, bool):
            raw_id = str(raw_id)
        if not isinstance(raw_id, str) or not raw_id:
            return None

        path = _text(data.get("path"))
        metadata = data.get("metadata")
        if not isinstance(metadata, Mapping):
            metadata = {}

        filename = _text(data.get("filename"))
        title = _text(metadata.get("title"))
        performer = _text(metadata.get("performer"))

        display_name = _text(data.get("display_name")) or title or filename
        raw_fields = data.get("searchable_fields")
        if isinstance(raw_fields, (list, tuple)):
            fields = tuple(_text(item) for item in raw_fields if _text(item))
        else:
            fields = tuple(item for item in (title, performer) if item)

        known = {
            "id", "path", "display_name", "searchable_fields", "filename", "author", "genre", "album", "metadata",
        }
        return cls(
            id=raw_id,
            path=path,
            display_name=display_name,
            searchable_fields=fields,
            filename=filename,
            author=_text(data.get("author")) or _text(metadata.get("author")),
            genre=_text(data.get("genre")) or _text(metadata.get("genre")),
            album=_text(data.get("album")) or _text(metadata.get("album")),
            extra={key: value for key, value in data.items() if key not in known},
        )

    def to_mapping(self) -> dict[str, object]:
        """Serialize in the native JSON shape, carrying unrecognized keys along."""
        data: dict[str, object] = {
            "id": self.id,
            "path": self.path,
            "display_name": self.display_name,
            "searchable_fields": list(self.searchable_fields),
        }
        for key in ("filename", "author", "genre", "album"):
            value = getattr(self, key)
            if value:
                data[key] = value
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data
