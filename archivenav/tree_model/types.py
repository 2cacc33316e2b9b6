"""Derived node datatypes produced by listing and search."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..catalog.types import Record
from .normalize import split_segments

FOLDER_KIND = "folder"
FILE_KIND = "file"


@dataclass(frozen=True)
class FolderNode:
    """An intermediate path prefix; recomputed from records, never stored."""

    path: str

    @property
    def name(self) -> str:
        segments = split_segments(self.path)
        return segments[-1] if segments else self.path


@dataclass(frozen=True)
class FileNode:
    """Leaf view of one record, identified by the record id."""

    record: Record

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def path(self) -> str:
        return self.record.path

    @property
    def name(self) -> str:
        return self.record.display_name or self.record.filename or self.record.id


@dataclass(frozen=True)
class Listing:
    """Folders and files for one location or query; folders always first."""

    folders: list[FolderNode] = field(default_factory=list)
    files: list[FileNode] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.folders) + len(self.files)

    def nodes(self) -> list[FolderNode | FileNode]:
        return [*self.folders, *self.files]


@dataclass(frozen=True)
class ListingItem:
    """Presentation row: ``key`` is a folder path or a record id."""

    kind: str
    key: str
    label: str
    path: str

    @classmethod
    def from_node(cls, node: FolderNode | FileNode) -> ListingItem:
        if isinstance(node, FolderNode):
            return cls(kind=FOLDER_KIND, key=node.path, label=node.name, path=node.path)
        return cls(kind=FILE_KIND, key=node.id, label=node.name, path=node.path)

    @property
    def is_folder(self) -> bool:
        return self.kind == FOLDER_KIND
