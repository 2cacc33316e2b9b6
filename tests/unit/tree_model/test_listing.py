"""Tests for deriving folder/file children from flat records.

Covers direct-child detection, folder dedup, ordering, and the guarantee
that recursive browsing reaches exactly the records under a path.
"""

from __future__ import annotations

import unittest

from archivenav.catalog.types import Record
from archivenav.tree_model import FileNode, FolderNode, list_children, list_roots, records_under


def _rec(record_id: str, path: str, name: str) -> Record:
    return Record(id=record_id, path=path, display_name=name)


class ListChildrenTests(unittest.TestCase):
    def test_worked_example_lists_single_folder(self) -> None:
        records = [
            _rec("a", "Música 1/Trova", "Longina"),
            _rec("b", "Música 1/Trova/Clasicos", "Guantanamera"),
        ]
        listing = list_children(records, "Música 1")
        self.assertEqual([folder.path for folder in listing.folders], ["Música 1/Trova"])
        self.assertEqual(listing.files, [])

    def test_records_at_target_depth_are_files(self) -> None:
        records = [
            _rec("a", "Música 1/Trova", "Longina"),
            _rec("b", "Música 1/Trova/Clasicos", "Guantanamera"),
        ]
        listing = list_children(records, "Música 1/Trova")
        self.assertEqual([folder.path for folder in listing.folders], ["Música 1/Trova/Clasicos"])
        self.assertEqual([node.id for node in listing.files], ["a"])

    def test_folder_discovered_by_many_records_appears_once(self) -> None:
        records = [
            _rec("a", "Música 2/Son/Viejo", "Uno"),
            _rec("b", "Música 2/Son", "Dos"),
            _rec("c", "Música 2/son/Nuevo", "Tres"),
            _rec("d", "Música 2/Salsa", "Cuatro"),
        ]
        listing = list_children(records, "Música 2")
        self.assertEqual([folder.path for folder in listing.folders], ["Música 2/Salsa", "Música 2/Son"])

    def test_matching_ignores_case_and_accents_but_keeps_spelling(self) -> None:
        records = [_rec("a", "Música 1/Bolero/Año 50", "Sabor a mí")]
        listing = list_children(records, "MUSICA 1/bolero")
        self.assertEqual(listing.folders, [FolderNode("Música 1/Bolero/Año 50")])
        self.assertEqual(listing.folders[0].name, "Año 50")

    def test_sibling_root_with_shared_prefix_is_excluded(self) -> None:
        records = [
            _rec("a", "Música 1/Trova", "Longina"),
            _rec("b", "Música 10/Son", "Chan Chan"),
        ]
        listing = list_children(records, "Música 1")
        self.assertEqual([folder.path for folder in listing.folders], ["Música 1/Trova"])

    def test_shorter_paths_are_excluded(self) -> None:
        records = [_rec("a", "Música 1", "En la raíz"), _rec("b", "Música 1/Trova", "Longina")]
        listing = list_children(records, "Música 1/Trova")
        self.assertEqual(listing.folders, [])
        self.assertEqual([node.id for node in listing.files], ["b"])

    def test_files_sorted_by_display_name_after_folders(self) -> None:
        records = [
            _rec("1", "Música 3", "zapateo"),
            _rec("2", "Música 3", "Ámame"),
            _rec("3", "Música 3", "bolero"),
            _rec("4", "Música 3/Afro", "x"),
        ]
        listing = list_children(records, "Música 3")
        self.assertEqual([node.name for node in listing.files], ["Ámame", "bolero", "zapateo"])
        nodes = listing.nodes()
        self.assertIsInstance(nodes[0], FolderNode)
        self.assertTrue(all(isinstance(node, FileNode) for node in nodes[1:]))

    def test_empty_target_lists_root_segments(self) -> None:
        records = [
            _rec("a", "Música 2/Son", "Uno"),
            _rec("b", "Música 1/Trova", "Dos"),
            _rec("c", "", "Sin ruta"),
        ]
        listing = list_children(records, "")
        self.assertEqual([folder.path for folder in listing.folders], ["Música 1", "Música 2"])
        self.assertEqual(listing.files, [])

    def test_browse_is_complete_and_exact(self) -> None:
        records = [
            _rec("a", "Música 1/Trova", "Longina"),
            _rec("b", "Música 1/Trova/Clasicos", "Guantanamera"),
            _rec("c", "Música 1/Son/Oriente/Santiago", "Chan Chan"),
            _rec("d", "Música 1", "Suelto"),
            _rec("e", "Música 10/Son", "Fuera"),
            _rec("f", "Música 2/Trova", "Otra raíz"),
        ]

        def reachable(path: str) -> set[str]:
            listing = list_children(records, path)
            found = {node.id for node in listing.files}
            for folder in listing.folders:
                found |= reachable(folder.path)
            return found

        for path in ("Música 1", "Música 1/Trova", "Música 1/Son", "Música 2"):
            with self.subTest(path=path):
                expected = {record.id for record in records_under(records, path)}
                self.assertEqual(reachable(path), expected)


class ListRootsTests(unittest.TestCase):
    def test_only_registered_roots_with_records_in_registry_order(self) -> None:
        records = [
            _rec("a", "Música 3/Son", "Uno"),
            _rec("b", "Entrevistas/2024", "Dos"),
            _rec("c", "Huérfano/x", "Tres"),
            _rec("d", "musica 1/Trova", "Cuatro"),
        ]
        roots = list_roots(records, ["Música 1", "Música 2", "Música 3", "Entrevistas"])
        self.assertEqual([folder.path for folder in roots], ["Música 1", "Música 3", "Entrevistas"])


if __name__ == "__main__":
    unittest.main()
