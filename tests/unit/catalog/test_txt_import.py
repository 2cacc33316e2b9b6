"""Tests for TXT catalog parsing and physical-path cleanup."""

from __future__ import annotations

import unittest

from archivenav.catalog import UNKNOWN_LABEL, clean_source_path, parse_txt_catalog

SAMPLE = """\ufeffArchivo #1\r
Título: Guantanamera\r
Compositor: Joseíto Fernández\r
Intérprete: Celia Cruz\r
Género: Son\r
Ruta: \\\\10.12.5.2\\Musica3\\Trova\\Guantanamera.mp3\r
\r
Archivo #2\r
Titulo: Ojalá\r
Carpeta: Trova Nueva\r
\r
Archivo #3\r
Intérprete: Sin título\r
"""


class TxtImportTests(unittest.TestCase):
    def test_parses_blocks_into_records(self) -> None:
        records = parse_txt_catalog(SAMPLE, "Música 3")
        self.assertEqual(len(records), 2)

        first, second = records
        self.assertEqual(first.display_name, "Guantanamera")
        self.assertEqual(first.path, "Música 3/Trova")
        self.assertEqual(first.author, "Joseíto Fernández")
        self.assertEqual(first.genre, "Son")
        self.assertEqual(first.searchable_fields, ("Guantanamera", "Celia Cruz"))
        self.assertEqual(first.filename, "Guantanamera.mp3")
        self.assertEqual(first.album, "Trova")

        self.assertEqual(second.path, "Música 3/Trova Nueva")
        self.assertEqual(second.author, UNKNOWN_LABEL)
        self.assertEqual(second.searchable_fields, ("Ojalá", UNKNOWN_LABEL))
        self.assertNotEqual(first.id, second.id)

    def test_missing_path_lands_in_unknown_folder(self) -> None:
        records = parse_txt_catalog("Archivo #1\nTítulo: Suelto\n", "Música 5")
        self.assertEqual(records[0].path, f"Música 5/{UNKNOWN_LABEL}")

    def test_clean_source_path_strips_drive_and_redundant_root(self) -> None:
        self.assertEqual(
            clean_source_path("D:\\Música 3\\Afrocubana\\Yoruba\\canto.wav", "Canto", "Música 3"),
            "Música 3/Afrocubana/Yoruba",
        )
        self.assertEqual(clean_source_path("//server/Musica3", "x", "Música 3"), "Música 3")
        self.assertEqual(
            clean_source_path("/ Boleros / Clásicos /", "x", "Música 1"),
            "Música 1/Boleros/Clásicos",
        )


if __name__ == "__main__":
    unittest.main()
