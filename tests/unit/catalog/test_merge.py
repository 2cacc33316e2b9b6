"""Tests for copy-on-replace catalog merging and root retagging."""

from __future__ import annotations

import unittest

from archivenav.catalog import Record, merge_records, retag_root


class MergeTests(unittest.TestCase):
    def test_matching_record_is_replaced_keeping_existing_id(self) -> None:
        current = [
            Record(id="old", path="Música 1/Trova", display_name="Longina", album="Trova"),
            Record(id="keep", path="Música 1/Son", display_name="Chan Chan"),
        ]
        incoming = [
            Record(id="new", path="Música 1/Trova", display_name="LONGINA", searchable_fields=("Manuel Corona",)),
            Record(id="extra", path="Música 2", display_name="Ojalá"),
        ]

        result = merge_records(current, incoming)

        self.assertEqual((result.updated, result.added), (1, 1))
        self.assertEqual([record.id for record in result.records], ["old", "keep", "extra"])
        self.assertEqual(result.records[0].searchable_fields, ("Manuel Corona",))
        self.assertEqual(current[0].searchable_fields, ())

    def test_same_title_in_other_folder_is_added(self) -> None:
        current = [Record(id="a", path="Música 1/Trova", display_name="Longina", album="Trova")]
        incoming = [Record(id="b", path="Música 2/Trova", display_name="Longina", album="Otra")]
        result = merge_records(current, incoming)
        self.assertEqual((result.updated, result.added), (0, 1))

    def test_retag_root_renames_only_leading_segment(self) -> None:
        records = [
            Record(id="a", path="Entrevistas/2024/Entrevistas", display_name="x"),
            Record(id="b", path="Música 1/Entrevistas", display_name="y"),
        ]
        retagged = retag_root(records, "entrevistas", "Charlas")
        self.assertEqual([record.path for record in retagged], ["Charlas/2024/Entrevistas", "Música 1/Entrevistas"])
        self.assertEqual(records[0].path, "Entrevistas/2024/Entrevistas")


if __name__ == "__main__":
    unittest.main()
