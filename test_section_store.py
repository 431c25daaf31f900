import unittest

import pandas as pd

from default_sections import DefaultSectionsInitializer, placeholder_frame
from errors import OutOfRange
from section_store import RowRecord, Section, SectionStore


class RowRecordTests(unittest.TestCase):
    def test_fields_are_strings_and_immutable(self):
        row = RowRecord(["web-1", 3, None])
        self.assertEqual(row, ("web-1", "3", ""))
        self.assertEqual(row.name, "web-1")
        with self.assertRaises(TypeError):
            row[0] = "other"

    def test_empty_record_has_blank_name(self):
        self.assertEqual(RowRecord().name, "")


class SectionTests(unittest.TestCase):
    def test_empty_section_cursor_moves_are_noops(self):
        section = Section("Empty", [])
        section.next_row()
        section.previous_row()
        self.assertIsNone(section.inner_selected)
        self.assertIsNone(section.selected_row)

    def test_select_validates_index(self):
        section = Section("S", [("a",), ("b",)])
        section.select(1)
        self.assertEqual(section.selected_row, ("b",))
        with self.assertRaises(OutOfRange):
            section.select(2)
        with self.assertRaises(IndexError):
            section.select(-1)
        section.select(None)
        self.assertIsNone(section.inner_selected)

    def test_display_height_is_at_least_one(self):
        self.assertEqual(Section("S", [], display_height=0).display_height, 1)

    def test_from_frame_blanks_missing_values(self):
        df = pd.DataFrame({"Name": ["a", None], "Pods": [pd.NA, "1/1"]}, dtype=object)
        section = Section.from_frame("Pods", df, display_height=5)
        self.assertEqual(section.columns, ("Name", "Pods"))
        self.assertEqual(section.rows, (("a", ""), ("", "1/1")))
        self.assertEqual(section.display_height, 5)


class SectionStoreTests(unittest.TestCase):
    def test_get_and_len(self):
        store = SectionStore([Section("A", []), Section("B", [])])
        self.assertEqual(len(store), 2)
        self.assertEqual(store.get(1).title, "B")
        self.assertEqual([s.title for s in store], ["A", "B"])

    def test_get_out_of_range(self):
        store = SectionStore([Section("A", [])])
        for bad in (1, 5, -1, None):
            with self.assertRaises(OutOfRange):
                store.get(bad)

    def test_get_returns_live_section(self):
        store = SectionStore([Section("A", [("x",), ("y",)])])
        store.get(0).next_row()
        self.assertEqual(store.get(0).inner_selected, 0)


class DefaultSectionsTests(unittest.TestCase):
    def test_default_store(self):
        store = DefaultSectionsInitializer().create()
        self.assertEqual(store.titles(), ["ReplicaSets", "Services"])
        self.assertEqual(store.display_heights(), [12, 8])
        first = store.get(0)
        self.assertEqual(len(first.rows), 30)
        self.assertEqual(first.columns, ("Name", "Pods", "Containers"))
        self.assertEqual(first.rows[0], ("replicaname-1", "10/10", "20/20"))
        self.assertEqual(store.get(1).rows[-1].name, "servicename-30")

    def test_custom_definitions(self):
        store = DefaultSectionsInitializer(
            [{"title": "Jobs", "display_height": 4, "rows": 0}]
        ).create()
        self.assertEqual(len(store), 1)
        self.assertEqual(len(store.get(0).rows), 0)
        self.assertEqual(store.get(0).display_height, 4)

    def test_placeholder_frame_shape(self):
        df = placeholder_frame(3, "pod")
        self.assertEqual(list(df.columns), ["Name", "Pods", "Containers"])
        self.assertEqual(df["Name"].tolist(), ["pod-1", "pod-2", "pod-3"])


if __name__ == "__main__":
    unittest.main()
