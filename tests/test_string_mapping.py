"""Regression tests for translating visual string numbers into tuning indexes.

Visual string 1 is the thinnest (highest-pitched) string, while tunings are
stored from the lowest-pitched string up. Applying the translation twice, or
not at all, shifts every note on the A string by a fixed amount.
"""

import unittest

from triad_recall.services.fretboard import (
    STANDARD_TUNING,
    find_note_on_fretboard,
    map_triad_to_fretboard,
    note_at,
    open_string,
    tuning_index_to_visual_string,
    visual_string_to_tuning_index,
)
from triad_recall.services.triads import generate_triad


class TestVisualStringIndex(unittest.TestCase):
    def test_transform(self):
        self.assertEqual(visual_string_to_tuning_index(1, 6), 5)
        self.assertEqual(visual_string_to_tuning_index(5, 6), 1)
        self.assertEqual(visual_string_to_tuning_index(6, 6), 0)
        self.assertEqual(visual_string_to_tuning_index(1, 4), 3)

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            visual_string_to_tuning_index(0, 6)
        with self.assertRaises(ValueError):
            visual_string_to_tuning_index(7, 6)

    def test_inverse(self):
        for count in (4, 6, 7):
            for string in range(1, count + 1):
                index = visual_string_to_tuning_index(string, count)
                self.assertEqual(tuning_index_to_visual_string(index, count), string)


class TestStandardTuningStrings(unittest.TestCase):
    def test_fifth_string_reads_a(self):
        self.assertEqual(note_at(STANDARD_TUNING, 5, 0).name, "A")
        self.assertEqual(note_at(STANDARD_TUNING, 5, 1).name, "A#")
        self.assertEqual(note_at(STANDARD_TUNING, 5, 2).name, "B")

    def test_fifth_string_not_shifted(self):
        shifted = ["B", "C", "C#"]
        for fret, wrong in enumerate(shifted):
            self.assertNotEqual(note_at(STANDARD_TUNING, 5, fret).name, wrong)

    def test_open_strings_top_to_bottom(self):
        names = [note_at(STANDARD_TUNING, s, 0).name for s in range(1, 7)]
        self.assertEqual(names, ["E", "B", "G", "D", "A", "E"])

    def test_open_a_found_on_fifth_string(self):
        positions = find_note_on_fretboard("A")
        self.assertIn((5, 0), [(p.string, p.fret) for p in positions])
        self.assertNotIn((2, 0), [(p.string, p.fret) for p in positions])

    def test_mapped_positions_agree_with_tuning(self):
        for root in ("C", "F#", "A#"):
            for p in map_triad_to_fretboard(generate_triad(root, "major")):
                self.assertEqual(
                    open_string(STANDARD_TUNING, p.string),
                    STANDARD_TUNING[6 - p.string],
                )
                self.assertEqual(note_at(STANDARD_TUNING, p.string, p.fret).name, p.note.name)


if __name__ == "__main__":
    unittest.main()
