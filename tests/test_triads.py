import unittest

from triad_recall.note_types import Note
from triad_recall.note_utils import CHROMATIC_NOTES
from triad_recall.services.triads import (
    generate_triad,
    get_all_triad_qualities,
    get_all_triads,
    get_chord_tones,
    get_triad_pattern,
    identify_triad,
)

PATTERNS = {
    "major": [0, 4, 7],
    "minor": [0, 3, 7],
    "diminished": [0, 3, 6],
    "augmented": [0, 4, 8],
}


class TestGenerateTriad(unittest.TestCase):
    def test_thirds_and_fifths_follow_patterns(self):
        for name in CHROMATIC_NOTES:
            root = Note(name)
            for quality, pattern in PATTERNS.items():
                triad = generate_triad(root, quality)
                self.assertEqual(triad.root, root)
                self.assertEqual(triad.third, root.add_semitones(pattern[1]))
                self.assertEqual(triad.fifth, root.add_semitones(pattern[2]))
                self.assertEqual(triad.quality, quality)

    def test_chord_tones_are_distinct(self):
        for quality in PATTERNS:
            for triad in get_all_triads(quality):
                names = {n.name for n in triad.chord_tones()}
                self.assertEqual(len(names), 3)

    def test_symbols(self):
        self.assertEqual(generate_triad(Note("C"), "major").symbol, "C")
        self.assertEqual(generate_triad(Note("C"), "minor").symbol, "Cm")
        self.assertEqual(generate_triad(Note("C"), "diminished").symbol, "C°")
        self.assertEqual(generate_triad(Note("C"), "augmented").symbol, "C+")
        self.assertEqual(generate_triad(Note("F#"), "minor").symbol, "F#m")

    def test_c_major_tones(self):
        triad = generate_triad(Note("C"), "major")
        self.assertEqual([n.name for n in get_chord_tones(triad)], ["C", "E", "G"])

    def test_root_name_string(self):
        triad = generate_triad("A", "minor")
        self.assertEqual((triad.root.name, triad.third.name, triad.fifth.name), ("A", "C", "E"))

    def test_flat_keys_are_spelled_with_sharps(self):
        triad = generate_triad("Db", "major")
        self.assertEqual((triad.root.name, triad.third.name, triad.fifth.name), ("C#", "F", "G#"))
        self.assertEqual(triad.symbol, "C#")

    def test_octave_carries_through(self):
        triad = generate_triad(Note("A", 3), "major")
        self.assertEqual(triad.third, Note("C#", 4))
        self.assertEqual(triad.fifth, Note("E", 4))

    def test_unknown_quality(self):
        with self.assertRaises(ValueError):
            generate_triad(Note("C"), "sus4")


class TestTriadHelpers(unittest.TestCase):
    def test_pattern(self):
        self.assertEqual(get_triad_pattern("diminished"), [0, 3, 6])
        self.assertEqual(generate_triad(Note("C"), "diminished").symbol, "C°")

    def test_pattern_is_a_copy(self):
        pattern = get_triad_pattern("major")
        pattern[1] = 3
        self.assertEqual(get_triad_pattern("major"), [0, 4, 7])

    def test_all_triads_in_chromatic_order(self):
        triads = get_all_triads("major")
        self.assertEqual(len(triads), 12)
        self.assertEqual([t.root.name for t in triads], list(CHROMATIC_NOTES))
        self.assertEqual(triads[1].symbol, "C#")

    def test_all_qualities(self):
        self.assertEqual(
            get_all_triad_qualities(), ["major", "minor", "diminished", "augmented"]
        )

    def test_identify_triad(self):
        self.assertEqual(identify_triad(["E", "G", "C"]).symbol, "C")
        self.assertEqual(identify_triad(["A", "C", "E"]).symbol, "Am")
        self.assertEqual(identify_triad([Note("B"), Note("D"), Note("F")]).symbol, "B°")
        self.assertEqual(identify_triad(["C", "E", "G#"]).symbol, "C+")

    def test_identify_triad_no_match(self):
        self.assertIsNone(identify_triad(["C", "D", "E"]))
        self.assertIsNone(identify_triad(["C", "E"]))


if __name__ == "__main__":
    unittest.main()
