import unittest
from triad_recall.note_types import Note
from triad_recall.note_utils import get_note_name


class TestScientificPitchNotation(unittest.TestCase):
    def test_middle_c(self):
        # Middle C (C4) should be ~261.63 Hz
        self.assertEqual(get_note_name(261.63), "C4")

    def test_a4(self):
        self.assertEqual(get_note_name(440.0), "A4")

    def test_octave_transitions(self):
        # B3 -> C4
        self.assertEqual(get_note_name(246.94), "B3")
        self.assertEqual(get_note_name(261.63), "C4")

    def test_sharps_and_flats(self):
        self.assertEqual(get_note_name(277.18), "C#4")
        self.assertEqual(get_note_name(311.13), "D#4")

        self.assertEqual(get_note_name(277.18, use_flats=True), "Db4")
        self.assertEqual(get_note_name(311.13, use_flats=True), "Eb4")

        self.assertEqual(get_note_name(329.63), "E4")
        self.assertEqual(get_note_name(493.88), "B4")

    def test_non_positive_frequency(self):
        self.assertEqual(get_note_name(0), "---")

    def test_note_frequency(self):
        self.assertAlmostEqual(Note("A", 4).frequency, 440.0)
        self.assertAlmostEqual(Note("C", 4).frequency, 261.63, places=2)
        self.assertAlmostEqual(Note("E", 2).frequency, 82.41, places=2)
        self.assertIsNone(Note("A").frequency)

    def test_from_frequency(self):
        self.assertEqual(Note.from_frequency(440.0), Note("A", 4))
        self.assertEqual(Note.from_frequency(261.63), Note("C", 4))
        self.assertEqual(Note.from_frequency(246.94), Note("B", 3))
        with self.assertRaises(ValueError):
            Note.from_frequency(-1.0)


if __name__ == "__main__":
    unittest.main()
