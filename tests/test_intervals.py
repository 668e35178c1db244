import unittest

from triad_recall.note_types import Note
from triad_recall.services.intervals import (
    calculate_interval,
    get_all_intervals,
    get_interval_name,
    get_interval_quality,
    invert_interval,
    is_consonant,
)


class TestCalculateInterval(unittest.TestCase):
    def test_perfect_fifth(self):
        interval = calculate_interval(Note("C"), Note("G"))
        self.assertEqual(interval.semitones, 7)
        self.assertEqual(interval.quality, "perfect")
        self.assertEqual(interval.name, "perfect fifth")

    def test_tritone(self):
        interval = calculate_interval(Note("C"), Note("F#"))
        self.assertEqual(interval.semitones, 6)
        self.assertEqual(interval.name, "augmented fourth")
        self.assertEqual(interval.quality, "augmented")

    def test_always_ascending(self):
        # G up to C is a fourth, never a descending fifth
        interval = calculate_interval(Note("G"), Note("C"))
        self.assertEqual(interval.semitones, 5)
        self.assertEqual(interval.name, "perfect fourth")

    def test_unison(self):
        interval = calculate_interval(Note("A", 2), Note("A", 4))
        self.assertEqual(interval.semitones, 0)
        self.assertEqual(interval.name, "unison")


class TestIntervalNames(unittest.TestCase):
    def test_simple_names(self):
        self.assertEqual(get_interval_name(0), "unison")
        self.assertEqual(get_interval_name(3), "minor third")
        self.assertEqual(get_interval_name(4), "major third")
        self.assertEqual(get_interval_name(11), "major seventh")
        self.assertEqual(get_interval_name(12), "octave")

    def test_compound_names(self):
        self.assertEqual(get_interval_name(13), "compound minor second")
        self.assertEqual(get_interval_name(19), "compound perfect fifth")
        self.assertEqual(get_interval_name(28), "compound major third")

    def test_multiple_octaves(self):
        self.assertEqual(get_interval_name(24), "2 octaves")
        self.assertEqual(get_interval_name(36), "3 octaves")

    def test_qualities(self):
        self.assertEqual(get_interval_quality(0), "perfect")
        self.assertEqual(get_interval_quality(1), "minor")
        self.assertEqual(get_interval_quality(9), "major")
        self.assertEqual(get_interval_quality(12), "perfect")
        self.assertEqual(get_interval_quality(14), "major")
        self.assertEqual(get_interval_quality(18), "augmented")

    def test_all_intervals(self):
        intervals = get_all_intervals()
        self.assertEqual([i.semitones for i in intervals], list(range(12)))
        self.assertEqual(intervals[7].name, "perfect fifth")


class TestIntervalHelpers(unittest.TestCase):
    def test_invert(self):
        self.assertEqual(invert_interval(4), 8)
        self.assertEqual(invert_interval(7), 5)
        self.assertEqual(invert_interval(6), 6)
        self.assertEqual(invert_interval(0), 0)
        self.assertEqual(invert_interval(12), 0)
        self.assertEqual(invert_interval(16), 8)

    def test_consonance(self):
        for semitones in (0, 3, 4, 5, 7, 8, 9, 12, 15):
            self.assertTrue(is_consonant(semitones), semitones)
        for semitones in (1, 2, 6, 10, 11, 13):
            self.assertFalse(is_consonant(semitones), semitones)


if __name__ == "__main__":
    unittest.main()
