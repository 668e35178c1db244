"""Utility functions and constants for working with musical notes and frequencies."""

from typing import Any, Dict, Tuple

import numpy as np

# Musical constants
A4_FREQUENCY = 440.0
SEMITONES_IN_OCTAVE = 12
GUITAR_STRINGS = 6
MIN_FRET = 0
MAX_FRET = 24
MIN_OCTAVE = 0
MAX_OCTAVE = 9

# Semitones from C0 to A4
A4_SEMITONE_VALUE = 9 + 4 * SEMITONES_IN_OCTAVE

CHROMATIC_NOTES: Tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

FLAT_NOTES: Tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

SEMITONE_MAP: Dict[str, int] = {name: i for i, name in enumerate(CHROMATIC_NOTES)}

TRIAD_QUALITIES: Tuple[str, ...] = ("major", "minor", "diminished", "augmented")
DIFFICULTY_LEVELS: Tuple[str, ...] = ("beginner", "intermediate", "advanced")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_note_name(name: Any) -> bool:
    """Check for one of the 12 sharp-spelled chromatic names."""
    return isinstance(name, str) and name in SEMITONE_MAP


def is_valid_triad_quality(quality: Any) -> bool:
    return isinstance(quality, str) and quality in TRIAD_QUALITIES


def is_valid_difficulty(difficulty: Any) -> bool:
    return isinstance(difficulty, str) and difficulty in DIFFICULTY_LEVELS


def is_valid_fret(fret: Any) -> bool:
    return _is_int(fret) and MIN_FRET <= fret <= MAX_FRET


def is_valid_string_number(string: Any, string_count: int = GUITAR_STRINGS) -> bool:
    return _is_int(string) and 1 <= string <= string_count


def is_valid_octave(octave: Any) -> bool:
    return _is_int(octave) and MIN_OCTAVE <= octave <= MAX_OCTAVE


def is_valid_neck_position(position: Any) -> bool:
    return _is_int(position) and 0 <= position <= MAX_FRET


def note_frequency(name: str, octave: int) -> float:
    """Equal-tempered frequency of a note, using A4 = 440 Hz as reference."""
    total_semitones = SEMITONE_MAP[name] + octave * SEMITONES_IN_OCTAVE
    semitone_difference = total_semitones - A4_SEMITONE_VALUE
    return float(
        A4_FREQUENCY * np.power(2.0, semitone_difference / SEMITONES_IN_OCTAVE)
    )


def frequency_to_midi(freq: float) -> int:
    """Nearest MIDI note number for a frequency (A4 = 69)."""
    half_steps = int(round(SEMITONES_IN_OCTAVE * np.log2(freq / A4_FREQUENCY)))
    return 69 + half_steps


def get_note_name(freq: float, use_flats: bool = False) -> str:
    """Convert frequency to note name using Scientific Pitch Notation (SPN).

    Args:
        freq: Frequency in Hz
        use_flats: If True, use flat notes (e.g., 'Bb') instead of sharps (e.g., 'A#')

    Returns:
        Note name with octave in SPN (e.g., 'A4', 'C#4', 'Bb3'), or '---' for
        a non-positive frequency

    Note:
        - Middle C is C4 (261.63 Hz)
        - Octave numbers change between B and C (e.g., B3 -> C4)
    """
    if freq <= 0:
        return "---"

    midi_number = frequency_to_midi(freq)

    # SPN octave calculation (C4 is middle C)
    octave = (midi_number // SEMITONES_IN_OCTAVE) - 1
    note_idx = midi_number % SEMITONES_IN_OCTAVE

    names = FLAT_NOTES if use_flats else CHROMATIC_NOTES
    return f"{names[note_idx]}{octave}"
