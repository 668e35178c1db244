"""Type definitions for the Triad Recall project."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Union

from .note_utils import (
    CHROMATIC_NOTES,
    SEMITONE_MAP,
    SEMITONES_IN_OCTAVE,
    get_note_name,
    is_valid_note_name,
    is_valid_octave,
    note_frequency,
)
from .note_matcher import NOTE_PATTERN, NoteMatcher

NoteName = Literal[
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"
]
TriadQuality = Literal["major", "minor", "diminished", "augmented"]
IntervalQuality = Literal["perfect", "major", "minor", "augmented"]
Difficulty = Literal["beginner", "intermediate", "advanced"]
HarmonicRole = Literal["root", "third", "fifth"]


@dataclass(frozen=True)
class Note:
    """A pitch class, optionally pinned to an octave.

    Two notes are equal when their names match and either both lack an
    octave or both octaves match. The derived frequency never takes part
    in comparisons.
    """

    name: str  # Sharp spelling, e.g. 'C#'
    octave: Optional[int] = None  # e.g. 4 for middle C
    frequency: Optional[float] = field(default=None, compare=False)  # Hz

    def __post_init__(self):
        if not is_valid_note_name(self.name):
            raise ValueError(
                f"Invalid note name: {self.name!r}. "
                f"Must be one of: {', '.join(CHROMATIC_NOTES)}"
            )
        if self.frequency is None and self.octave is not None:
            object.__setattr__(
                self, "frequency", note_frequency(self.name, self.octave)
            )

    def __str__(self):
        return self.name if self.octave is None else f"{self.name}{self.octave}"

    def semitone_value(self) -> int:
        return SEMITONE_MAP[self.name]

    def add_semitones(self, semitones: int) -> Note:
        """Return the note ``semitones`` above (or below, if negative) this one."""
        total = self.semitone_value() + semitones
        new_name = CHROMATIC_NOTES[total % SEMITONES_IN_OCTAVE]

        new_octave = None
        if self.octave is not None:
            new_octave = self.octave + total // SEMITONES_IN_OCTAVE

        return Note(new_name, new_octave)

    def interval_to(self, other: Note) -> int:
        """Ascending interval in semitones from this note to ``other`` (0-11)."""
        return (other.semitone_value() - self.semitone_value()) % SEMITONES_IN_OCTAVE

    def to_dict(self) -> Dict[str, Union[str, int, float, None]]:
        return {"name": self.name, "octave": self.octave, "frequency": self.frequency}

    @classmethod
    def parse(cls, text: str) -> Note:
        """Parse a note string such as 'C', 'f#3' or 'Bb2'.

        Flat spellings are normalized to sharps.

        Raises:
            ValueError: If the text is not a recognizable note, or its octave
                is outside 0-9
        """
        text = str(text).strip()
        pitch_class = NoteMatcher.pitch_class(text)
        if pitch_class is None:
            raise ValueError(f"Invalid note: {text!r}")
        octave_text = NOTE_PATTERN.match(text).group(3)
        octave = int(octave_text) if octave_text else None
        if octave is not None and not is_valid_octave(octave):
            raise ValueError(f"Octave out of range in {text!r}")
        return cls(CHROMATIC_NOTES[pitch_class], octave)

    @classmethod
    def from_frequency(cls, freq: float) -> Note:
        """Nearest equal-tempered note (with octave) for a frequency in Hz."""
        if freq <= 0:
            raise ValueError(f"Frequency must be positive, got {freq}")
        return cls.parse(get_note_name(freq))
