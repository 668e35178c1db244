"""Fretboard mapping utilities for translating notes and triads to string/fret positions.

Tunings are stored low-to-high: index 0 is the lowest-pitched string. Callers
address strings by their visual number, where string 1 is the highest-pitched
(thinnest) string. ``visual_string_to_tuning_index`` is the single place that
translates between the two.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..logger import get_logger
from ..note_types import HarmonicRole, Note
from ..note_utils import is_valid_string_number
from .triads import Triad, as_note

logger = get_logger(__name__)

Tuning = Tuple[Note, ...]

DEFAULT_MAX_FRET = 12


def _tuning(*names: str) -> Tuning:
    return tuple(Note(name) for name in names)


STANDARD_TUNING: Tuning = _tuning("E", "A", "D", "G", "B", "E")

TUNINGS: Dict[str, Tuning] = {
    "standard": STANDARD_TUNING,
    "drop_d": _tuning("D", "A", "D", "G", "B", "E"),
    "half_step_down": _tuning("D#", "G#", "C#", "F#", "A#", "D#"),
    "open_g": _tuning("D", "G", "D", "G", "B", "D"),
    "open_d": _tuning("D", "A", "D", "F#", "A", "D"),
    "dadgad": _tuning("D", "A", "D", "G", "A", "D"),
    "bass": _tuning("E", "A", "D", "G"),
}


@dataclass(frozen=True)
class FretPosition:
    """A fretted (or open) location on the neck."""

    string: int  # Visual string number, 1 is the highest-pitched string
    fret: int  # 0 for open string
    note: Note
    is_root: bool = False
    is_third: bool = False
    is_fifth: bool = False

    def __str__(self):
        return f"S{self.string}F{self.fret}"

    @property
    def role(self) -> Optional[HarmonicRole]:
        if self.is_root:
            return "root"
        if self.is_third:
            return "third"
        if self.is_fifth:
            return "fifth"
        return None

    def to_dict(self) -> Dict:
        return {
            "string": self.string,
            "fret": self.fret,
            "note": self.note.to_dict(),
            "is_root": self.is_root,
            "is_third": self.is_third,
            "is_fifth": self.is_fifth,
        }


def get_standard_tuning() -> Tuning:
    return STANDARD_TUNING


def get_tuning(name: str) -> Tuning:
    """Look up a named tuning such as 'standard' or 'drop_d'."""
    key = name.strip().lower().replace("-", "_") if isinstance(name, str) else None
    if key not in TUNINGS:
        raise ValueError(
            f"Unknown tuning: {name!r}. Must be one of: {', '.join(TUNINGS)}"
        )
    return TUNINGS[key]


def as_tuning(tuning: Sequence[Union[Note, str]]) -> Tuning:
    """Coerce a low-to-high sequence of notes or note names into a tuning."""
    if not tuning:
        raise ValueError("A tuning needs at least one string")
    return tuple(as_note(n) for n in tuning)


def visual_string_to_tuning_index(visual_string_number: int, string_count: int) -> int:
    """Translate a visual string number (1 = highest pitch) to a low-to-high tuning index.

    Raises:
        ValueError: If the string number is outside 1..string_count
    """
    if not is_valid_string_number(visual_string_number, string_count):
        raise ValueError(
            f"String {visual_string_number} out of range for {string_count} strings"
        )
    return (string_count - 1) - (visual_string_number - 1)


def tuning_index_to_visual_string(tuning_index: int, string_count: int) -> int:
    if not 0 <= tuning_index < string_count:
        raise ValueError(
            f"Tuning index {tuning_index} out of range for {string_count} strings"
        )
    return string_count - tuning_index


def open_string(tuning: Sequence[Union[Note, str]], visual_string_number: int) -> Note:
    tuning = as_tuning(tuning)
    return tuning[visual_string_to_tuning_index(visual_string_number, len(tuning))]


def note_at(
    tuning: Sequence[Union[Note, str]], visual_string_number: int, fret: int
) -> Note:
    """Note sounded on a visual string at a fret."""
    return open_string(tuning, visual_string_number).add_semitones(fret)


def find_note_on_fretboard(
    target: Union[Note, str],
    tuning: Sequence[Union[Note, str]] = STANDARD_TUNING,
    max_fret: int = DEFAULT_MAX_FRET,
) -> List[FretPosition]:
    """Every position up to ``max_fret`` where the target's pitch class sounds.

    Results are ordered by string, then fret, both ascending.
    """
    target = as_note(target)
    tuning = as_tuning(tuning)
    positions: List[FretPosition] = []

    for index, open_note in enumerate(tuning):
        string = tuning_index_to_visual_string(index, len(tuning))
        for fret in range(max_fret + 1):
            fretted = open_note.add_semitones(fret)
            if fretted.name == target.name:
                positions.append(FretPosition(string=string, fret=fret, note=fretted))

    positions.sort(key=lambda p: (p.string, p.fret))
    return positions


def map_triad_to_fretboard(
    triad: Triad,
    tuning: Sequence[Union[Note, str]] = STANDARD_TUNING,
    max_fret: int = DEFAULT_MAX_FRET,
) -> List[FretPosition]:
    """All positions of the triad's chord tones, tagged by harmonic role."""
    tuning = as_tuning(tuning)
    positions: List[FretPosition] = []

    for role, tone in zip(("root", "third", "fifth"), triad.chord_tones()):
        for position in find_note_on_fretboard(tone, tuning, max_fret):
            positions.append(
                replace(
                    position,
                    is_root=role == "root",
                    is_third=role == "third",
                    is_fifth=role == "fifth",
                )
            )

    positions.sort(key=lambda p: (p.string, p.fret))
    logger.debug(
        f"Mapped {triad.symbol} to {len(positions)} positions "
        f"across {len(tuning)} strings (max fret {max_fret})"
    )
    return positions
