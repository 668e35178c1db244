"""Interval calculation utilities."""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List

from ..logger import get_logger
from ..note_types import IntervalQuality, Note
from ..note_utils import SEMITONES_IN_OCTAVE

logger = get_logger(__name__)

# Interval names by semitone distance
INTERVAL_NAMES: Dict[int, str] = {
    0: "unison",
    1: "minor second",
    2: "major second",
    3: "minor third",
    4: "major third",
    5: "perfect fourth",
    6: "augmented fourth",  # or diminished fifth
    7: "perfect fifth",
    8: "minor sixth",
    9: "major sixth",
    10: "minor seventh",
    11: "major seventh",
    12: "octave",
}

INTERVAL_QUALITIES: Dict[int, IntervalQuality] = {
    0: "perfect",
    1: "minor",
    2: "major",
    3: "minor",
    4: "major",
    5: "perfect",
    6: "augmented",
    7: "perfect",
    8: "minor",
    9: "major",
    10: "minor",
    11: "major",
    12: "perfect",
}

CONSONANT_INTERVALS: FrozenSet[int] = frozenset({0, 3, 4, 5, 7, 8, 9, 12})


@dataclass(frozen=True)
class Interval:
    """Distance between two notes with its name and quality."""

    semitones: int
    name: str
    quality: IntervalQuality

    def to_dict(self) -> Dict:
        return {"semitones": self.semitones, "name": self.name, "quality": self.quality}


def get_interval_name(semitones: int) -> str:
    """Name an interval, using 'compound ...' and 'N octaves' above an octave."""
    if semitones > SEMITONES_IN_OCTAVE:
        octaves, remainder = divmod(semitones, SEMITONES_IN_OCTAVE)
        if remainder == 0:
            return f"{octaves} octaves"
        return f"compound {INTERVAL_NAMES[remainder]}"
    if semitones == SEMITONES_IN_OCTAVE:
        return INTERVAL_NAMES[SEMITONES_IN_OCTAVE]
    return INTERVAL_NAMES[semitones % SEMITONES_IN_OCTAVE]


def get_interval_quality(semitones: int) -> IntervalQuality:
    if semitones == SEMITONES_IN_OCTAVE:
        return INTERVAL_QUALITIES[SEMITONES_IN_OCTAVE]
    return INTERVAL_QUALITIES[semitones % SEMITONES_IN_OCTAVE]


def is_consonant(semitones: int) -> bool:
    return semitones % SEMITONES_IN_OCTAVE in CONSONANT_INTERVALS


def invert_interval(semitones: int) -> int:
    """Turn an interval upside down, e.g. a major third (4) becomes a minor sixth (8).

    Unisons and octaves invert to a unison.
    """
    normalized = semitones % SEMITONES_IN_OCTAVE
    if normalized == 0:
        return 0
    return SEMITONES_IN_OCTAVE - normalized


def calculate_interval(from_note: Note, to_note: Note) -> Interval:
    """Ascending interval from ``from_note`` to ``to_note``."""
    semitones = from_note.interval_to(to_note)
    interval = Interval(
        semitones=semitones,
        name=get_interval_name(semitones),
        quality=get_interval_quality(semitones),
    )
    logger.debug(f"Interval {from_note} -> {to_note}: {interval.name}")
    return interval


def get_all_intervals() -> List[Interval]:
    """The twelve simple intervals from unison to major seventh."""
    return [
        Interval(s, get_interval_name(s), get_interval_quality(s))
        for s in range(SEMITONES_IN_OCTAVE)
    ]
