"""Playable chord shape selection.

Voicings are built per fret window: one open-position window (frets 0-3)
followed by one window per neck position 1-7 spanning five frets. Each
window yields at most one shape, which always contains the root, third and
fifth on distinct strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..logger import get_logger
from ..note_types import Difficulty, Note
from .fretboard import (
    DEFAULT_MAX_FRET,
    STANDARD_TUNING,
    FretPosition,
    as_tuning,
    map_triad_to_fretboard,
)
from .triads import Triad

logger = get_logger(__name__)

OPEN_POSITION_MAX_FRET = 3
WINDOW_SPAN = 4
NECK_POSITIONS = range(1, 8)
BEGINNER_MAX_NECK_POSITION = 3

MIN_POSITIONS = 3
MAX_POSITIONS = 6
# Root plus at most three thirds/fifths
MAX_SELECTED = 4
MAX_FINGER = 4


@dataclass(frozen=True)
class ChordVoicing:
    """A concrete fingerable shape of a triad."""

    triad: Triad
    positions: Tuple[FretPosition, ...]  # Sorted by string ascending
    fingering: Tuple[int, ...]  # One finger per position, 0 = open
    difficulty: Difficulty
    neck_position: int

    @property
    def fret_span(self) -> int:
        """Distance between the highest fret and the lowest fretted (non-open) fret."""
        fretted = [p.fret for p in self.positions if p.fret > 0]
        if not fretted:
            return 0
        return max(fretted) - min(fretted)

    @property
    def shape(self) -> str:
        return "-".join(f"{p.string}:{p.fret}" for p in self.positions)

    def to_tab(self, string_count: int = len(STANDARD_TUNING)) -> str:
        """Chord chart notation from the lowest string up, e.g. 'x3201x'.

        Shapes reaching fret 10 or higher are written with dashes ('x-10-9-9-x-x').
        """
        frets = {p.string: p.fret for p in self.positions}
        # Lowest string has the highest visual number
        cells = [
            str(frets[s]) if s in frets else "x" for s in range(string_count, 0, -1)
        ]
        separator = "-" if any(fret >= 10 for fret in frets.values()) else ""
        return separator.join(cells)

    def to_dict(self) -> Dict:
        return {
            "triad": self.triad.to_dict(),
            "positions": [p.to_dict() for p in self.positions],
            "fingering": list(self.fingering),
            "difficulty": self.difficulty,
            "neck_position": self.neck_position,
        }


def generate_fingering(positions: Sequence[FretPosition]) -> List[int]:
    """Finger number per position: 0 for open strings, otherwise the fret capped at 4."""
    return [0 if p.fret == 0 else min(p.fret, MAX_FINGER) for p in positions]


def _covers_all_roles(positions: Sequence[FretPosition]) -> bool:
    return (
        any(p.is_root for p in positions)
        and any(p.is_third for p in positions)
        and any(p.is_fifth for p in positions)
    )


def select_voicing(
    triad: Triad,
    available: Sequence[FretPosition],
    difficulty: Difficulty,
    neck_position: int,
) -> Optional[ChordVoicing]:
    """Pick one position per string from a window of candidate positions.

    Args:
        triad: The chord being voiced
        available: Tagged positions inside the window, sorted by (string, fret)
        difficulty: Difficulty label to attach
        neck_position: Lower fret bound of the window

    Returns:
        A voicing, or None if the window cannot hold a complete shape
    """
    if not _covers_all_roles(available):
        return None

    selected: List[FretPosition] = []
    used_strings = set()

    # Root on the lowest-pitched string available
    roots = [p for p in available if p.is_root]
    best_root = max(roots, key=lambda p: p.string)
    selected.append(best_root)
    used_strings.add(best_root.string)

    for position in available:
        if position.string in used_strings or len(selected) >= MAX_POSITIONS:
            continue
        if (position.is_third or position.is_fifth) and len(selected) < MAX_SELECTED:
            selected.append(position)
            used_strings.add(position.string)

    if len(selected) < MIN_POSITIONS or not _covers_all_roles(selected):
        logger.debug(
            f"No complete {triad.symbol} shape at neck position {neck_position}"
        )
        return None

    selected.sort(key=lambda p: p.string)
    return ChordVoicing(
        triad=triad,
        positions=tuple(selected),
        fingering=tuple(generate_fingering(selected)),
        difficulty=difficulty,
        neck_position=neck_position,
    )


def generate_chord_voicings(
    triad: Triad, tuning: Sequence[Union[Note, str]] = STANDARD_TUNING
) -> List[ChordVoicing]:
    """Playable shapes of ``triad``, open position first, then by neck position.

    An empty list means no window holds a complete shape; it is not an error.
    """
    tuning = as_tuning(tuning)
    all_positions = map_triad_to_fretboard(triad, tuning, DEFAULT_MAX_FRET)

    windows: List[Tuple[List[FretPosition], Difficulty, int]] = [
        ([p for p in all_positions if p.fret <= OPEN_POSITION_MAX_FRET], "beginner", 0)
    ]
    for neck_position in NECK_POSITIONS:
        in_range = [
            p
            for p in all_positions
            if neck_position <= p.fret <= neck_position + WINDOW_SPAN
        ]
        difficulty: Difficulty = (
            "beginner" if neck_position <= BEGINNER_MAX_NECK_POSITION else "intermediate"
        )
        windows.append((in_range, difficulty, neck_position))

    voicings: List[ChordVoicing] = []
    for available, difficulty, neck_position in windows:
        voicing = select_voicing(triad, available, difficulty, neck_position)
        if voicing is not None:
            voicings.append(voicing)

    logger.debug(f"Generated {len(voicings)} voicings for {triad.symbol}")
    return voicings
