"""Triad generation utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..logger import get_logger
from ..note_types import Note, TriadQuality
from ..note_utils import CHROMATIC_NOTES, TRIAD_QUALITIES

logger = get_logger(__name__)

# Semitone offsets of root, third and fifth
TRIAD_PATTERNS: Dict[str, Tuple[int, int, int]] = {
    "major": (0, 4, 7),
    "minor": (0, 3, 7),
    "diminished": (0, 3, 6),
    "augmented": (0, 4, 8),
}

TRIAD_SYMBOLS: Dict[str, str] = {
    "major": "",
    "minor": "m",
    "diminished": "°",
    "augmented": "+",
}


@dataclass(frozen=True)
class Triad:
    """Root-position three note chord."""

    root: Note
    third: Note
    fifth: Note
    quality: TriadQuality
    symbol: str  # e.g. 'C', 'Cm', 'C°', 'C+'

    def chord_tones(self) -> Tuple[Note, Note, Note]:
        return (self.root, self.third, self.fifth)

    def to_dict(self) -> Dict:
        return {
            "root": self.root.to_dict(),
            "third": self.third.to_dict(),
            "fifth": self.fifth.to_dict(),
            "quality": self.quality,
            "symbol": self.symbol,
        }


def as_note(note: Union[Note, str]) -> Note:
    return note if isinstance(note, Note) else Note.parse(note)


def get_triad_pattern(quality: TriadQuality) -> List[int]:
    if quality not in TRIAD_PATTERNS:
        raise ValueError(
            f"Unknown triad quality: {quality!r}. "
            f"Must be one of: {', '.join(TRIAD_QUALITIES)}"
        )
    return list(TRIAD_PATTERNS[quality])


def generate_triad(root: Union[Note, str], quality: TriadQuality) -> Triad:
    """Build the triad of the given quality on ``root``.

    Args:
        root: Root note, or a note name such as 'C#'
        quality: 'major', 'minor', 'diminished' or 'augmented'

    Returns:
        The triad with its third and fifth derived from the quality's pattern

    Raises:
        ValueError: If the root or quality is not recognized
    """
    root = as_note(root)
    pattern = get_triad_pattern(quality)

    return Triad(
        root=root,
        third=root.add_semitones(pattern[1]),
        fifth=root.add_semitones(pattern[2]),
        quality=quality,
        symbol=f"{root.name}{TRIAD_SYMBOLS[quality]}",
    )


def get_all_triads(quality: TriadQuality) -> List[Triad]:
    """One triad per chromatic root, starting at C."""
    return [generate_triad(Note(name), quality) for name in CHROMATIC_NOTES]


def get_all_triad_qualities() -> List[str]:
    return list(TRIAD_QUALITIES)


def get_chord_tones(triad: Triad) -> List[Note]:
    return list(triad.chord_tones())


def identify_triad(notes: Iterable[Union[Note, str]]) -> Optional[Triad]:
    """Find the triad whose pitch classes are exactly the given three notes.

    Roots are tried in ascending semitone order, qualities in canonical
    order, and the first match wins.
    """
    notes = [as_note(n) for n in notes]
    if len(notes) != 3:
        return None

    names = {n.name for n in notes}
    for candidate in sorted(notes, key=lambda n: n.semitone_value()):
        for quality in TRIAD_QUALITIES:
            triad = generate_triad(Note(candidate.name), quality)
            if {t.name for t in triad.chord_tones()} == names:
                logger.debug(f"Identified {triad.symbol} from {[str(n) for n in notes]}")
                return triad

    return None
