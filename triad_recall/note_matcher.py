import re
from typing import Optional

from .logger import get_logger
from .note_utils import CHROMATIC_NOTES, SEMITONE_MAP

# Get logger for this module
logger = get_logger(__name__)

# Compile regex to extract note name and octave
# This pattern matches:
# - Note letter (A-G, case insensitive)
# - Up to two accidentals (#, b, x for double sharp)
# - Optional octave number (0-9+)
NOTE_PATTERN = re.compile(r"^([A-Ga-g])([#bx]{0,2})(-?[0-9]*)$")

_ACCIDENTAL_OFFSETS = {"#": 1, "x": 2, "b": -1}


class NoteMatcher:
    """
    Encapsulates logic for comparing note spellings, including
    normalization and enharmonic equivalence.
    """

    @staticmethod
    def pitch_class(note: str) -> Optional[int]:
        """Pitch class (0-11) of a spelled note, or None if unparseable.

        Examples:
            >>> NoteMatcher.pitch_class('Bb2')  # 10
            >>> NoteMatcher.pitch_class('E#')  # 5
        """
        match = NOTE_PATTERN.match(str(note).strip())
        if not match:
            return None
        letter, accidentals, _ = match.groups()
        offset = sum(_ACCIDENTAL_OFFSETS[a] for a in accidentals)
        return (SEMITONE_MAP[letter.upper()] + offset) % 12

    @classmethod
    def normalize_to_sharp(cls, note: str) -> Optional[str]:
        """Sharp spelling of a note's pitch class, dropping any octave.

        Examples:
            >>> NoteMatcher.normalize_to_sharp('Bb2')  # 'A#'
            >>> NoteMatcher.normalize_to_sharp('Cb')  # 'B'
        """
        pitch_class = cls.pitch_class(note)
        return None if pitch_class is None else CHROMATIC_NOTES[pitch_class]

    @classmethod
    def match(cls, target: str, played: str) -> bool:
        """
        Check if the played note matches the target note, ignoring octave.

        Args:
            target: The target note (e.g., 'A', 'A#', 'Bb')
            played: The played note (e.g., 'A4', 'A#3', 'Bb2')
        Returns:
            bool: True if the notes match (ignoring octave), False otherwise
        """
        target = str(target).strip() if target is not None else ""
        played = str(played).strip() if played is not None else ""

        if not target or not played:
            logger.warning(f"Empty input - Target: '{target}', Played: '{played}'")
            return False

        target_pc = cls.pitch_class(target)
        played_pc = cls.pitch_class(played)

        if target_pc is None or played_pc is None:
            logger.warning(
                f"Invalid note format - Target: '{target}' (valid: {target_pc is not None}), "
                f"Played: '{played}' (valid: {played_pc is not None})"
            )
            return False

        matched = target_pc == played_pc
        logger.debug(
            f"Matching '{played}' against '{target}': "
            f"{played_pc} vs {target_pc} -> {'match' if matched else 'no match'}"
        )
        return matched
