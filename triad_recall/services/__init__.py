"""Music-theory and fretboard-mapping services."""

from .intervals import (
    Interval,
    calculate_interval,
    get_all_intervals,
    get_interval_name,
    get_interval_quality,
    invert_interval,
    is_consonant,
)
from .triads import (
    Triad,
    generate_triad,
    get_all_triad_qualities,
    get_all_triads,
    get_chord_tones,
    get_triad_pattern,
    identify_triad,
)
from .fretboard import (
    STANDARD_TUNING,
    TUNINGS,
    FretPosition,
    find_note_on_fretboard,
    get_standard_tuning,
    get_tuning,
    map_triad_to_fretboard,
    note_at,
    visual_string_to_tuning_index,
)
from .voicings import ChordVoicing, generate_chord_voicings
from .database import TriadDatabase, build_triad_database, save_triad_database

__all__ = [
    "Interval",
    "calculate_interval",
    "get_all_intervals",
    "get_interval_name",
    "get_interval_quality",
    "invert_interval",
    "is_consonant",
    "Triad",
    "generate_triad",
    "get_all_triad_qualities",
    "get_all_triads",
    "get_chord_tones",
    "get_triad_pattern",
    "identify_triad",
    "STANDARD_TUNING",
    "TUNINGS",
    "FretPosition",
    "find_note_on_fretboard",
    "get_standard_tuning",
    "get_tuning",
    "map_triad_to_fretboard",
    "note_at",
    "visual_string_to_tuning_index",
    "ChordVoicing",
    "generate_chord_voicings",
    "TriadDatabase",
    "build_triad_database",
    "save_triad_database",
]
