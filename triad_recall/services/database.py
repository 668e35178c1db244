"""Precomputed triad database and lookups.

The database holds every root/quality combination with its fretboard
positions and voicings, indexed by root, quality, difficulty and neck
position. It is plain JSON-compatible data so it can be written to disk
and loaded back without recomputation.
"""

import copy
import json
import random
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from ..logger import get_logger
from ..note_matcher import NoteMatcher
from ..note_types import Note
from ..note_utils import (
    CHROMATIC_NOTES,
    DIFFICULTY_LEVELS,
    TRIAD_QUALITIES,
    is_valid_difficulty,
    is_valid_neck_position,
    is_valid_triad_quality,
)
from .fretboard import STANDARD_TUNING, as_tuning, map_triad_to_fretboard
from .triads import generate_triad
from .voicings import generate_chord_voicings

logger = get_logger(__name__)

DATABASE_VERSION = "1.0.0"
COMMON_MAX_NECK_POSITION = 5

Entry = Dict[str, Any]
VoicingEntry = Dict[str, Any]


def _is_common(voicing: VoicingEntry) -> bool:
    return voicing["difficulty"] == "beginner" or (
        voicing["difficulty"] == "intermediate"
        and voicing["neck_position"] <= COMMON_MAX_NECK_POSITION
    )


def build_triad_database(
    tuning: Sequence[Union[Note, str]] = STANDARD_TUNING,
    tuning_name: str = "standard",
) -> Dict[str, Any]:
    """Compute every triad, its positions and its voicings for a tuning.

    Args:
        tuning: Open strings, low-to-high
        tuning_name: Label stored alongside the tuning

    Returns:
        A JSON-serializable database dictionary
    """
    tuning = as_tuning(tuning)
    logger.info(f"Building triad database for {tuning_name} tuning...")

    database: Dict[str, Any] = {
        "version": DATABASE_VERSION,
        "generated": datetime.now(timezone.utc).isoformat(),
        "instrument": "bass" if len(tuning) == 4 else "guitar",
        "tuning_name": tuning_name,
        "tuning": [n.to_dict() for n in tuning],
        "triads": {},
        "index": {
            "by_root": {},
            "by_quality": {q: [] for q in TRIAD_QUALITIES},
            "by_difficulty": {d: [] for d in DIFFICULTY_LEVELS},
            "by_neck_position": {},
        },
        "stats": {
            "total_triads": 0,
            "total_voicings": 0,
            "total_positions": 0,
            "voicings_by_difficulty": {d: 0 for d in DIFFICULTY_LEVELS},
        },
    }
    index = database["index"]
    stats = database["stats"]

    for note_name in CHROMATIC_NOTES:
        database["triads"][note_name] = {}
        index["by_root"][note_name] = []

        for quality in TRIAD_QUALITIES:
            triad = generate_triad(Note(note_name), quality)
            positions = [p.to_dict() for p in map_triad_to_fretboard(triad, tuning)]

            voicings = []
            for voicing in generate_chord_voicings(triad, tuning):
                data = voicing.to_dict()
                data["shape"] = voicing.shape
                data["tab"] = voicing.to_tab(len(tuning))
                voicings.append(data)

            entry: Entry = {
                "triad": triad.to_dict(),
                "fretboard_positions": positions,
                "voicings": voicings,
                "common_voicings": [v for v in voicings if _is_common(v)],
            }

            database["triads"][note_name][quality] = entry
            index["by_root"][note_name].append(entry)
            index["by_quality"][quality].append(entry)

            for voicing in voicings:
                index["by_difficulty"][voicing["difficulty"]].append(voicing)
                stats["voicings_by_difficulty"][voicing["difficulty"]] += 1
                # JSON object keys are strings
                index["by_neck_position"].setdefault(
                    str(voicing["neck_position"]), []
                ).append(voicing)

            stats["total_triads"] += 1
            stats["total_voicings"] += len(voicings)
            stats["total_positions"] += len(positions)
            logger.debug(f"  {triad.symbol}: {len(voicings)} voicings")

    logger.info(
        f"Generated database with {stats['total_triads']} triads, "
        f"{stats['total_voicings']} voicings"
    )
    return database


def save_triad_database(database: Dict[str, Any], path: Union[str, Path]) -> bool:
    """Write a database to a JSON file.

    Returns:
        True if saved successfully, False otherwise
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(database, f, indent=2, ensure_ascii=False)
        logger.info(f"Saved triad database to {path}")
        return True
    except OSError as e:
        logger.error(f"Error saving triad database to {path}: {e}")
        return False


class TriadDatabase:
    """Read-only lookups over a built triad database.

    Lookups return copies, so callers may edit results without touching the
    shared indexes.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        """Initialize the lookup layer.

        Args:
            data: A dictionary from build_triad_database, or None to build
                one for standard tuning
        """
        self.data = data if data is not None else build_triad_database()

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> Optional["TriadDatabase"]:
        """Load a database written by save_triad_database.

        Returns:
            The database, or None if the file cannot be read or is not a
            triad database
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading triad database from {path}: {e}")
            return None

        if not isinstance(data, dict) or not all(
            key in data for key in ("triads", "index", "stats")
        ):
            logger.error(f"Error loading triad database from {path}: missing sections")
            return None

        logger.info(f"Loaded triad database from {path}")
        return cls(data)

    @staticmethod
    def _log_validation_error(operation: str, param: str, value: Any) -> None:
        logger.error(f"Validation failed in '{operation}': Invalid {param}: {value!r}")

    @staticmethod
    def _resolve_root(root: Any) -> Optional[str]:
        """Sharp spelling of a root name, accepting flats and octaves ('Bb', 'c#3')."""
        if not isinstance(root, str):
            return None
        return NoteMatcher.normalize_to_sharp(root)

    def _all_entries(self) -> List[Entry]:
        return [
            entry
            for root_triads in self.data["triads"].values()
            for entry in root_triads.values()
        ]

    def get_triad(self, root: str, quality: str) -> Optional[Entry]:
        name = self._resolve_root(root)
        if name is None:
            self._log_validation_error("get_triad", "root", root)
            return None
        if not is_valid_triad_quality(quality):
            self._log_validation_error("get_triad", "quality", quality)
            return None
        return copy.deepcopy(self.data["triads"].get(name, {}).get(quality))

    def get_triads_by_root(self, root: str) -> List[Entry]:
        name = self._resolve_root(root)
        if name is None:
            self._log_validation_error("get_triads_by_root", "root", root)
            return []
        return copy.deepcopy(self.data["index"]["by_root"].get(name, []))

    def get_triads_by_quality(self, quality: str) -> List[Entry]:
        if not is_valid_triad_quality(quality):
            self._log_validation_error("get_triads_by_quality", "quality", quality)
            return []
        return copy.deepcopy(self.data["index"]["by_quality"].get(quality, []))

    def get_voicings_by_difficulty(self, difficulty: str) -> List[VoicingEntry]:
        if not is_valid_difficulty(difficulty):
            self._log_validation_error(
                "get_voicings_by_difficulty", "difficulty", difficulty
            )
            return []
        return copy.deepcopy(self.data["index"]["by_difficulty"].get(difficulty, []))

    def get_voicings_by_neck_position(self, position: int) -> List[VoicingEntry]:
        if not is_valid_neck_position(position):
            self._log_validation_error(
                "get_voicings_by_neck_position", "position", position
            )
            return []
        return copy.deepcopy(
            self.data["index"]["by_neck_position"].get(str(position), [])
        )

    def find_triads(
        self, root: Optional[str] = None, quality: Optional[str] = None
    ) -> List[Entry]:
        if root and quality:
            entry = self.get_triad(root, quality)
            return [entry] if entry else []
        if root:
            return self.get_triads_by_root(root)
        if quality:
            return self.get_triads_by_quality(quality)
        return copy.deepcopy(self._all_entries())

    def find_voicings(
        self,
        root: Optional[str] = None,
        quality: Optional[str] = None,
        difficulty: Optional[str] = None,
        neck_position: Optional[int] = None,
        max_fret: Optional[int] = None,
        include_open_strings: bool = True,
    ) -> List[VoicingEntry]:
        """Voicings of the matching triads, narrowed by the given filters."""
        voicings = [v for entry in self.find_triads(root, quality) for v in entry["voicings"]]

        if difficulty:
            voicings = [v for v in voicings if v["difficulty"] == difficulty]
        if neck_position is not None:
            voicings = [v for v in voicings if v["neck_position"] == neck_position]
        if max_fret is not None:
            voicings = [
                v for v in voicings if all(p["fret"] <= max_fret for p in v["positions"])
            ]
        if not include_open_strings:
            voicings = [v for v in voicings if all(p["fret"] > 0 for p in v["positions"])]

        return voicings

    def get_random_triad(
        self,
        quality: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ) -> Optional[Entry]:
        if quality is not None and not is_valid_triad_quality(quality):
            self._log_validation_error("get_random_triad", "quality", quality)
            return None

        entries = (
            self.data["index"]["by_quality"].get(quality, [])
            if quality
            else self._all_entries()
        )
        if not entries:
            return None
        return copy.deepcopy((rng or random).choice(entries))

    def get_common_voicings(self, root: str, quality: str) -> List[VoicingEntry]:
        entry = self.get_triad(root, quality)
        return entry["common_voicings"] if entry else []

    def get_stats(self) -> Dict[str, Any]:
        return {
            **copy.deepcopy(self.data["stats"]),
            "version": self.data.get("version", "unknown"),
            "generated": self.data.get("generated", "unknown"),
            "instrument": self.data.get("instrument", "unknown"),
        }

    def get_all_triad_symbols(self) -> List[str]:
        return sorted({entry["triad"]["symbol"] for entry in self._all_entries()})
