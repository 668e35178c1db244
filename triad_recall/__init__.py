"""Triad Recall - guitar triad theory and fretboard mapping engine."""

from .note_types import Note

__version__ = "0.1.0"

__all__ = ["Note", "__version__"]
