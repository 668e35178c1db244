"""Core components for the Triad Recall application."""

from .config import ConfigManager

__all__ = ["ConfigManager"]
