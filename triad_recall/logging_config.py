"""Centralized logging configuration for Triad Recall.

This module provides a consistent way to configure logging across the application.
"""

import logging
import sys
from typing import Optional

# Log levels for different modules
MODULE_LOG_LEVELS = {
    # Core modules
    "triad_recall": logging.INFO,
    "triad_recall.note_types": logging.INFO,
    "triad_recall.note_utils": logging.INFO,
    "triad_recall.note_matcher": logging.INFO,  # Set to DEBUG for detailed matching info
    # Engine
    "triad_recall.services": logging.INFO,
    "triad_recall.services.intervals": logging.INFO,
    "triad_recall.services.triads": logging.INFO,
    "triad_recall.services.fretboard": logging.INFO,
    "triad_recall.services.voicings": logging.INFO,
    "triad_recall.services.database": logging.INFO,
    "triad_recall.core": logging.WARNING,
    "triad_recall.cli": logging.WARNING,
    "triad_recall.logger": logging.WARNING,  # Logger module itself should be quiet
    # Root logger
    "": logging.ERROR,
}

# Shared console handler
_console_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """Set up logging configuration for the application.

    Args:
        level: If provided, override all 'triad_recall' log levels with this level (e.g., "DEBUG").
    """
    global _console_handler

    # Create a single, shared console handler if it doesn't exist
    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        _console_handler.setFormatter(formatter)

    log_levels = MODULE_LOG_LEVELS.copy()
    if level:
        numeric_level = logging.getLevelName(level.upper())
        if isinstance(numeric_level, int):
            for module_name in log_levels:
                if module_name.startswith("triad_recall"):
                    log_levels[module_name] = numeric_level
        else:
            logging.getLogger(__name__).error(f"Invalid log level: {level}")

    # Apply module-specific levels
    for module_name, module_level in log_levels.items():
        logger = logging.getLogger(module_name if module_name else "")
        logger.setLevel(module_level)

        # Clear existing handlers and add the shared one
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        if _console_handler not in logger.handlers:
            logger.addHandler(_console_handler)
        logger.propagate = False

    logging.getLogger("triad_recall").debug("Logging configuration complete")

