"""Command-line interface for Triad Recall."""

from .main import cli, main

__all__ = ["cli", "main"]
