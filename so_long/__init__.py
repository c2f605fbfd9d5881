"""Levels, rules and XPM sprites for a tile-based puzzle game."""

__version__ = "0.1.0"

__all__ = ["__version__"]