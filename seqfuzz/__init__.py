"""Edit distances, edit operations and fuzzy ratios for arbitrary sequences."""

__version__ = "0.1.0"