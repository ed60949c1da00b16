"""Building blocks for a small shell: character and string helpers, line reading, environment entries and builtins."""

__version__ = "0.1.0"
__all__ = ["chars", "text", "linereader", "environment", "builtins"]