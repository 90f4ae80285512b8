"""String, character, formatting, line-reading, colour-name and XPM image utilities."""

__version__ = "0.1.0"
__all__ = ["chars", "colors", "lines", "printf", "strings", "wordtab", "xpm"]