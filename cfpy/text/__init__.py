"""Text offsets, ranges and source locations."""

from cfpy.text.text import SourceLocation, TextRange, excerpt_before, locate

__all__ = [
    "SourceLocation",
    "TextRange",
    "excerpt_before",
    "locate",
]
