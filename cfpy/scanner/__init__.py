"""Scanner."""

from cfpy.scanner.comments import skip_comments
from cfpy.scanner.scanner import (
    DEFAULT_EXCERPT_LIMIT,
    WHITESPACE,
    Scanner,
)

__all__ = [
    "DEFAULT_EXCERPT_LIMIT",
    "WHITESPACE",
    "Scanner",
    "skip_comments",
]
