from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """Half-open range [start, end) of character offsets.

    Invariant: 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0:
            raise ValueError("TextRange offsets cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def between(start: int, end: int) -> "TextRange":
        return TextRange(start, end)

    def slice(self, source: str) -> str:
        return source[self.start : self.end]


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """1-based line/column of an offset."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


def locate(source: str, offset: int) -> SourceLocation:
    """Compute the line/column of `offset`.

    Offsets past the end clamp to the end of the source.
    """
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return SourceLocation(line=line, column=offset - line_start + 1)


def excerpt_before(source: str, offset: int, limit: int) -> str:
    """Return at most `limit` characters of source ending at `offset`."""
    offset = max(0, min(offset, len(source)))
    return source[max(0, offset - limit) : offset]
