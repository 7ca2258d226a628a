"""Dotted query paths."""

from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "."


@dataclass(frozen=True, slots=True)
class QueryPath:
    """A `.`-separated path split into its segments."""

    raw: str
    segments: tuple[str, ...]

    @staticmethod
    def parse(path: str) -> QueryPath | None:
        """Split `path`; None if it is empty or has an empty segment."""
        if not path:
            return None
        segments = tuple(path.split(SEPARATOR))
        if any(not segment for segment in segments):
            return None
        return QueryPath(raw=path, segments=segments)

    @property
    def parents(self) -> tuple[str, ...]:
        return self.segments[:-1]

    @property
    def leaf(self) -> str:
        return self.segments[-1]

    @property
    def is_single_segment(self) -> bool:
        return len(self.segments) == 1

    def __str__(self) -> str:
        return self.raw
