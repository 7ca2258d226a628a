"""Character cursor over configuration source text."""

from typing import Final

from cfpy.diagnostics import SCANNER_UNEXPECTED_END_OF_INPUT, Diagnostic, DiagnosticSpec
from cfpy.errors import ParseError, parse_error_for
from cfpy.text import SourceLocation, TextRange, excerpt_before, locate

WHITESPACE: Final[frozenset[str]] = frozenset({" ", "\t", "\n", "\r"})
DEFAULT_EXCERPT_LIMIT: Final[int] = 256


class Scanner:
    """Forward-only cursor with peek/consume/match primitives."""

    def __init__(self, source: str, *, excerpt_limit: int = DEFAULT_EXCERPT_LIMIT) -> None:
        self._source = source
        self._position = 0
        self._excerpt_limit = excerpt_limit

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def cursor(self) -> int:
        """Offset of the next unconsumed character."""
        return self._position

    @property
    def is_eof(self) -> bool:
        """Whether every character has been consumed."""
        return self._position >= len(self._source)

    def peek(self) -> str | None:
        """Current character without consuming it, or None at end of input."""
        if self.is_eof:
            return None
        return self._source[self._position]

    def next(self) -> str:
        """Consume and return the current character."""
        if self.is_eof:
            raise self.error(SCANNER_UNEXPECTED_END_OF_INPUT)
        ch = self._source[self._position]
        self._position += 1
        return ch

    def eat(self, ch: str) -> bool:
        """Consume `ch` if it is the current character."""
        if self.peek() == ch:
            self._position += 1
            return True
        return False

    def eat_whitespace(self) -> bool:
        """Consume a run of whitespace; True if anything was consumed."""
        start = self._position
        while not self.is_eof and self._source[self._position] in WHITESPACE:
            self._position += 1
        return self._position > start

    def slice_between(self, begin: int, end: int) -> str:
        """Source text in [begin, end)."""
        if end > len(self._source):
            raise ValueError(f"Invalid slice [{begin}, {end}) for source of length {len(self._source)}")
        return TextRange.between(begin, end).slice(self._source)

    def location(self, offset: int | None = None) -> SourceLocation:
        """Line/column of `offset` (default: the cursor)."""
        return locate(self._source, self._position if offset is None else offset)

    def trace(self, offset: int | None = None, limit: int | None = None) -> str:
        """Excerpt of the source leading up to `offset` (default: the cursor)."""
        return excerpt_before(
            self._source,
            self._position if offset is None else offset,
            self._excerpt_limit if limit is None else limit,
        )

    def error(
        self,
        spec: DiagnosticSpec,
        *,
        message: str | None = None,
        start: int | None = None,
        end: int | None = None,
    ) -> ParseError:
        """Build (not raise) the ParseError for `spec` at the given range.

        The range defaults to the empty range at the cursor.
        """
        begin = self._position if start is None else start
        finish = begin if end is None else max(end, begin)
        finish = min(finish, len(self._source))
        begin = min(begin, finish)
        diagnostic = Diagnostic.from_spec(
            spec,
            range=TextRange.between(begin, finish),
            location=self.location(begin),
            excerpt=self.trace(begin),
            message=message,
        )
        return parse_error_for(diagnostic)
