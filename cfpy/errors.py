"""Error hierarchy for cfpy."""

from __future__ import annotations

from typing import Any

from cfpy.diagnostics import (
    LOADER_FILE_TOO_LARGE,
    LOADER_IO_ERROR,
    PARSER_INVALID_FORMAT,
    PARSER_INVALID_KEYWORD,
    PARSER_INVALID_NUMBER,
    PARSER_INVALID_TOKEN,
    PARSER_MAX_DEPTH_EXCEEDED,
    QUERY_INTEGER_OVERFLOW,
    QUERY_INVALID_QUERY,
    QUERY_UNEXPECTED_DATA_TYPE,
    SCANNER_UNEXPECTED_END_OF_INPUT,
    Diagnostic,
)

__all__ = [
    "CfpError",
    "ConfigIOError",
    "ParseError",
    "InvalidFormatError",
    "InvalidTokenError",
    "InvalidKeywordError",
    "InvalidNumberError",
    "UnexpectedEndOfInputError",
    "MaxDepthExceededError",
    "QueryError",
    "InvalidQueryError",
    "UnexpectedDataTypeError",
    "IntegerOverflowError",
    "parse_error_for",
]


class CfpError(Exception):
    """Base error for all cfpy errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigIOError(CfpError):
    """Raised when a configuration file cannot be read."""

    def __init__(self, path: str, reason: str, *, too_large: bool = False) -> None:
        spec = LOADER_FILE_TOO_LARGE if too_large else LOADER_IO_ERROR
        super().__init__(
            code=spec.code,
            message=f"{spec.message} {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @property
    def path(self) -> str:
        return self.details["path"]


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------


class ParseError(CfpError):
    """Raised when source text is not a valid configuration document.

    Carries the diagnostic with the failing offset, its line/column and a
    bounded excerpt of the source preceding it.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(
            code=diagnostic.code,
            message=diagnostic.message,
            details={"offset": diagnostic.range.start},
        )
        self.diagnostic = diagnostic

    @property
    def offset(self) -> int:
        return self.diagnostic.range.start

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def column(self) -> int:
        return self.diagnostic.column

    @property
    def excerpt(self) -> str:
        return self.diagnostic.excerpt

    def __str__(self) -> str:
        return f"[{self.code}] {self.message} at line {self.diagnostic.location}"


class InvalidFormatError(ParseError):
    """A block mixes properties and sections, or a property is top-level."""


class InvalidTokenError(ParseError):
    """Malformed literal or misplaced punctuation."""


class InvalidKeywordError(ParseError):
    """Keyword contains non-identifier characters."""


class InvalidNumberError(ParseError):
    """Number literal is unparseable or out of the 64-bit range."""


class UnexpectedEndOfInputError(ParseError):
    """Source ended inside a token, list or block."""


class MaxDepthExceededError(ParseError):
    """Section nesting is deeper than the configured limit."""


_PARSE_ERRORS: dict[str, type[ParseError]] = {
    PARSER_INVALID_FORMAT.code: InvalidFormatError,
    PARSER_INVALID_TOKEN.code: InvalidTokenError,
    PARSER_INVALID_KEYWORD.code: InvalidKeywordError,
    PARSER_INVALID_NUMBER.code: InvalidNumberError,
    SCANNER_UNEXPECTED_END_OF_INPUT.code: UnexpectedEndOfInputError,
    PARSER_MAX_DEPTH_EXCEEDED.code: MaxDepthExceededError,
}


def parse_error_for(diagnostic: Diagnostic) -> ParseError:
    """Build the ParseError subclass matching the diagnostic code."""
    error_type = _PARSE_ERRORS.get(diagnostic.code, ParseError)
    return error_type(diagnostic)


# ---------------------------------------------------------------------------
# Query errors
# ---------------------------------------------------------------------------


class QueryError(CfpError):
    """Base error for failed document queries."""

    def __init__(self, code: str, message: str, path: str, **details: Any) -> None:
        super().__init__(code=code, message=message, details={"path": path, **details})

    @property
    def path(self) -> str:
        return self.details["path"]


class InvalidQueryError(QueryError):
    """Raised when a path does not resolve to a property."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        message = f"{QUERY_INVALID_QUERY.message} ({path!r})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(QUERY_INVALID_QUERY.code, message, path)


class UnexpectedDataTypeError(QueryError):
    """Raised when a resolved value is not of the requested kind."""

    def __init__(self, path: str, expected: str, found: str) -> None:
        super().__init__(
            QUERY_UNEXPECTED_DATA_TYPE.code,
            f"{QUERY_UNEXPECTED_DATA_TYPE.message} ({path!r}): expected {expected}, found {found}",
            path,
            expected=expected,
            found=found,
        )

    @property
    def expected(self) -> str:
        return self.details["expected"]

    @property
    def found(self) -> str:
        return self.details["found"]


class IntegerOverflowError(QueryError):
    """Raised when a resolved integer does not fit the requested width."""

    def __init__(self, path: str, value: int, width: str) -> None:
        super().__init__(
            QUERY_INTEGER_OVERFLOW.code,
            f"{QUERY_INTEGER_OVERFLOW.message} ({path!r}): {value} is out of range for {width}",
            path,
            value=value,
            width=width,
        )

    @property
    def value(self) -> int:
        return self.details["value"]

    @property
    def width(self) -> str:
        return self.details["width"]
