"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


SCANNER_UNEXPECTED_END_OF_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNEXPECTED_END_OF_INPUT",
    message="Unexpected end of input.",
    hint="Check for an unterminated string, list or block.",
    severity="error",
    category="scanner",
)

PARSER_INVALID_FORMAT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_FORMAT",
    message="Invalid document structure.",
    hint="A block holds either properties or sections, never both, and properties must live inside a section.",
    severity="error",
    category="parser",
)

PARSER_INVALID_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_TOKEN",
    message="Invalid token.",
    severity="error",
    category="parser",
)

PARSER_INVALID_KEYWORD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_KEYWORD",
    message="Invalid keyword.",
    hint="Keywords may only contain ASCII letters, digits and `_`.",
    severity="error",
    category="parser",
)

PARSER_INVALID_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_NUMBER",
    message="Invalid number literal.",
    hint="Numbers are base-10 signed 64-bit integers, e.g. `-42`.",
    severity="error",
    category="parser",
)

PARSER_MAX_DEPTH_EXCEEDED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MAX_DEPTH_EXCEEDED",
    message="Maximum section nesting depth exceeded.",
    hint="Flatten the configuration or raise `ParserOptions.max_depth`.",
    severity="error",
    category="parser",
)

QUERY_INVALID_QUERY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="QUERY_INVALID_QUERY",
    message="Query path does not resolve to a property.",
    severity="error",
    category="query",
)

QUERY_UNEXPECTED_DATA_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="QUERY_UNEXPECTED_DATA_TYPE",
    message="Property holds a different data type.",
    severity="error",
    category="query",
)

QUERY_INTEGER_OVERFLOW: Final[DiagnosticSpec] = DiagnosticSpec(
    code="QUERY_INTEGER_OVERFLOW",
    message="Integer does not fit the requested width.",
    severity="error",
    category="query",
)

LOADER_IO_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LOADER_IO_ERROR",
    message="Unable to read configuration file.",
    severity="error",
    category="loader",
)

LOADER_FILE_TOO_LARGE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LOADER_FILE_TOO_LARGE",
    message="Configuration file exceeds the maximum allowed size.",
    severity="error",
    category="loader",
)
