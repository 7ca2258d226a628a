"""Diagnostics."""

from cfpy.diagnostics.codes import (
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
    DiagnosticSpec,
    Severity,
)
from cfpy.diagnostics.diagnostic import Diagnostic

__all__ = [
    "LOADER_FILE_TOO_LARGE",
    "LOADER_IO_ERROR",
    "PARSER_INVALID_FORMAT",
    "PARSER_INVALID_KEYWORD",
    "PARSER_INVALID_NUMBER",
    "PARSER_INVALID_TOKEN",
    "PARSER_MAX_DEPTH_EXCEEDED",
    "QUERY_INTEGER_OVERFLOW",
    "QUERY_INVALID_QUERY",
    "QUERY_UNEXPECTED_DATA_TYPE",
    "SCANNER_UNEXPECTED_END_OF_INPUT",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
]
