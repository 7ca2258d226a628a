"""Configuration parser (grammar, value literals, options)."""

from cfpy.parser.grammar import (
    Keyword,
    KeywordKind,
    is_identifier,
    parse_block,
    parse_document,
    parse_keyword,
    parse_section,
)
from cfpy.parser.options import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT, ParserOptions
from cfpy.parser.parse import decode_source, parse
from cfpy.parser.values import (
    INT64_MAX,
    INT64_MIN,
    parse_bool,
    parse_list,
    parse_number,
    parse_property,
    parse_scalar,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "MAX_DEPTH_LIMIT",
    "INT64_MAX",
    "INT64_MIN",
    "Keyword",
    "KeywordKind",
    "ParserOptions",
    "decode_source",
    "is_identifier",
    "parse",
    "parse_block",
    "parse_bool",
    "parse_document",
    "parse_keyword",
    "parse_list",
    "parse_number",
    "parse_property",
    "parse_scalar",
    "parse_section",
]
