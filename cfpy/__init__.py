"""cfpy: hierarchical configuration file parser with dotted-path queries."""

from cfpy.api import get_environment_tag, initialize, initialize_file, teardown
from cfpy.errors import (
    CfpError,
    ConfigIOError,
    IntegerOverflowError,
    InvalidFormatError,
    InvalidKeywordError,
    InvalidNumberError,
    InvalidQueryError,
    InvalidTokenError,
    MaxDepthExceededError,
    ParseError,
    QueryError,
    UnexpectedDataTypeError,
    UnexpectedEndOfInputError,
)
from cfpy.format import format_document
from cfpy.loader import load_file
from cfpy.model import (
    Boolean,
    Document,
    Flat,
    Item,
    Nested,
    Number,
    Pair,
    Section,
    String,
    Value,
    ValueList,
)
from cfpy.parser import ParserOptions
from cfpy.query import (
    IntWidth,
    get_bool,
    get_int,
    get_list,
    get_properties,
    get_sections,
    get_str,
    get_value,
    resolve,
)

__all__ = [
    "Boolean",
    "CfpError",
    "ConfigIOError",
    "Document",
    "Flat",
    "IntWidth",
    "IntegerOverflowError",
    "InvalidFormatError",
    "InvalidKeywordError",
    "InvalidNumberError",
    "InvalidQueryError",
    "InvalidTokenError",
    "Item",
    "MaxDepthExceededError",
    "Nested",
    "Number",
    "Pair",
    "ParseError",
    "ParserOptions",
    "QueryError",
    "Section",
    "String",
    "UnexpectedDataTypeError",
    "UnexpectedEndOfInputError",
    "Value",
    "ValueList",
    "format_document",
    "get_bool",
    "get_environment_tag",
    "get_int",
    "get_list",
    "get_properties",
    "get_sections",
    "get_str",
    "get_value",
    "initialize",
    "initialize_file",
    "load_file",
    "resolve",
    "teardown",
]
