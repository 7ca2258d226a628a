"""Dotted-path queries over a Document."""

from cfpy.query.accessors import (
    get_bool,
    get_int,
    get_item,
    get_list,
    get_str,
    get_value,
)
from cfpy.query.integers import IntWidth
from cfpy.query.path import QueryPath
from cfpy.query.resolve import (
    Resolution,
    find_flat,
    find_item,
    find_nested,
    get_properties,
    get_sections,
    resolve,
)

__all__ = [
    "IntWidth",
    "QueryPath",
    "Resolution",
    "find_flat",
    "find_item",
    "find_nested",
    "get_bool",
    "get_int",
    "get_item",
    "get_list",
    "get_properties",
    "get_sections",
    "get_str",
    "get_value",
    "resolve",
]
