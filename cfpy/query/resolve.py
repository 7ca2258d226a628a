"""Dotted-path resolution over a Document."""

from __future__ import annotations

from collections.abc import Iterable

from cfpy.model import Document, Item, Section
from cfpy.query.path import QueryPath

type Resolution = Item | tuple[Section, ...]


def resolve(document: Document, path: str) -> Resolution | None:
    """Resolve `path` to an Item, or to the children of a nested section.

    `a.b.c` looks up item `c` in flat section `b` under nested section `a`.
    When no such item exists but `a.b.c` names a nested section, its child
    sections are returned instead. A single segment never names an item,
    since the document root only holds sections.
    """
    query = QueryPath.parse(path)
    if query is None or document.released:
        return None

    if not query.is_single_segment:
        items = _flat_items(document.sections, query.parents)
        if items is not None:
            item = find_item(items, query.leaf)
            if item is not None:
                return item

    return _nested_sections(document.sections, query.segments)


def get_properties(document: Document, path: str) -> tuple[Item, ...] | None:
    """Items of the flat section at `path`, or None."""
    query = QueryPath.parse(path)
    if query is None or document.released:
        return None
    return _flat_items(document.sections, query.segments)


def get_sections(document: Document, path: str) -> tuple[Section, ...] | None:
    """Child sections of the nested section at `path`, or None.

    The empty path addresses the document root.
    """
    if document.released:
        return None
    if path == "":
        return document.sections
    query = QueryPath.parse(path)
    if query is None:
        return None
    return _nested_sections(document.sections, query.segments)


def find_item(items: Iterable[Item], name: str) -> Item | None:
    for item in items:
        if item.name == name:
            return item
    return None


def find_flat(sections: Iterable[Section], name: str) -> tuple[Item, ...] | None:
    for section in sections:
        if section.name == name and section.items is not None:
            return section.items
    return None


def find_nested(sections: Iterable[Section], name: str) -> tuple[Section, ...] | None:
    for section in sections:
        if section.name == name and section.sections is not None:
            return section.sections
    return None


def _nested_sections(root: tuple[Section, ...], segments: tuple[str, ...]) -> tuple[Section, ...] | None:
    current: tuple[Section, ...] | None = root
    for segment in segments:
        current = find_nested(current, segment)
        if current is None:
            return None
    return current


def _flat_items(root: tuple[Section, ...], segments: tuple[str, ...]) -> tuple[Item, ...] | None:
    parent = _nested_sections(root, segments[:-1])
    if parent is None:
        return None
    return find_flat(parent, segments[-1])
