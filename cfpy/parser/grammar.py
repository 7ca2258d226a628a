"""Recursive-descent grammar building the Section/Item tree.

```
document := comment* section* EOF
section  := comment* keyword ( '{' block | '=' value )
block    := ( section* | property* ) '}'
property := keyword '=' value
```

A keyword is classified by the delimiter that follows it: `=` starts a
property, `{` starts a section. The first child of a block fixes whether the
block is flat (properties) or nested (sections).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from cfpy.diagnostics import (
    PARSER_INVALID_FORMAT,
    PARSER_INVALID_KEYWORD,
    PARSER_INVALID_TOKEN,
    PARSER_MAX_DEPTH_EXCEEDED,
    SCANNER_UNEXPECTED_END_OF_INPUT,
)
from cfpy.errors import ParseError
from cfpy.model import Flat, Item, Nested, Section, SectionBody
from cfpy.parser.options import ParserOptions
from cfpy.parser.values import parse_property
from cfpy.scanner import WHITESPACE, Scanner, skip_comments


class KeywordKind(StrEnum):
    SECTION = "section"
    PROPERTY = "property"


@dataclass(frozen=True, slots=True)
class Keyword:
    kind: KeywordKind
    name: str
    start: int
    end: int


def parse_document(scanner: Scanner, options: ParserOptions | None = None) -> tuple[Section, ...]:
    options = options or ParserOptions()
    sections: list[Section] = []

    skip_comments(scanner)
    while (ch := scanner.peek()) is not None:
        if ch == "}":
            raise scanner.error(
                PARSER_INVALID_TOKEN,
                message="Unbalanced closing brace.",
                start=scanner.cursor,
                end=scanner.cursor + 1,
            )

        keyword = parse_keyword(scanner)
        if keyword.kind == KeywordKind.PROPERTY:
            raise scanner.error(
                PARSER_INVALID_FORMAT,
                message=f"Property {keyword.name!r} must be declared inside a section.",
                start=keyword.start,
                end=keyword.end,
            )
        sections.append(parse_section(scanner, keyword, depth=1, max_depth=options.max_depth))
        skip_comments(scanner)

    return tuple(sections)


def parse_section(scanner: Scanner, keyword: Keyword, *, depth: int, max_depth: int) -> Section:
    """Parse the block of a section whose `{` has just been consumed."""
    if depth > max_depth:
        raise scanner.error(
            PARSER_MAX_DEPTH_EXCEEDED,
            message=f"Section {keyword.name!r} exceeds the maximum nesting depth of {max_depth}.",
            start=keyword.start,
            end=keyword.end,
        )
    return Section(name=keyword.name, body=parse_block(scanner, keyword, depth=depth, max_depth=max_depth))


def parse_block(scanner: Scanner, owner: Keyword, *, depth: int, max_depth: int) -> SectionBody:
    items: list[Item] = []
    sections: list[Section] = []

    skip_comments(scanner)
    while not scanner.eat("}"):
        if scanner.peek() is None:
            raise scanner.error(
                SCANNER_UNEXPECTED_END_OF_INPUT,
                message=f"Unterminated section {owner.name!r}; expected '}}'.",
                start=owner.start,
                end=scanner.cursor,
            )

        keyword = parse_keyword(scanner)
        if keyword.kind == KeywordKind.PROPERTY:
            if sections:
                raise _mixed_block(scanner, owner, keyword)
            items.append(parse_property(scanner, keyword.name))
        else:
            if items:
                raise _mixed_block(scanner, owner, keyword)
            sections.append(parse_section(scanner, keyword, depth=depth + 1, max_depth=max_depth))
        skip_comments(scanner)

    if items:
        return Flat(items=tuple(items))
    # An empty block has no purity signal and is treated as nested.
    return Nested(sections=tuple(sections))


def parse_keyword(scanner: Scanner) -> Keyword:
    """Consume a keyword and its `=` / `{` delimiter."""
    begin = scanner.cursor
    while True:
        ch = scanner.peek()
        if ch is None:
            raise scanner.error(
                SCANNER_UNEXPECTED_END_OF_INPUT,
                message="Expected '=' or '{' after keyword, found end of input.",
                start=begin,
                end=scanner.cursor,
            )
        if ch in {"=", "{"}:
            break
        if ch == "}":
            raise scanner.error(
                PARSER_INVALID_TOKEN,
                message="Expected '=' or '{' after keyword, found '}'.",
                start=scanner.cursor,
                end=scanner.cursor + 1,
            )
        scanner.next()

    raw_end = scanner.cursor
    kind = KeywordKind.PROPERTY if scanner.next() == "=" else KeywordKind.SECTION
    name, start, end = _validate_keyword(scanner, begin, raw_end)
    return Keyword(kind=kind, name=name, start=start, end=end)


def _validate_keyword(scanner: Scanner, begin: int, end: int) -> tuple[str, int, int]:
    raw = scanner.slice_between(begin, end)
    stripped = raw.strip("".join(WHITESPACE))
    start = begin + (len(raw) - len(raw.lstrip("".join(WHITESPACE))))
    stop = start + len(stripped)

    if not stripped:
        raise scanner.error(PARSER_INVALID_KEYWORD, message="Missing keyword before delimiter.", start=begin, end=end + 1)

    for offset, ch in enumerate(stripped, start=start):
        if ch in WHITESPACE:
            raise scanner.error(
                PARSER_INVALID_TOKEN,
                message=f"Keyword {stripped!r} contains whitespace.",
                start=start,
                end=stop,
            )
        if not is_identifier_char(ch):
            raise scanner.error(
                PARSER_INVALID_KEYWORD,
                message=f"Invalid character {ch!r} in keyword {stripped!r}.",
                start=offset,
                end=offset + 1,
            )

    return stripped, start, stop


def is_identifier_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


def is_identifier(text: str) -> bool:
    return bool(text) and all(is_identifier_char(ch) for ch in text)


def _mixed_block(scanner: Scanner, owner: Keyword, keyword: Keyword) -> ParseError:
    found = "property" if keyword.kind == KeywordKind.PROPERTY else "section"
    return scanner.error(
        PARSER_INVALID_FORMAT,
        message=f"Section {owner.name!r} mixes properties and sections; unexpected {found} {keyword.name!r}.",
        start=keyword.start,
        end=keyword.end,
    )
