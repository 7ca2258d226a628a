"""Value literal parsing: strings, booleans, integers and lists."""

from __future__ import annotations

import re
from typing import Final

from cfpy.diagnostics import (
    PARSER_INVALID_NUMBER,
    PARSER_INVALID_TOKEN,
    SCANNER_UNEXPECTED_END_OF_INPUT,
)
from cfpy.errors import ParseError
from cfpy.model import Boolean, Item, Number, Pair, String, Value, ValueList
from cfpy.scanner import WHITESPACE, Scanner

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")

# Characters that end an unquoted token.
_BARE_TERMINATORS: Final[frozenset[str]] = WHITESPACE | frozenset({"}", "{", "=", "#", ",", "]"})


def parse_property(scanner: Scanner, name: str) -> Item:
    """Parse the right-hand side of `name = ...` into a Pair or ValueList."""
    scanner.eat_whitespace()
    if scanner.peek() == "[":
        return ValueList(name=name, values=parse_list(scanner))
    return Pair(name=name, value=parse_scalar(scanner))


def parse_scalar(scanner: Scanner) -> Value:
    ch = scanner.peek()
    if ch is None:
        raise scanner.error(SCANNER_UNEXPECTED_END_OF_INPUT, message="Expected a value, found end of input.")
    if ch == '"':
        return String(read_string(scanner))

    start = scanner.cursor
    token = read_bare(scanner)
    if not token:
        raise scanner.error(PARSER_INVALID_TOKEN, message=f"Expected a value, found {ch!r}.", start=start, end=start + 1)
    return scalar_from_bare(scanner, token, start)


def parse_list(scanner: Scanner) -> tuple[Value, ...]:
    """Parse `[v1, v2, ...]`; each element is a scalar decided by its first character."""
    opening = scanner.cursor
    scanner.next()
    values: list[Value] = []

    scanner.eat_whitespace()
    if scanner.eat("]"):
        return ()

    while True:
        scanner.eat_whitespace()
        start = scanner.cursor
        ch = scanner.peek()
        if ch is None:
            raise _unterminated_list(scanner, opening)
        if ch in {",", "]"}:
            raise scanner.error(PARSER_INVALID_TOKEN, message="Empty list element.", start=start, end=start + 1)
        if ch == "[":
            raise scanner.error(PARSER_INVALID_TOKEN, message="Nested lists are not supported.", start=start, end=start + 1)
        if ch == '"':
            values.append(String(read_string(scanner)))
        else:
            values.append(scalar_from_bare(scanner, read_bare(scanner), start))

        scanner.eat_whitespace()
        if scanner.eat(","):
            continue
        if scanner.eat("]"):
            return tuple(values)
        if scanner.peek() is None:
            raise _unterminated_list(scanner, opening)
        raise scanner.error(
            PARSER_INVALID_TOKEN,
            message=f"Expected ',' or ']' in list, found {scanner.peek()!r}.",
            start=scanner.cursor,
            end=scanner.cursor + 1,
        )


def read_string(scanner: Scanner) -> str:
    """Consume a quoted string and return its contents.

    There are no escape sequences; the string ends at the next `"`.
    """
    opening = scanner.cursor
    scanner.next()
    begin = scanner.cursor
    while scanner.peek() != '"':
        if scanner.peek() is None:
            raise scanner.error(
                SCANNER_UNEXPECTED_END_OF_INPUT,
                message="Unterminated string literal.",
                start=opening,
                end=scanner.cursor,
            )
        scanner.next()
    end = scanner.cursor
    scanner.next()
    return scanner.slice_between(begin, end)


def read_bare(scanner: Scanner) -> str:
    begin = scanner.cursor
    while (ch := scanner.peek()) is not None and ch not in _BARE_TERMINATORS:
        scanner.next()
    return scanner.slice_between(begin, scanner.cursor)


def scalar_from_bare(scanner: Scanner, token: str, start: int) -> Value:
    end = start + len(token)
    if token[:1] in {"t", "f"}:
        boolean = parse_bool(token)
        if boolean is None:
            raise scanner.error(
                PARSER_INVALID_TOKEN,
                message=f"Invalid boolean literal {token!r}; expected `true` or `false`.",
                start=start,
                end=end,
            )
        return Boolean(boolean)

    number = parse_number(token)
    if number is None:
        raise scanner.error(
            PARSER_INVALID_NUMBER,
            message=f"Invalid number literal {token!r}.",
            start=start,
            end=end,
        )
    return Number(number)


def parse_bool(text: str) -> bool | None:
    if text == "true":
        return True
    if text == "false":
        return False
    return None


def parse_number(text: str) -> int | None:
    """Parse a base-10 signed 64-bit integer, or None."""
    if not _INTEGER_RE.fullmatch(text):
        return None
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def _unterminated_list(scanner: Scanner, opening: int) -> ParseError:
    return scanner.error(
        SCANNER_UNEXPECTED_END_OF_INPUT,
        message="Unterminated list literal.",
        start=opening,
        end=scanner.cursor,
    )
