"""Typed accessors raising QueryError on mismatch."""

from __future__ import annotations

from cfpy.errors import IntegerOverflowError, InvalidQueryError, UnexpectedDataTypeError
from cfpy.model import Boolean, Document, Item, Number, Pair, String, Value, ValueList
from cfpy.query.integers import IntWidth
from cfpy.query.resolve import resolve


def get_item(document: Document, path: str) -> Item:
    if document.released:
        raise InvalidQueryError(path, "document has been released")
    resolved = resolve(document, path)
    if isinstance(resolved, (Pair, ValueList)):
        return resolved
    if resolved is not None:
        raise InvalidQueryError(path, "path names a section, not a property")
    raise InvalidQueryError(path)


def get_value(document: Document, path: str) -> Value:
    item = get_item(document, path)
    if not isinstance(item, Pair):
        raise UnexpectedDataTypeError(path, expected="pair", found=item.kind)
    return item.value


def get_int(document: Document, path: str, width: IntWidth | str = IntWidth.ISIZE) -> int:
    target = IntWidth(width)
    number = _expect(document, path, Number).value
    if not target.contains(number):
        raise IntegerOverflowError(path, number, target.value)
    return number


def get_bool(document: Document, path: str) -> bool:
    return _expect(document, path, Boolean).value


def get_str(document: Document, path: str) -> str:
    return _expect(document, path, String).value


def get_list(document: Document, path: str) -> tuple[Value, ...]:
    item = get_item(document, path)
    if not isinstance(item, ValueList):
        raise UnexpectedDataTypeError(path, expected="list", found=item.value.kind)
    return item.values


def _expect(
    document: Document,
    path: str,
    value_type: type[Number] | type[Boolean] | type[String],
) -> Value:
    item = get_item(document, path)
    if isinstance(item, ValueList):
        raise UnexpectedDataTypeError(path, expected=value_type.kind, found=item.kind)
    if not isinstance(item.value, value_type):
        raise UnexpectedDataTypeError(path, expected=value_type.kind, found=item.value.kind)
    return item.value
