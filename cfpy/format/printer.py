"""Canonical printer producing source that re-parses to an equal Document."""

from __future__ import annotations

from cfpy.model import Boolean, Document, Item, Number, Pair, Section, String, Value
from cfpy.parser.grammar import is_identifier


def format_document(document: Document, *, indent: str = "    ") -> str:
    """Render `document` in canonical form.

    Comments and original layout are not preserved. Raises ValueError for
    content the grammar cannot express, such as a string containing `"`.
    """
    lines: list[str] = []
    for index, section in enumerate(document.sections):
        if index:
            lines.append("")
        _format_section(section, lines, depth=0, indent=indent)
    return "\n".join(lines) + "\n" if lines else ""


def format_value(value: Value) -> str:
    match value:
        case Boolean(value=flag):
            return "true" if flag else "false"
        case Number(value=number):
            return str(number)
        case String(value=text):
            if '"' in text:
                raise ValueError(f"String {text!r} contains a double quote and cannot be written")
            return f'"{text}"'
        case _:
            raise TypeError(f"Not a value: {value!r}")


def format_item(item: Item) -> str:
    _check_name(item.name)
    if isinstance(item, Pair):
        return f"{item.name} = {format_value(item.value)}"
    return f"{item.name} = [{', '.join(format_value(value) for value in item.values)}]"


def _format_section(section: Section, lines: list[str], *, depth: int, indent: str) -> None:
    _check_name(section.name)
    prefix = indent * depth
    children = section.items if section.items is not None else section.sections
    if not children:
        lines.append(f"{prefix}{section.name} {{}}")
        return

    lines.append(f"{prefix}{section.name} {{")
    if section.items is not None:
        for item in section.items:
            lines.append(f"{prefix}{indent}{format_item(item)}")
    else:
        for child in section.sections or ():
            _format_section(child, lines, depth=depth + 1, indent=indent)
    lines.append(f"{prefix}}}")


def _check_name(name: str) -> None:
    if not is_identifier(name):
        raise ValueError(f"{name!r} is not a valid keyword")
