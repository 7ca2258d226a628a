#!/usr/bin/env python
"""Parse a configuration file and print its tree, or the parse error."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from cfpy import CfpError, Section, format_document, initialize_file
from cfpy.format import format_item


def format_section(section: Section, depth: int = 0) -> list[str]:
    prefix = "  " * depth
    kind = "flat" if section.is_flat else "nested"
    lines = [f"{prefix}[{kind}] {section.name}"]
    for item in section.items or ():
        lines.append(f"{prefix}  ({item.kind}) {format_item(item)}")
    for child in section.sections or ():
        lines.extend(format_section(child, depth + 1))
    return lines


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump the section tree of a configuration file")
    parser.add_argument("path", type=Path)
    parser.add_argument("--canonical", action="store_true", help="Print canonical source instead of the tree")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        document = initialize_file(args.path)
    except CfpError as exc:
        print(exc)
        return 1

    if args.canonical:
        print(format_document(document), end="")
    else:
        for section in document.sections:
            print("\n".join(format_section(section)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
