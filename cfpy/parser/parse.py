"""High-level parse entrypoint for configuration source."""

from __future__ import annotations

from cfpy.diagnostics import PARSER_INVALID_TOKEN
from cfpy.model import Document
from cfpy.parser.grammar import parse_document
from cfpy.parser.options import ParserOptions
from cfpy.scanner import Scanner

_BOM = "\ufeff"


def decode_source(buffer: str | bytes, *, excerpt_limit: int) -> str:
    """Decode a raw buffer as UTF-8, dropping a leading byte order mark."""
    if isinstance(buffer, str):
        text = buffer
    else:
        try:
            text = bytes(buffer).decode("utf-8")
        except UnicodeDecodeError as exc:
            valid = bytes(buffer[: exc.start]).decode("utf-8")
            scanner = Scanner(valid, excerpt_limit=excerpt_limit)
            raise scanner.error(
                PARSER_INVALID_TOKEN,
                message=f"Source is not valid UTF-8 (byte offset {exc.start}).",
                start=len(valid),
            ) from exc
    return text[1:] if text.startswith(_BOM) else text


def parse(buffer: str | bytes, options: ParserOptions | None = None) -> Document:
    """Parse a whole source buffer into a Document.

    Raises a ParseError subclass on the first error; nothing is returned for
    malformed input.
    """
    resolved_options = options or ParserOptions()
    text = decode_source(buffer, excerpt_limit=resolved_options.excerpt_limit)
    scanner = Scanner(text, excerpt_limit=resolved_options.excerpt_limit)
    sections = parse_document(scanner, resolved_options)
    return Document(
        sections,
        source=text,
        environment_tag=resolved_options.environment_tag,
    )


__all__ = ["decode_source", "parse"]
