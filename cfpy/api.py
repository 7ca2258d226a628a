"""Document lifecycle: initialize, environment tag, teardown."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import TypeVar

from cfpy.errors import ParseError, UnexpectedDataTypeError
from cfpy.loader import DEFAULT_MAX_SIZE, load_file, resolve_path
from cfpy.model import Document
from cfpy.parser import ParserOptions, parse

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def initialize(
    buffer: str | bytes,
    options: ParserOptions | None = None,
    *,
    source_name: str = "<buffer>",
) -> Document:
    """Parse `buffer` into a new Document.

    Each call returns an independent Document; nothing is shared between them.
    """
    try:
        document = parse(buffer, options)
    except ParseError as exc:
        logger.error(
            "%s at line %d:%d\n\n%s <<< HERE\n",
            source_name,
            exc.line,
            exc.column,
            exc.excerpt,
        )
        raise
    logger.debug("Parsed %s: %d top-level sections", source_name, len(document.sections))
    return document


def initialize_file(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    base_dir: str | Path | None = None,
    max_size: int = DEFAULT_MAX_SIZE,
) -> Document:
    """Load a configuration file and parse it."""
    data = load_file(path, base_dir=base_dir, max_size=max_size)
    return initialize(data, options, source_name=str(resolve_path(path, base_dir)))


def get_environment_tag(document: Document, enum_type: type[E]) -> E | None:
    """Environment tag given at initialization as a member of `enum_type`."""
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise TypeError(f"enum_type must be an Enum subclass, found {enum_type!r}")

    tag = document.environment_tag
    if tag is None:
        return None
    try:
        return enum_type(tag)
    except ValueError as exc:
        raise UnexpectedDataTypeError(
            "<environment>",
            expected=enum_type.__name__,
            found=repr(tag),
        ) from exc


def teardown(document: Document) -> None:
    """Release the document tree; later queries fail with InvalidQueryError."""
    document.release()
