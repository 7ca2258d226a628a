"""Canonical re-serialization."""

from cfpy.format.printer import format_document, format_item, format_value

__all__ = ["format_document", "format_item", "format_value"]
