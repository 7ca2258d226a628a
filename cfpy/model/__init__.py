"""Configuration document tree."""

from cfpy.model.document import Document
from cfpy.model.model import (
    Boolean,
    Flat,
    Item,
    Nested,
    Number,
    Pair,
    Section,
    SectionBody,
    String,
    Value,
    ValueList,
)

__all__ = [
    "Boolean",
    "Document",
    "Flat",
    "Item",
    "Nested",
    "Number",
    "Pair",
    "Section",
    "SectionBody",
    "String",
    "Value",
    "ValueList",
]
