"""Document tree data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Number:
    """Signed 64-bit integer value."""

    value: int

    kind = "number"


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool

    kind = "boolean"


@dataclass(frozen=True, slots=True)
class String:
    """Quoted text value, stored without its quotes."""

    value: str

    kind = "string"


@dataclass(frozen=True, slots=True)
class Pair:
    """Property holding a single scalar, e.g. `port = 8080`."""

    name: str
    value: Value

    kind = "pair"


@dataclass(frozen=True, slots=True)
class ValueList:
    """Property holding a list literal, e.g. `hosts = ["a", "b"]`."""

    name: str
    values: tuple[Value, ...]

    kind = "list"


@dataclass(frozen=True, slots=True)
class Flat:
    """Section body made only of properties."""

    items: tuple[Item, ...]


@dataclass(frozen=True, slots=True)
class Nested:
    """Section body made only of child sections."""

    sections: tuple[Section, ...]


@dataclass(frozen=True, slots=True)
class Section:
    name: str
    body: SectionBody

    @property
    def is_flat(self) -> bool:
        return isinstance(self.body, Flat)

    @property
    def is_nested(self) -> bool:
        return isinstance(self.body, Nested)

    @property
    def items(self) -> tuple[Item, ...] | None:
        if isinstance(self.body, Flat):
            return self.body.items
        return None

    @property
    def sections(self) -> tuple[Section, ...] | None:
        if isinstance(self.body, Nested):
            return self.body.sections
        return None


type Value = Number | Boolean | String
type Item = Pair | ValueList
type SectionBody = Flat | Nested


__all__ = [
    "Boolean",
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
