"""Integer widths accepted by `get_int`."""

from __future__ import annotations

from enum import StrEnum


class IntWidth(StrEnum):
    """Fixed-width integer targets; `isize`/`usize` are 64-bit."""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    ISIZE = "isize"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    USIZE = "usize"

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def bits(self) -> int:
        if self in (IntWidth.ISIZE, IntWidth.USIZE):
            return 64
        return int(self.value[1:])

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max
