"""Static types of L1."""

from __future__ import annotations

from enum import Enum


class Type(Enum):
    """The closed set of L1 types."""

    INTEGER = "int"
    BOOLEAN = "bool"
    UNIT = "unit"

    def __str__(self) -> str:
        return self.value


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def wrap_int64(value: int) -> int:
    """Reduce value to two's complement signed 64-bit."""
    return (value - INT64_MIN) % 2**64 + INT64_MIN


def in_int64_range(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX
