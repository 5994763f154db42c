"""Error types for the L1 checker and evaluators."""

from __future__ import annotations

from typing import TYPE_CHECKING

from l1.core.location import Location
from l1.core.types import Type

if TYPE_CHECKING:
    from l1.core.ast import Expression


class L1Error(Exception):
    """Base class for errors a caller is expected to handle."""


class TypeError(L1Error):
    """Base class for static type errors."""

    construct: str

    def __init__(self, message: str, construct: str):
        super().__init__(f"type error: {construct}: {message}")
        self.construct = construct


class TypeMismatch(TypeError):
    """Expected type does not match actual type."""

    def __init__(self, construct: str, expected: Type, actual: Type, what: str = "operand"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {what} of type {expected}, but got {actual}", construct)


class BranchMismatch(TypeError):
    """The two branches of a conditional have different types."""

    def __init__(self, then_type: Type, else_type: Type):
        self.then_type = then_type
        self.else_type = else_type
        super().__init__(f"branches have different types {then_type} and {else_type}", "if")


class LocationError(L1Error):
    """Reference to a location absent from the store."""

    def __init__(self, construct: str, location: Location):
        self.construct = construct
        self.location = location
        super().__init__(f"location error: {construct}: location {location} does not exist in store")


class StuckError(AssertionError):
    """No reduction rule applies to a non-value expression.

    Unreachable for programs that type-checked against the store they run on.
    Not an L1Error: it signals a broken invariant, not bad input.
    """

    def __init__(self, expr: Expression, reason: str):
        self.expr = expr
        self.reason = reason
        super().__init__(f"stuck: {reason}: {expr}")


class CrossCheckError(AssertionError):
    """Small-step and reference evaluation disagree."""

    def __init__(self, message: str, primary: object, reference: object):
        self.primary = primary
        self.reference = reference
        super().__init__(f"{message}: small-step gave {primary}, reference gave {reference}")
