"""Core language: AST, store, types, and type checker."""

from l1.core.ast import (
    Add,
    Assign,
    BoolLiteral,
    Deref,
    Expression,
    GreaterOrEqual,
    IfThenElse,
    IntLiteral,
    Seq,
    Skip,
    Value,
    WhileDo,
    clone,
    is_value,
    sum_to_zero,
)
from l1.core.checker import check
from l1.core.errors import (
    BranchMismatch,
    CrossCheckError,
    L1Error,
    LocationError,
    StuckError,
    TypeError,
    TypeMismatch,
)
from l1.core.location import Location
from l1.core.store import Store
from l1.core.types import Type

__all__ = [
    # AST
    "Expression",
    "Value",
    "IntLiteral",
    "BoolLiteral",
    "Skip",
    "Add",
    "GreaterOrEqual",
    "Deref",
    "Assign",
    "Seq",
    "IfThenElse",
    "WhileDo",
    "is_value",
    "clone",
    "sum_to_zero",
    # Store
    "Location",
    "Store",
    # Types
    "Type",
    # Errors
    "L1Error",
    "TypeError",
    "TypeMismatch",
    "BranchMismatch",
    "LocationError",
    "StuckError",
    "CrossCheckError",
    # Type Checker
    "check",
]
