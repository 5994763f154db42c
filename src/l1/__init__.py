"""L1: a small imperative language with a small-step interpreter and type checker."""

from l1.core import (
    Add,
    Assign,
    BoolLiteral,
    BranchMismatch,
    CrossCheckError,
    Deref,
    Expression,
    GreaterOrEqual,
    IfThenElse,
    IntLiteral,
    L1Error,
    Location,
    LocationError,
    Seq,
    Skip,
    Store,
    StuckError,
    Type,
    TypeError,
    TypeMismatch,
    Value,
    WhileDo,
    check,
    clone,
    is_value,
    sum_to_zero,
)
from l1.eval import eval_direct, evaluate, reduction_rule, step
from l1.program import Program

__all__ = [
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
    "Location",
    "Store",
    "Type",
    "L1Error",
    "TypeError",
    "TypeMismatch",
    "BranchMismatch",
    "LocationError",
    "StuckError",
    "CrossCheckError",
    "check",
    "step",
    "evaluate",
    "reduction_rule",
    "eval_direct",
    "Program",
]
