"""Static type checker for L1."""

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
    WhileDo,
)
from l1.core.errors import BranchMismatch, LocationError, TypeMismatch
from l1.core.store import Store
from l1.core.types import Type


def check(expr: Expression, store: Store) -> Type:
    """Compute the type of expr against the locations of store.

    Only location existence is consulted; stored values are never read and
    the store is never modified.

    Args:
        expr: Expression to type
        store: Store whose locations are in scope

    Returns:
        The type of expr

    Raises:
        TypeMismatch: If a subexpression has the wrong type
        BranchMismatch: If the branches of a conditional disagree
        LocationError: If a Deref or Assign names a missing location
    """
    # Statement chains nest through Seq.second; walk them without recursing.
    while isinstance(expr, Seq):
        _expect(expr.first, store, Type.UNIT, "seq", what="first expression")
        expr = expr.second

    match expr:
        case IntLiteral(_):
            return Type.INTEGER

        case BoolLiteral(_):
            return Type.BOOLEAN

        case Skip():
            return Type.UNIT

        case Add(lhs, rhs):
            _expect(lhs, store, Type.INTEGER, "+")
            _expect(rhs, store, Type.INTEGER, "+")
            return Type.INTEGER

        case GreaterOrEqual(lhs, rhs):
            _expect(lhs, store, Type.INTEGER, ">=")
            _expect(rhs, store, Type.INTEGER, ">=")
            return Type.BOOLEAN

        case Deref(location):
            if not store.contains(location):
                raise LocationError("deref", location)
            return Type.INTEGER

        case Assign(location, value_expr):
            if not store.contains(location):
                raise LocationError("assign", location)
            _expect(value_expr, store, Type.INTEGER, "assign", what="assigned value")
            return Type.UNIT

        case IfThenElse(cond, then_branch, else_branch):
            _expect(cond, store, Type.BOOLEAN, "if", what="condition")
            then_type = check(then_branch, store)
            else_type = check(else_branch, store)
            if then_type != else_type:
                raise BranchMismatch(then_type, else_type)
            return then_type

        case WhileDo(cond, body):
            _expect(cond, store, Type.BOOLEAN, "while", what="condition")
            _expect(body, store, Type.UNIT, "while", what="body")
            return Type.UNIT

        case _:
            raise ValueError(f"not an L1 expression: {expr!r}")


def _expect(expr: Expression, store: Store, expected: Type, construct: str, what: str = "operand") -> None:
    actual = check(expr, store)
    if actual != expected:
        raise TypeMismatch(construct, expected, actual, what)
