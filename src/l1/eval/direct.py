"""Big-step reference evaluator, used to cross-check small-step results."""

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
)
from l1.core.errors import StuckError
from l1.core.store import Store
from l1.core.types import wrap_int64


def eval_direct(expr: Expression, store: Store) -> Value:
    """Evaluate expr recursively, updating store in place.

    Raises:
        LocationError: If a Deref or Assign names a missing location
        StuckError: If a subexpression yields a value of the wrong shape
    """
    while isinstance(expr, Seq):
        _unit(eval_direct(expr.first, store), expr)
        expr = expr.second

    match expr:
        case IntLiteral() | BoolLiteral() | Skip():
            return expr

        case Add(lhs, rhs):
            n1 = _int(eval_direct(lhs, store), expr)
            n2 = _int(eval_direct(rhs, store), expr)
            return IntLiteral(wrap_int64(n1 + n2))

        case GreaterOrEqual(lhs, rhs):
            n1 = _int(eval_direct(lhs, store), expr)
            n2 = _int(eval_direct(rhs, store), expr)
            return BoolLiteral(n1 >= n2)

        case Deref(location):
            return IntLiteral(store.deref(location))

        case Assign(location, value_expr):
            store.assign(location, _int(eval_direct(value_expr, store), expr))
            return Skip()

        case IfThenElse(cond, then_branch, else_branch):
            if _bool(eval_direct(cond, store), expr):
                return eval_direct(then_branch, store)
            return eval_direct(else_branch, store)

        case WhileDo(cond, body):
            while _bool(eval_direct(cond, store), expr):
                _unit(eval_direct(body, store), expr)
            return Skip()

        case _:
            raise ValueError(f"not an L1 expression: {expr!r}")


def _int(value: Value, expr: Expression) -> int:
    match value:
        case IntLiteral(n):
            return n
        case _:
            raise StuckError(expr, f"expected an integer, got {value}")


def _bool(value: Value, expr: Expression) -> bool:
    match value:
        case BoolLiteral(b):
            return b
        case _:
            raise StuckError(expr, f"expected a boolean, got {value}")


def _unit(value: Value, expr: Expression) -> None:
    match value:
        case Skip():
            return
        case _:
            raise StuckError(expr, f"expected skip, got {value}")
