"""Small-step operational semantics for L1."""

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
    is_value,
)
from l1.core.errors import StuckError
from l1.core.store import Store
from l1.core.types import wrap_int64


def step(expr: Expression, store: Store) -> Expression | None:
    """Perform one reduction of expr.

    Reduction is left-to-right call-by-value. Only an assignment rule
    touches the store, and it does so in place.

    Args:
        expr: Expression to reduce
        store: Store to read and update

    Returns:
        The reduced expression, or None if expr is already a value

    Raises:
        StuckError: If no rule applies (never for a well-typed expr)
    """
    match expr:
        case IntLiteral() | BoolLiteral() | Skip():
            return None

        case Add(IntLiteral(n1), IntLiteral(n2)):
            # op+
            return IntLiteral(wrap_int64(n1 + n2))

        case GreaterOrEqual(IntLiteral(n1), IntLiteral(n2)):
            # op>=
            return BoolLiteral(n1 >= n2)

        case Add(lhs, rhs) | GreaterOrEqual(lhs, rhs):
            op = type(expr)
            if not is_value(lhs):
                # op1
                return op(_reduce(lhs, store), rhs)
            if not is_value(rhs):
                # op2
                return op(lhs, _reduce(rhs, store))
            raise StuckError(expr, "operands are not both integers")

        case Deref(location):
            if not store.contains(location):
                raise StuckError(expr, f"location {location} does not exist in store")
            # deref
            return IntLiteral(store.deref(location))

        case Assign(location, value_expr):
            if not is_value(value_expr):
                # assign2
                return Assign(location, _reduce(value_expr, store))
            if not store.contains(location):
                raise StuckError(expr, f"location {location} does not exist in store")
            match value_expr:
                case IntLiteral(n):
                    # assign1
                    store.assign(location, n)
                    return Skip()
                case _:
                    raise StuckError(expr, "assigned value is not an integer")

        case Seq(Skip(), second):
            # seq1
            return second

        case Seq(first, second):
            if is_value(first):
                raise StuckError(expr, "first expression is not skip")
            # seq2
            return Seq(_reduce(first, store), second)

        case IfThenElse(BoolLiteral(b), then_branch, else_branch):
            # if1, if2
            return then_branch if b else else_branch

        case IfThenElse(cond, then_branch, else_branch):
            if is_value(cond):
                raise StuckError(expr, "condition is not a boolean")
            # if3
            return IfThenElse(_reduce(cond, store), then_branch, else_branch)

        case WhileDo(cond, body):
            # while: nodes are immutable, so the unrolled tree shares cond and body.
            return IfThenElse(cond, Seq(body, expr), Skip())

        case _:
            raise ValueError(f"not an L1 expression: {expr!r}")


def _reduce(expr: Expression, store: Store) -> Expression:
    reduced = step(expr, store)
    assert reduced is not None, "only non-values are reduced"
    return reduced


def evaluate(expr: Expression, store: Store) -> Value:
    """Reduce expr until it is a value.

    There is no step limit: a program that loops forever makes this loop
    forever too.
    """
    while True:
        reduced = step(expr, store)
        if reduced is None:
            return expr  # type: ignore[return-value]
        expr = reduced


def reduction_rule(expr: Expression) -> str | None:
    """Name the rule the next step of expr applies at the top level.

    Returns None for values. Rules that descend into a subexpression
    (op1, op2, assign2, seq2, if3) are named by the outer rule.
    """
    match expr:
        case IntLiteral() | BoolLiteral() | Skip():
            return None
        case Add(IntLiteral(), IntLiteral()):
            return "op+"
        case GreaterOrEqual(IntLiteral(), IntLiteral()):
            return "op>="
        case Add(lhs, _) | GreaterOrEqual(lhs, _):
            return "op2" if is_value(lhs) else "op1"
        case Deref():
            return "deref"
        case Assign(_, value_expr):
            return "assign1" if is_value(value_expr) else "assign2"
        case Seq(Skip(), _):
            return "seq1"
        case Seq():
            return "seq2"
        case IfThenElse(BoolLiteral(b), _, _):
            return "if1" if b else "if2"
        case IfThenElse():
            return "if3"
        case WhileDo():
            return "while"
        case _:
            raise ValueError(f"not an L1 expression: {expr!r}")
