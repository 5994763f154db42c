"""Expression AST for L1."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from l1.core.location import Location, as_location
from l1.core.types import in_int64_range


class Expr:
    """Base class for expressions."""

    pass


def _precedence(expr: Expression) -> int:
    match expr:
        case Seq():
            return 0
        case IfThenElse() | WhileDo():
            return 1
        case Assign():
            return 2
        case Add() | GreaterOrEqual():
            return 3
        case _:
            return 4


def _wrap(expr: Expression, level: int) -> str:
    """Render expr, parenthesized if it binds looser than level."""
    if _precedence(expr) < level:
        return f"({expr})"
    return str(expr)


@dataclass(frozen=True)
class IntLiteral(Expr):
    """Integer constant: 42

    Values are signed 64-bit; anything outside that range is rejected.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"IntLiteral expects an int, got {self.value!r}")
        if not in_int64_range(self.value):
            raise ValueError(f"IntLiteral {self.value} is outside the signed 64-bit range")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BoolLiteral(Expr):
    """Boolean constant: true, false"""

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"BoolLiteral expects a bool, got {self.value!r}")

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Skip(Expr):
    """The unit value."""

    def __str__(self) -> str:
        return "skip"


@dataclass(frozen=True)
class Add(Expr):
    """Integer addition: e1 + e2"""

    lhs: Expression
    rhs: Expression

    def __str__(self) -> str:
        return f"{_wrap(self.lhs, 4)} + {_wrap(self.rhs, 4)}"


@dataclass(frozen=True)
class GreaterOrEqual(Expr):
    """Integer comparison: e1 >= e2"""

    lhs: Expression
    rhs: Expression

    def __str__(self) -> str:
        return f"{_wrap(self.lhs, 4)} >= {_wrap(self.rhs, 4)}"


@dataclass(frozen=True)
class Deref(Expr):
    """Read a store location: !l

    Accepts a bare string identifier in place of a Location.
    """

    location: Location

    def __post_init__(self) -> None:
        object.__setattr__(self, "location", as_location(self.location))

    def __str__(self) -> str:
        return f"!{self.location}"


@dataclass(frozen=True)
class Assign(Expr):
    """Write a store location: l := e"""

    location: Location
    value_expr: Expression

    def __post_init__(self) -> None:
        object.__setattr__(self, "location", as_location(self.location))

    def __str__(self) -> str:
        return f"{self.location} := {_wrap(self.value_expr, 3)}"


@dataclass(frozen=True)
class Seq(Expr):
    """Sequencing: e1; e2"""

    first: Expression
    second: Expression

    def __str__(self) -> str:
        parts = []
        expr: Expression = self
        while isinstance(expr, Seq):
            parts.append(_wrap(expr.first, 2))
            expr = expr.second
        parts.append(str(expr))
        return "; ".join(parts)


@dataclass(frozen=True)
class IfThenElse(Expr):
    """Conditional: if e1 then e2 else e3"""

    cond: Expression
    then_branch: Expression
    else_branch: Expression

    def __str__(self) -> str:
        return f"if {_wrap(self.cond, 1)} then {_wrap(self.then_branch, 2)} else {_wrap(self.else_branch, 2)}"


@dataclass(frozen=True)
class WhileDo(Expr):
    """Loop: while e1 do e2"""

    cond: Expression
    body: Expression

    def __str__(self) -> str:
        return f"while {_wrap(self.cond, 1)} do {_wrap(self.body, 2)}"


Expression = Union[
    IntLiteral,
    BoolLiteral,
    Skip,
    Add,
    GreaterOrEqual,
    Deref,
    Assign,
    Seq,
    IfThenElse,
    WhileDo,
]

# Terminal forms
Value = Union[IntLiteral, BoolLiteral, Skip]


def is_value(expr: Expression) -> bool:
    """True if no further reduction applies to expr."""
    return isinstance(expr, (IntLiteral, BoolLiteral, Skip))


def clone(expr: Expression) -> Expression:
    """Deep copy expr into a structurally equal tree sharing no nodes."""
    match expr:
        case IntLiteral(value):
            return IntLiteral(value)
        case BoolLiteral(value):
            return BoolLiteral(value)
        case Skip():
            return Skip()
        case Add(lhs, rhs):
            return Add(clone(lhs), clone(rhs))
        case GreaterOrEqual(lhs, rhs):
            return GreaterOrEqual(clone(lhs), clone(rhs))
        case Deref(location):
            return Deref(location)
        case Assign(location, value_expr):
            return Assign(location, clone(value_expr))
        case Seq():
            firsts = []
            while isinstance(expr, Seq):
                firsts.append(clone(expr.first))
                expr = expr.second
            result = clone(expr)
            for first in reversed(firsts):
                result = Seq(first, result)
            return result
        case IfThenElse(cond, then_branch, else_branch):
            return IfThenElse(clone(cond), clone(then_branch), clone(else_branch))
        case WhileDo(cond, body):
            return WhileDo(clone(cond), clone(body))
        case _:
            raise ValueError(f"not an L1 expression: {expr!r}")


def sum_to_zero(counter: Location | str = "l1", accumulator: Location | str = "l2") -> Expression:
    """Build the summation program.

        accumulator := 0;
        while !counter >= 1 do
            (accumulator := !accumulator + !counter; counter := !counter + -1)

    Leaves counter at 0 and accumulator holding 1 + 2 + ... + n.
    """
    return Seq(
        Assign(accumulator, IntLiteral(0)),
        WhileDo(
            GreaterOrEqual(Deref(counter), IntLiteral(1)),
            Seq(
                Assign(accumulator, Add(Deref(accumulator), Deref(counter))),
                Assign(counter, Add(Deref(counter), IntLiteral(-1))),
            ),
        ),
    )
