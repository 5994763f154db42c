"""Test configuration and shared fixtures."""

import pytest

from l1.core.ast import (
    Add,
    Assign,
    BoolLiteral,
    Deref,
    GreaterOrEqual,
    IfThenElse,
    IntLiteral,
    Seq,
    Skip,
    WhileDo,
    sum_to_zero,
)
from l1.core.store import Store


def _countdown_with_branch():
    # while !n >= 1 do (if !n >= 3 then big := !big + 1 else small := !small + 1; n := !n + -1)
    return WhileDo(
        GreaterOrEqual(Deref("n"), IntLiteral(1)),
        Seq(
            IfThenElse(
                GreaterOrEqual(Deref("n"), IntLiteral(3)),
                Assign("big", Add(Deref("big"), IntLiteral(1))),
                Assign("small", Add(Deref("small"), IntLiteral(1))),
            ),
            Assign("n", Add(Deref("n"), IntLiteral(-1))),
        ),
    )


# (name, expression factory, initial store contents)
WELL_TYPED_PROGRAMS = [
    ("int", lambda: IntLiteral(7), {}),
    ("bool", lambda: BoolLiteral(False), {}),
    ("skip", lambda: Skip(), {}),
    ("add", lambda: Add(IntLiteral(3), IntLiteral(4)), {}),
    ("nested_add", lambda: Add(Add(IntLiteral(1), Deref("x")), Add(Deref("x"), IntLiteral(2))), {"x": 10}),
    ("ge", lambda: GreaterOrEqual(IntLiteral(5), IntLiteral(3)), {}),
    ("ge_deref", lambda: GreaterOrEqual(Deref("x"), Add(Deref("x"), IntLiteral(1))), {"x": 0}),
    ("assign_then_read", lambda: Seq(Assign("x", IntLiteral(42)), Deref("x")), {"x": 1}),
    (
        "if_int",
        lambda: IfThenElse(GreaterOrEqual(Deref("x"), IntLiteral(0)), Add(Deref("x"), IntLiteral(1)), IntLiteral(0)),
        {"x": 4},
    ),
    (
        "if_unit",
        lambda: IfThenElse(BoolLiteral(False), Skip(), Assign("x", Add(Deref("x"), Deref("x")))),
        {"x": 21},
    ),
    ("while_false", lambda: WhileDo(BoolLiteral(False), Assign("x", IntLiteral(1))), {"x": 0}),
    ("sum_to_zero", lambda: sum_to_zero("l1", "l2"), {"l1": 5, "l2": 0}),
    ("countdown_with_branch", _countdown_with_branch, {"n": 6, "big": 0, "small": 0}),
    (
        "seq_into_value",
        lambda: Seq(Seq(Assign("a", IntLiteral(2)), Assign("b", Deref("a"))), GreaterOrEqual(Deref("b"), Deref("a"))),
        {"a": 0, "b": 0},
    ),
]


@pytest.fixture(params=WELL_TYPED_PROGRAMS, ids=[name for name, _, _ in WELL_TYPED_PROGRAMS])
def well_typed(request):
    """A terminating, well-typed expression with a fresh store."""
    _, make_expr, initial = request.param
    return make_expr(), Store(initial)


@pytest.fixture
def sum_store() -> Store:
    return Store({"l1": 5, "l2": 0})
