"""Program driver: one checked expression bound to one store."""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger

from l1.core.ast import Expression, Value, is_value
from l1.core.checker import check
from l1.core.errors import CrossCheckError
from l1.core.store import Store
from l1.core.types import Type
from l1.eval.direct import eval_direct
from l1.eval.step import step


class Program:
    """An L1 expression coupled with the store it runs against.

    The expression is type-checked once, at construction, against a private
    copy of the given store. That copy is the only store the program ever
    evaluates against, so a program that checked can never get stuck.
    """

    def __init__(self, expr: Expression, store: Store) -> None:
        """Type-check expr and bind it to a copy of store.

        Raises:
            TypeError: If expr is ill-typed
            LocationError: If expr names a location missing from store
        """
        self._type = check(expr, store)
        self._source = expr
        self._initial = store.copy()
        self._expr = expr
        self._store = store.copy()
        self._steps = 0
        logger.debug("program.checked type={} locations={}", self._type, len(self._store))

    @property
    def type(self) -> Type:
        return self._type

    @property
    def expression(self) -> Expression:
        """The current, partially reduced expression."""
        return self._expr

    @property
    def steps(self) -> int:
        """Reductions performed so far."""
        return self._steps

    def has_terminated(self) -> bool:
        return is_value(self._expr)

    def step(self) -> None:
        """Advance by one reduction. Does nothing once terminated."""
        reduced = step(self._expr, self._store)
        if reduced is not None:
            self._expr = reduced
            self._steps += 1

    def run_to_completion(self) -> Value:
        """Reduce until the expression is a value and return it.

        Never returns if the program diverges.
        """
        while not self.has_terminated():
            self.step()
        logger.debug("program.terminated value={} steps={}", self._expr, self._steps)
        return self._expr  # type: ignore[return-value]

    def get_state(self) -> Store:
        """Snapshot of the current store."""
        return self._store.copy()

    def step_until_state_change(self) -> Store | None:
        """Step until the store differs from before, or the program ends.

        Returns:
            A snapshot of the changed store, or None if the program
            terminated without a further visible change
        """
        before = self._store.copy()
        while not self.has_terminated():
            self.step()
            if self._store != before:
                return self._store.copy()
        return None

    def state_changes(self) -> Iterator[Store]:
        """Yield a store snapshot after every visible change until termination."""
        while (snapshot := self.step_until_state_change()) is not None:
            yield snapshot

    def cross_check(self) -> tuple[Value, Store]:
        """Evaluate the original expression with the reference evaluator.

        Runs against a fresh copy of the initial store, so neither this
        program's store nor its progress is affected.
        """
        store = self._initial.copy()
        value = eval_direct(self._source, store)
        logger.debug("program.cross_check value={}", value)
        return value, store

    def verify(self) -> Value:
        """Run to completion and confirm the reference evaluator agrees.

        Raises:
            CrossCheckError: If the final values or final stores differ
        """
        value = self.run_to_completion()
        ref_value, ref_store = self.cross_check()
        if value != ref_value:
            raise CrossCheckError("final values differ", value, ref_value)
        if self._store != ref_store:
            raise CrossCheckError("final stores differ", self._store, ref_store)
        return value

    def __repr__(self) -> str:
        return f"Program({self._expr}, {self._store}, steps={self._steps})"
