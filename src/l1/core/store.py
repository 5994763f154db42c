"""The mutable store of integer locations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from l1.core.errors import LocationError
from l1.core.location import Location, as_location
from l1.core.types import in_int64_range


def _check_int64(loc: Location, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"store values must be integers, got {value!r} for {loc}")
    if not in_int64_range(value):
        raise ValueError(f"value {value} for {loc} is outside the signed 64-bit range")
    return value


class Store:
    """Mapping from locations to signed 64-bit integers.

    The set of locations is fixed at construction: assign and deref only
    touch existing slots and never create new ones. Copies are independent.
    """

    def __init__(self, initial: Mapping[Location | str, int] | None = None) -> None:
        self._slots: dict[Location, int] = {}
        for key, value in (initial or {}).items():
            loc = as_location(key)
            self._slots[loc] = _check_int64(loc, value)

    def contains(self, loc: Location | str) -> bool:
        return as_location(loc) in self._slots

    def deref(self, loc: Location | str, construct: str = "deref") -> int:
        """Read a location.

        Raises:
            LocationError: If loc is not in the store
        """
        loc = as_location(loc)
        try:
            return self._slots[loc]
        except KeyError as e:
            raise LocationError(construct, loc) from e

    def assign(self, loc: Location | str, value: int, construct: str = "assign") -> None:
        """Overwrite an existing location.

        Raises:
            LocationError: If loc is not in the store
        """
        loc = as_location(loc)
        if loc not in self._slots:
            raise LocationError(construct, loc)
        self._slots[loc] = _check_int64(loc, value)

    def copy(self) -> Store:
        """Independent snapshot of this store."""
        snapshot = Store()
        snapshot._slots = dict(self._slots)
        return snapshot

    def locations(self) -> frozenset[Location]:
        return frozenset(self._slots)

    def as_dict(self) -> dict[str, int]:
        return {loc.id: value for loc, value in self._slots.items()}

    def __contains__(self, loc: object) -> bool:
        if not isinstance(loc, (Location, str)):
            return False
        return self.contains(loc)

    def __iter__(self) -> Iterator[Location]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Store):
            return NotImplemented
        return self._slots == other._slots

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Store({self.as_dict()!r})"

    def __str__(self) -> str:
        slots = ", ".join(f"{loc} ↦ {value}" for loc, value in sorted(self._slots.items(), key=lambda kv: kv[0].id))
        return "{" + slots + "}"
