"""Store locations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Name of a store slot. Only its identity matters."""

    id: str

    def __str__(self) -> str:
        return self.id


def as_location(loc: "Location | str") -> Location:
    """Accept a bare identifier wherever a location is expected."""
    if isinstance(loc, Location):
        return loc
    return Location(loc)
