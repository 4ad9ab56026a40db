"""Movement boundary: outcome enum and the Movable protocol."""
from __future__ import annotations

from enum import Enum
from typing import Protocol

from cellgrid.location import Location


class MoveResult(Enum):
    """Outcome of ``Movable.move``."""

    SUCCESS = 0
    LOCATION_NOT_REACHABLE = 1
    LOCATION_OUT_OF_BOUNDS = 2
    UNSPECIFIED_ERROR = 3

    @property
    def success(self) -> bool:
        return self is MoveResult.SUCCESS


class Movable(Protocol):
    @property
    def location(self) -> Location: ...

    async def move(self, destination: Location) -> MoveResult: ...
