"""Walker - a Movable that routes itself across a GridMap."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cellgrid import MoveResult

from cellgrid_route.dijkstra import DijkstraRouter
from cellgrid_route.path import EMPTY_PATH, Path

if TYPE_CHECKING:
    from cellgrid import GridMap, Location

    from cellgrid_route.types import CostSupplier, RoutingAlgorithm

logger = logging.getLogger(__name__)


class Walker:
    """Entity standing on a grid location that moves along routed paths.

    ``move`` resolves immediately; it is a coroutine so that callers can
    drive walkers alongside other asynchronous work.
    """

    def __init__(
        self,
        grid: GridMap,
        location: Location,
        cost: CostSupplier,
        algorithm: RoutingAlgorithm | None = None,
    ) -> None:
        if not grid.in_bounds(location):
            raise ValueError(f"Walker location {location} is out of bounds")
        self._grid = grid
        self._location = location
        self._cost = cost
        self._algorithm = algorithm if algorithm is not None else DijkstraRouter()
        self.last_path: Path = EMPTY_PATH

    @property
    def location(self) -> Location:
        return self._location

    async def move(self, destination: Location) -> MoveResult:
        if not self._grid.in_bounds(destination):
            return MoveResult.LOCATION_OUT_OF_BOUNDS
        if destination == self._location:
            return MoveResult.SUCCESS
        origin = self._grid.cell_at_or_none(self._location)
        target = self._grid.cell_at_or_none(destination)
        if origin is None or target is None or not target.permeable:
            return MoveResult.LOCATION_NOT_REACHABLE
        try:
            result = self._algorithm.find_path(origin, target, self._cost)
        except ValueError:
            logger.warning(
                "Routing %s -> %s failed", self._location, destination, exc_info=True
            )
            return MoveResult.UNSPECIFIED_ERROR
        if not result.found:
            return MoveResult.LOCATION_NOT_REACHABLE
        self.last_path = result.path
        self._location = destination
        return MoveResult.SUCCESS
