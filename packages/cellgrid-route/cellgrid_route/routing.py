"""Algorithm registry and location-based routing entry point."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from cellgrid_route.dijkstra import DijkstraRouter
from cellgrid_route.types import RoutingConfig

if TYPE_CHECKING:
    from cellgrid import GridMap, Location

    from cellgrid_route.types import CostSupplier, RoutingAlgorithm, RoutingResult

ALGORITHMS: dict[str, Callable[[RoutingConfig | None], RoutingAlgorithm]] = {
    DijkstraRouter.name: DijkstraRouter,
}


def get_algorithm(name: str, config: RoutingConfig | None = None) -> RoutingAlgorithm:
    """Instantiate a registered algorithm. Raises KeyError for unknown names."""
    try:
        factory = ALGORITHMS[name]
    except KeyError:
        raise KeyError(
            f"Unknown routing algorithm '{name}', expected one of {sorted(ALGORITHMS)}"
        ) from None
    return factory(config)


def find_path(
    grid: GridMap,
    start: Location,
    end: Location,
    cost: CostSupplier,
    algorithm: RoutingAlgorithm | None = None,
) -> RoutingResult:
    """Route between two locations of ``grid``.

    Both locations must hold a cell (KeyError otherwise). Defaults to
    Dijkstra with no action limit.
    """
    router = algorithm if algorithm is not None else DijkstraRouter()
    return router.find_path(grid.cell_at(start), grid.cell_at(end), cost)
