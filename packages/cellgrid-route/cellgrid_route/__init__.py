"""cellgrid-route - lowest-cost routing over cellgrid maps."""
from __future__ import annotations

from cellgrid_route.types import (
    CostSupplier,
    EmptyPathError,
    RouteState,
    RoutingAlgorithm,
    RoutingConfig,
    RoutingResult,
)
from cellgrid_route.cost import AttributeCost, FunctionCost, UniformCost, check_cost
from cellgrid_route.heap import MinHeap
from cellgrid_route.path import EMPTY_PATH, EmptyPath, Path
from cellgrid_route.dijkstra import DijkstraRouter
from cellgrid_route.routing import ALGORITHMS, find_path, get_algorithm
from cellgrid_route.walker import Walker

__all__ = [
    "CostSupplier",
    "EmptyPathError",
    "RouteState",
    "RoutingAlgorithm",
    "RoutingConfig",
    "RoutingResult",
    "AttributeCost",
    "FunctionCost",
    "UniformCost",
    "check_cost",
    "MinHeap",
    "EMPTY_PATH",
    "EmptyPath",
    "Path",
    "DijkstraRouter",
    "ALGORITHMS",
    "find_path",
    "get_algorithm",
    "Walker",
]
