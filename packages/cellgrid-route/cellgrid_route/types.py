"""Shared types for cellgrid-route."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cellgrid import Cell, Location

    from cellgrid_route.path import Path


class EmptyPathError(LookupError):
    """Raised when reading cells from the empty path sentinel."""


class CostSupplier(Protocol):
    """Cost of stepping between two unit-adjacent locations.

    Implementations must return a non-negative value within
    ``[minimum_cost, maximum_cost]``. The result must not depend on the
    order of ``a`` and ``b``.
    """

    @property
    def minimum_cost(self) -> int: ...

    @property
    def maximum_cost(self) -> int: ...

    def cost(self, a: Location, b: Location) -> int: ...


class RouteState(Enum):
    SEARCHING = "searching"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class RoutingConfig:
    """Immutable search settings.

    Attributes:
        max_actions: Upper bound on forks per search. When exceeded the
            search stops as EXHAUSTED. None means unbounded.
    """

    max_actions: int | None = None

    def __post_init__(self) -> None:
        if self.max_actions is not None and self.max_actions <= 0:
            raise ValueError(f"max_actions must be > 0, got {self.max_actions}")


@dataclass(frozen=True)
class RoutingResult:
    """Outcome of one ``find_path`` call.

    Attributes:
        path: The finished route, or EMPTY_PATH when nothing was found.
        state: FOUND or EXHAUSTED.
        elapsed: Wall-clock seconds spent searching.
        actions: Number of path forks performed.
        truncated: True when ``max_actions`` ended the search.
    """

    path: Path
    state: RouteState
    elapsed: float
    actions: int
    truncated: bool = False

    @property
    def found(self) -> bool:
        return self.state is RouteState.FOUND

    @property
    def cost(self) -> float:
        return self.path.current_cost if self.found else math.inf

    def cells(self) -> tuple[Cell, ...]:
        return self.path.cells


class RoutingAlgorithm(Protocol):
    @property
    def name(self) -> str: ...

    def find_path(self, start: Cell, end: Cell, cost: CostSupplier) -> RoutingResult: ...
