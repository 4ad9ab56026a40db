"""Dijkstra routing over explicit Path objects."""
from __future__ import annotations

import logging
import math
import time
from typing import TYPE_CHECKING

from cellgrid import AccessMode

from cellgrid_route.heap import MinHeap
from cellgrid_route.path import EMPTY_PATH, Path
from cellgrid_route.types import RouteState, RoutingConfig, RoutingResult

if TYPE_CHECKING:
    from cellgrid import Cell

    from cellgrid_route.types import CostSupplier

logger = logging.getLogger(__name__)


class DijkstraRouter:
    """Uninformed lowest-cost search between two cells of one map.

    The frontier holds whole paths ordered by cost. A path is pushed only
    when it reaches its last cell more cheaply than any path seen before,
    which bounds the frontier and guarantees termination on cyclic maps.
    Among equal-cost paths the one queued first is expanded first.
    """

    name = "dijkstra"

    def __init__(self, config: RoutingConfig | None = None) -> None:
        self.config = config if config is not None else RoutingConfig()

    def find_path(self, start: Cell, end: Cell, cost: CostSupplier) -> RoutingResult:
        if start == end:
            raise ValueError("Start and end cells must be different")
        if start.grid is not end.grid:
            raise ValueError("Start and end cells must be on the same map")

        logger.debug("Routing %s -> %s on %r", start.location, end.location, start.grid)
        began = time.perf_counter()
        max_actions = self.config.max_actions
        goal = end.location

        frontier: MinHeap[Path] = MinHeap(key=lambda p: p.current_cost)
        frontier.push(Path.of(start))
        best: dict[int, float] = {start.location.encode(): 0}
        actions = 0
        state = RouteState.SEARCHING
        result_path: Path = EMPTY_PATH
        truncated = False

        while state is RouteState.SEARCHING:
            if not frontier:
                state = RouteState.EXHAUSTED
                break
            path = frontier.pop()
            last = path.last
            if last.location == goal:
                result_path = path.finish()
                state = RouteState.FOUND
                break
            if path.current_cost > best.get(last.location.encode(), math.inf):
                # a cheaper path to this cell was queued after this one
                continue
            for neighbor in last.neighbors(AccessMode.ACCESSIBLE):
                if max_actions is not None and actions >= max_actions:
                    truncated = True
                    state = RouteState.EXHAUSTED
                    break
                forked = path.fork(neighbor, cost)
                actions += 1
                code = neighbor.location.encode()
                if forked.current_cost < best.get(code, math.inf):
                    best[code] = forked.current_cost
                    frontier.push(forked)

        elapsed = time.perf_counter() - began
        if truncated:
            logger.warning(
                "Routing %s -> %s stopped after %d actions",
                start.location, end.location, actions,
            )
        elif state is RouteState.EXHAUSTED:
            logger.info(
                "No path from %s to %s (%d actions)", start.location, end.location, actions
            )
        else:
            logger.debug(
                "Found path %s -> %s: cost=%s cells=%d actions=%d in %.6fs",
                start.location, end.location, result_path.current_cost,
                result_path.length, actions, elapsed,
            )
        return RoutingResult(
            path=result_path,
            state=state,
            elapsed=elapsed,
            actions=actions,
            truncated=truncated,
        )
