"""Path - immutable, append-by-fork sequence of cells with a running cost."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterator

from cellgrid_route.cost import check_cost
from cellgrid_route.types import EmptyPathError

if TYPE_CHECKING:
    from cellgrid import Cell

    from cellgrid_route.types import CostSupplier


class Path:
    """Ordered cells from ``start`` plus the cost of walking them.

    A Path never changes after construction. ``fork`` and ``sub_path``
    build new paths, so one path can be shared by many frontier entries.
    Paths order by ``current_cost``.
    """

    __slots__ = ("_cells", "_costs", "_current_cost", "_finished")

    def __init__(
        self,
        cells: tuple[Cell, ...],
        costs: tuple[float, ...],
        current_cost: float,
        finished: bool = False,
    ) -> None:
        if len(cells) != len(costs):
            raise ValueError("cells and costs must have the same length")
        self._cells = cells
        # costs[i] is the cost of walking from cells[0] to cells[i]
        self._costs = costs
        self._current_cost = current_cost
        self._finished = finished

    @classmethod
    def of(cls, cell: Cell) -> Path:
        """Zero-cost path that starts and stops at ``cell``."""
        return cls((cell,), (0,), 0)

    # --- Accessors ---

    @property
    def start(self) -> Cell:
        return self._cells[0]

    @property
    def end(self) -> Cell | None:
        """Last cell once the path is finished, otherwise None."""
        return self._cells[-1] if self._finished else None

    @property
    def last(self) -> Cell:
        return self._cells[-1]

    @property
    def cells(self) -> tuple[Cell, ...]:
        return self._cells

    @property
    def length(self) -> int:
        return len(self._cells)

    @property
    def current_cost(self) -> float:
        return self._current_cost

    @property
    def finished(self) -> bool:
        return self._finished

    def cost_at(self, index: int) -> float:
        """Cost of walking from the first cell to ``cells[index]``."""
        return self._costs[index]

    # --- Derivation ---

    def fork(self, cell: Cell, cost: CostSupplier, at: int = -1) -> Path:
        """Return a new path that continues with ``cell``.

        With a negative ``at`` the whole path is kept. Otherwise the path is
        cut after index ``at`` and ``cell`` follows ``cells[at]``.
        """
        if at >= len(self._cells):
            raise ValueError(
                f"at ({at}) cannot be greater than the last index of this path "
                f"({len(self._cells) - 1})"
            )
        if at < 0:
            step = check_cost(cost, cost.cost(cell.location, self.last.location))
            total = self._current_cost + step
            return Path(self._cells + (cell,), self._costs + (total,), total)
        step = check_cost(cost, cost.cost(self._cells[at].location, cell.location))
        total = self._costs[at] + step
        return Path(
            self._cells[: at + 1] + (cell,),
            self._costs[: at + 1] + (total,),
            total,
        )

    def sub_path(self, start: int, end: int) -> Path:
        """Cells ``start`` to ``end`` inclusive.

        ``current_cost`` is copied unchanged; use ``cost_at`` on the source
        path for the cost of the slice.
        """
        if start < 0:
            raise ValueError("start cannot be negative")
        if start > end:
            raise ValueError("start cannot be greater than end")
        if start >= len(self._cells):
            raise ValueError("start cannot be greater than the last index of this path")
        if end >= len(self._cells):
            raise ValueError("end cannot be greater than the last index of this path")
        base = self._costs[start]
        return Path(
            self._cells[start : end + 1],
            tuple(c - base for c in self._costs[start : end + 1]),
            self._current_cost,
        )

    def sub_path_from(self, start: int) -> Path:
        return self.sub_path(start, len(self._cells) - 1)

    def sub_path_until(self, end: int) -> Path:
        return self.sub_path(0, end)

    def finish(self) -> Path:
        return Path(self._cells, self._costs, self._current_cost, finished=True)

    # --- Protocols ---

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __lt__(self, other: Path) -> bool:
        return self.current_cost < other.current_cost

    def __le__(self, other: Path) -> bool:
        return self.current_cost <= other.current_cost

    def __gt__(self, other: Path) -> bool:
        return self.current_cost > other.current_cost

    def __ge__(self, other: Path) -> bool:
        return self.current_cost >= other.current_cost

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (
            self._cells == other._cells
            and self.current_cost == other.current_cost
            and self._finished == other._finished
        )

    def __hash__(self) -> int:
        return hash((self._cells, self.current_cost, self._finished))

    def __repr__(self) -> str:
        steps = " -> ".join(str(cell.location) for cell in self._cells)
        return f"Path(cost={self.current_cost}, {steps})"


class EmptyPath(Path):
    """Sentinel for "no path": no cells and infinite cost."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__((), (), math.inf)

    @property
    def start(self) -> Cell:
        raise EmptyPathError("Empty path has no start")

    @property
    def last(self) -> Cell:
        raise EmptyPathError("Empty path has no last cell")

    @property
    def end(self) -> Cell | None:
        return None

    def fork(self, cell: Cell, cost: CostSupplier, at: int = -1) -> Path:
        return self

    def sub_path(self, start: int, end: int) -> Path:
        return self

    def finish(self) -> Path:
        return self

    def __repr__(self) -> str:
        return "EmptyPath()"


EMPTY_PATH = EmptyPath()
