"""Cell - a single addressable unit of a GridMap."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from cellgrid.attributes import PERMEABILITY, Attributes
from cellgrid.location import ORIGIN, Location
from cellgrid.types import AccessMode, Axis

if TYPE_CHECKING:
    from cellgrid.grid import GridMap
    from cellgrid.layer import MapLayer

# 26 offsets: every (dx, dy, dz) in {-1, 0, 1}^3 except the zero vector
_OFFSETS = [
    Location(dx, dy, dz)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    for dz in (-1, 0, 1)
    if (dx, dy, dz) != (0, 0, 0)
]


class Cell:
    """A grid unit at a fixed location on one map.

    A cell is identified by its map and location. It owns an Attributes
    store; the map reference is only used for neighbor lookups.
    """

    def __init__(
        self, location: Location, grid: GridMap, attributes: Attributes | None = None
    ) -> None:
        self._location = location
        self._grid = grid
        self.attributes = attributes if attributes is not None else Attributes()

    @property
    def location(self) -> Location:
        return self._location

    @property
    def grid(self) -> GridMap:
        return self._grid

    @property
    def layer(self) -> MapLayer:
        return self._grid.layer(self._location.y)

    @property
    def permeable(self) -> bool:
        return self.attributes.get(PERMEABILITY, True)

    @permeable.setter
    def permeable(self, value: bool) -> None:
        self.attributes.set(PERMEABILITY, value)

    def neighbors(
        self,
        mode: AccessMode = AccessMode.ACCESSIBLE,
        include_diagonals: bool = False,
        exclude_axes: Iterable[Axis] = (),
    ) -> list[Cell]:
        """Return the populated cells around this one.

        Without ``include_diagonals`` only face-adjacent cells are
        considered. Offsets that move along any axis in ``exclude_axes`` are
        skipped. The result order is not part of the contract.
        """
        excluded = tuple(exclude_axes)
        result: list[Cell] = []
        for offset in _OFFSETS:
            if any(axis.of(offset) != 0 for axis in excluded):
                continue
            if not include_diagonals and offset.manhattan(ORIGIN) > 1:
                continue
            neighbor = self._grid.cell_at_or_none(self._location + offset)
            if neighbor is None:
                continue
            if mode is AccessMode.ALL:
                result.append(neighbor)
            elif neighbor.can_be_accessed_from(self) == (mode is AccessMode.ACCESSIBLE):
                result.append(neighbor)
        return result

    def can_be_accessed_from(self, other: Cell) -> bool:
        """True if both cells are permeable and exactly one step apart.

        Diagonal steps never count. Raises ValueError if ``other`` lives on
        a different map.
        """
        if other.grid is not self._grid:
            raise ValueError("The other cell is not on the same map as this cell")
        if not self.permeable:
            return False
        if other.location.distance_squared(self._location) != 1:
            return False
        return other.permeable

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self._grid is other._grid and self._location == other._location

    def __hash__(self) -> int:
        return hash((id(self._grid), self._location))

    def __repr__(self) -> str:
        return f"Cell({self._location.x}, {self._location.y}, {self._location.z})"
