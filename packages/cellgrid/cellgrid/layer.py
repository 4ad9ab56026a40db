"""MapLayer - live view of the cells sharing one y coordinate."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from cellgrid.location import Location

if TYPE_CHECKING:
    from cellgrid.cell import Cell
    from cellgrid.grid import GridMap


class PlanarLocation:
    """Wraps a Location so that equality and hashing ignore ``y``.

    Everything else is forwarded explicitly to the wrapped location.
    """

    __slots__ = ("_location",)

    def __init__(self, location: Location) -> None:
        self._location = location

    @property
    def location(self) -> Location:
        return self._location

    @property
    def x(self) -> int:
        return self._location.x

    @property
    def y(self) -> int:
        return self._location.y

    @property
    def z(self) -> int:
        return self._location.z

    def distance_squared(self, other: Location) -> int:
        return self._location.distance_squared(other)

    def on_layer(self, y: int) -> Location:
        return Location(self._location.x, y, self._location.z)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PlanarLocation):
            return (self.x, self.z) == (other.x, other.z)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.z))

    def __repr__(self) -> str:
        return f"PlanarLocation({self.x}, _, {self.z})"


class MapLayer:
    """Cells of ``grid`` whose y coordinate equals ``y``.

    The layer holds no cells of its own; every query reads the grid.
    """

    def __init__(self, grid: GridMap, y: int) -> None:
        self._grid = grid
        self._y = y

    @property
    def grid(self) -> GridMap:
        return self._grid

    @property
    def y(self) -> int:
        return self._y

    def cells(self) -> set[Cell]:
        return {
            cell
            for x in range(self._grid.width)
            for z in range(self._grid.depth)
            if (cell := self._grid.cell_at_or_none(Location(x, self._y, z))) is not None
        }

    def cell_at(self, location: Location | PlanarLocation) -> Cell:
        """Return the cell at ``location`` on this layer; its y is ignored."""
        planar = location if isinstance(location, PlanarLocation) else PlanarLocation(location)
        cell = self._grid.cell_at_or_none(planar.on_layer(self._y))
        if cell is None:
            raise KeyError(f"No cell at {planar!r} on layer {self._y}")
        return cell

    def contains(self, location: Location | PlanarLocation) -> bool:
        planar = location if isinstance(location, PlanarLocation) else PlanarLocation(location)
        return planar in {PlanarLocation(cell.location) for cell in self.cells()}

    def as_grid(self) -> list[list[Cell | None]]:
        """Rows ordered by z, each row ordered by x. Empty slots are None."""
        return [
            [self._grid.cell_at_or_none(Location(x, self._y, z)) for x in range(self._grid.width)]
            for z in range(self._grid.depth)
        ]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells())

    def __len__(self) -> int:
        return len(self.cells())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapLayer):
            return NotImplemented
        return self._grid is other._grid and self._y == other._y

    def __hash__(self) -> int:
        return hash((id(self._grid), self._y))

    def __repr__(self) -> str:
        return f"MapLayer(y={self._y})"
