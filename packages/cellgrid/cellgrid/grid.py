"""GridMap - bounded 3D array of optional cells."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from cellgrid.attributes import Key
from cellgrid.cell import Cell
from cellgrid.layer import MapLayer
from cellgrid.location import Location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dimension:
    width: int
    height: int
    depth: int


class GridMap:
    """Fixed-size width x height x depth grid. Slots may be empty.

    x spans the width, y the height (one layer per y value) and z the depth.
    """

    def __init__(self, width: int, height: int, depth: int) -> None:
        if width <= 0 or height <= 0 or depth <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {width}x{height}x{depth}"
            )
        self._dimension = Dimension(width, height, depth)
        self._slots: list[list[list[Cell | None]]] = [
            [[None] * depth for _ in range(height)] for _ in range(width)
        ]

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    @property
    def width(self) -> int:
        return self._dimension.width

    @property
    def height(self) -> int:
        return self._dimension.height

    @property
    def depth(self) -> int:
        return self._dimension.depth

    def in_bounds(self, location: Location) -> bool:
        return (
            0 <= location.x < self.width
            and 0 <= location.y < self.height
            and 0 <= location.z < self.depth
        )

    def _check_bounds(self, location: Location) -> None:
        if not self.in_bounds(location):
            raise ValueError(
                f"Invalid location: {location} out of bounds for "
                f"{self.width}x{self.height}x{self.depth} grid"
            )

    # --- Lookup ---

    def cell_at_or_none(self, location: Location) -> Cell | None:
        if not self.in_bounds(location):
            return None
        return self._slots[location.x][location.y][location.z]

    def cell_at(self, location: Location) -> Cell:
        cell = self.cell_at_or_none(location)
        if cell is None:
            raise KeyError(f"No cell at {location}")
        return cell

    def cells(self) -> list[Cell]:
        """Return every populated cell. Order is not guaranteed."""
        return [
            cell
            for plane in self._slots
            for column in plane
            for cell in column
            if cell is not None
        ]

    # --- Mutation ---

    def set_cell(self, cell: Cell) -> None:
        """Store ``cell`` at its own location, replacing any previous cell."""
        if cell.grid is not self:
            raise ValueError(f"Cell at {cell.location} belongs to a different map")
        location = cell.location
        self._check_bounds(location)
        self._slots[location.x][location.y][location.z] = cell

    def remove_cell_at(self, location: Location) -> Cell | None:
        self._check_bounds(location)
        cell = self._slots[location.x][location.y][location.z]
        self._slots[location.x][location.y][location.z] = None
        return cell

    def create_cell(
        self, location: Location, attributes: dict[Key, Any] | None = None
    ) -> Cell:
        """Construct a cell at ``location``, store it and return it."""
        self._check_bounds(location)
        cell = Cell(location, self)
        for key, value in (attributes or {}).items():
            cell.attributes.set(key, value)
        self.set_cell(cell)
        return cell

    def fill(self, factory: Callable[[Location, GridMap], Cell] = Cell) -> int:
        """Populate every empty slot with ``factory(location, grid)``.

        Returns the number of cells created.
        """
        created = 0
        for x in range(self.width):
            for y in range(self.height):
                for z in range(self.depth):
                    if self._slots[x][y][z] is None:
                        self.set_cell(factory(Location(x, y, z), self))
                        created += 1
        logger.debug("Filled %d empty slots on %s", created, self)
        return created

    # --- Layers ---

    def layer(self, y: int) -> MapLayer:
        if not 0 <= y < self.height:
            raise IndexError(f"No layer {y} in grid of height {self.height}")
        return MapLayer(self, y)

    def layers(self) -> list[MapLayer]:
        """All layers ordered by y, lowest first."""
        return [MapLayer(self, y) for y in range(self.height)]

    def set_layer(self, layer: MapLayer) -> int:
        """Replace the cells at ``layer.y`` with copies of the layer's cells.

        The layer may belong to another map with the same width and depth.
        Returns the y coordinate that was written.
        """
        y = layer.y
        if not 0 <= y < self.height:
            raise IndexError(f"No layer {y} in grid of height {self.height}")
        if layer.grid.width != self.width or layer.grid.depth != self.depth:
            raise ValueError(
                f"Layer of size {layer.grid.width}x{layer.grid.depth} does not fit "
                f"{self.width}x{self.depth} grid"
            )
        sources = list(layer.cells())
        for x in range(self.width):
            for z in range(self.depth):
                self._slots[x][y][z] = None
        for source in sources:
            self.set_cell(Cell(source.location, self, source.attributes.copy()))
        return y

    def __contains__(self, location: object) -> bool:
        return isinstance(location, Location) and self.cell_at_or_none(location) is not None

    def __len__(self) -> int:
        return len(self.cells())

    def __repr__(self) -> str:
        return f"GridMap({self.width}x{self.height}x{self.depth})"
