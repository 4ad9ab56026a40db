"""cellgrid - 3D cell grids with attributes, neighbors and layers."""
from __future__ import annotations

from cellgrid.types import (
    AccessMode,
    AttributeNotFoundError,
    AttributeTypeError,
    Axis,
)
from cellgrid.location import ORIGIN, Location, MutableLocation
from cellgrid.attributes import PERMEABILITY, Attributes, Key
from cellgrid.cell import Cell
from cellgrid.layer import MapLayer, PlanarLocation
from cellgrid.grid import Dimension, GridMap
from cellgrid.movement import Movable, MoveResult

__all__ = [
    "AccessMode",
    "AttributeNotFoundError",
    "AttributeTypeError",
    "Axis",
    "ORIGIN",
    "Location",
    "MutableLocation",
    "PERMEABILITY",
    "Attributes",
    "Key",
    "Cell",
    "MapLayer",
    "PlanarLocation",
    "Dimension",
    "GridMap",
    "Movable",
    "MoveResult",
]
