"""Location - integer 3D coordinate with element-wise arithmetic."""
from __future__ import annotations

import math
from dataclasses import dataclass

X_BITS = 20
Y_BITS = 20
Z_BITS = 20
X_MASK = (1 << X_BITS) - 1
Y_MASK = (1 << Y_BITS) - 1
Z_MASK = (1 << Z_BITS) - 1


def _components(other: object) -> tuple[int, int, int] | None:
    if isinstance(other, Location):
        return other.x, other.y, other.z
    if isinstance(other, int) and not isinstance(other, bool):
        return other, other, other
    return None


@dataclass(frozen=True, slots=True)
class Location:
    """Immutable grid address. x is width, y is height (layer), z is depth.

    Arithmetic operators are element-wise and always return a new Location.
    ``*``, ``//`` and ``%`` also accept a scalar int applied to every component.
    """

    x: int
    y: int
    z: int

    def __add__(self, other: Location) -> Location:
        if not isinstance(other, Location):
            return NotImplemented
        return Location(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Location) -> Location:
        if not isinstance(other, Location):
            return NotImplemented
        return Location(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Location | int) -> Location:
        components = _components(other)
        if components is None:
            return NotImplemented
        ox, oy, oz = components
        return Location(self.x * ox, self.y * oy, self.z * oz)

    def __floordiv__(self, other: Location | int) -> Location:
        components = _components(other)
        if components is None:
            return NotImplemented
        ox, oy, oz = components
        return Location(self.x // ox, self.y // oy, self.z // oz)

    def __mod__(self, other: Location | int) -> Location:
        components = _components(other)
        if components is None:
            return NotImplemented
        ox, oy, oz = components
        return Location(self.x % ox, self.y % oy, self.z % oz)

    def __neg__(self) -> Location:
        return Location(-self.x, -self.y, -self.z)

    def distance_squared(self, other: Location) -> int:
        return (
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def distance_to(self, other: Location) -> float:
        return math.sqrt(self.distance_squared(other))

    def manhattan(self, other: Location) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def to_mutable(self) -> MutableLocation:
        return MutableLocation(self.x, self.y, self.z)

    def encode(self) -> int:
        """Pack into a 60-bit integer, 20 bits per axis.

        Components are masked, so negative or oversized coordinates are
        truncated and two distinct locations may share an encoding.
        """
        return (
            ((self.x & X_MASK) << (Y_BITS + Z_BITS))
            | ((self.y & Y_MASK) << Z_BITS)
            | (self.z & Z_MASK)
        )

    @classmethod
    def decode(cls, packed: int) -> Location:
        """Inverse of ``encode`` for non-negative coordinates below 2**20."""
        return cls(
            (packed >> (Y_BITS + Z_BITS)) & X_MASK,
            (packed >> Z_BITS) & Y_MASK,
            packed & Z_MASK,
        )

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


ORIGIN = Location(0, 0, 0)


@dataclass(eq=False, slots=True)
class MutableLocation:
    """Location that is updated in place through explicit setters.

    Use ``freeze()`` to obtain an immutable ``Location`` for grid lookups.
    """

    x: int
    y: int
    z: int

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Location, MutableLocation)):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    def set(
        self, x: int | None = None, y: int | None = None, z: int | None = None
    ) -> None:
        if x is not None:
            self.x = x
        if y is not None:
            self.y = y
        if z is not None:
            self.z = z

    def shift(self, offset: Location) -> None:
        self.x += offset.x
        self.y += offset.y
        self.z += offset.z

    def freeze(self) -> Location:
        return Location(self.x, self.y, self.z)
