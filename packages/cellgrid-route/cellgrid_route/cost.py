"""Ready-made CostSupplier implementations."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from cellgrid import GridMap, Key, Location

    from cellgrid_route.types import CostSupplier


def check_cost(supplier: CostSupplier, value: int) -> int:
    """Return ``value`` if the supplier's declared range allows it."""
    if value < 0:
        raise ValueError(f"cost must be >= 0, got {value}")
    if not supplier.minimum_cost <= value <= supplier.maximum_cost:
        raise ValueError(
            f"cost {value} outside declared range "
            f"[{supplier.minimum_cost}, {supplier.maximum_cost}]"
        )
    return value


class UniformCost:
    """Every step costs the same."""

    def __init__(self, value: int = 1) -> None:
        if value < 0:
            raise ValueError(f"value must be >= 0, got {value}")
        self._value = value

    @property
    def minimum_cost(self) -> int:
        return self._value

    @property
    def maximum_cost(self) -> int:
        return self._value

    def cost(self, a: Location, b: Location) -> int:
        return self._value


class FunctionCost:
    """Adapts a plain ``(a, b) -> int`` callable."""

    def __init__(
        self,
        fn: Callable[[Location, Location], int],
        minimum_cost: int = 0,
        maximum_cost: int = 1,
    ) -> None:
        if minimum_cost < 0:
            raise ValueError(f"minimum_cost must be >= 0, got {minimum_cost}")
        if maximum_cost < minimum_cost:
            raise ValueError(
                f"maximum_cost {maximum_cost} is below minimum_cost {minimum_cost}"
            )
        self._fn = fn
        self._minimum = minimum_cost
        self._maximum = maximum_cost

    @property
    def minimum_cost(self) -> int:
        return self._minimum

    @property
    def maximum_cost(self) -> int:
        return self._maximum

    def cost(self, a: Location, b: Location) -> int:
        return self._fn(a, b)


class AttributeCost:
    """Reads step cost from an int attribute stored on the cells.

    The cost of a step is the larger of the two endpoint values, so it does
    not depend on direction. Cells without the attribute use ``default``.
    """

    def __init__(
        self, grid: GridMap, key: Key, default: int = 1, maximum_cost: int = 1
    ) -> None:
        if default < 0:
            raise ValueError(f"default must be >= 0, got {default}")
        if maximum_cost < default:
            raise ValueError(
                f"maximum_cost {maximum_cost} is below default {default}"
            )
        self._grid = grid
        self._key = key
        self._default = default
        self._maximum = maximum_cost

    @property
    def minimum_cost(self) -> int:
        return 0

    @property
    def maximum_cost(self) -> int:
        return self._maximum

    def _weight(self, location: Location) -> int:
        cell = self._grid.cell_at_or_none(location)
        if cell is None:
            return self._default
        return cell.attributes.get(self._key, self._default)

    def cost(self, a: Location, b: Location) -> int:
        return max(self._weight(a), self._weight(b))
