"""Shared enums and exceptions for cellgrid."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cellgrid.attributes import Key
    from cellgrid.location import Location


class Axis(Enum):
    X = "x"
    Y = "y"
    Z = "z"

    def of(self, location: Location) -> int:
        """Return the component of ``location`` along this axis."""
        return getattr(location, self.value)


class AccessMode(Enum):
    """Filter applied by ``Cell.neighbors``."""

    ACCESSIBLE = "accessible"
    INACCESSIBLE = "inaccessible"
    ALL = "all"


class AttributeNotFoundError(KeyError):
    """Raised when reading an attribute that is not stored and has no default."""

    def __init__(self, key: Key) -> None:
        self.key = key
        super().__init__(f"No attribute with key {key} found")


class AttributeTypeError(TypeError):
    """Raised when a stored attribute does not match its key's value type."""

    def __init__(self, key: Key, expected: type, actual: Any) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Attribute with key {key} is not of type {expected.__name__} "
            f"(got {type(actual).__name__})"
        )
