"""Typed keys and the per-cell attribute store."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from cellgrid.types import AttributeNotFoundError, AttributeTypeError

_MISSING: Any = object()


@dataclass(frozen=True)
class Key:
    """Identifier for an attribute, backed by a string or an integer.

    Attributes:
        id: The string or integer identifying the attribute.
        value_type: Type every stored value is checked against on read.
    """

    id: str | int
    value_type: type = object

    @classmethod
    def string(cls, name: str, value_type: type = object) -> Key:
        return cls(name, value_type)

    @classmethod
    def integer(cls, number: int, value_type: type = object) -> Key:
        return cls(number, value_type)

    def accepts(self, value: Any) -> bool:
        if self.value_type is object:
            return True
        # bool is an int subclass but a flag is never a count
        if isinstance(value, bool) and self.value_type is not bool:
            return False
        return isinstance(value, self.value_type)

    def __str__(self) -> str:
        return str(self.id)


PERMEABILITY = Key("permeability", bool)


class Attributes:
    """Mutable key -> value store. Values are type-checked when read."""

    def __init__(self, initial: dict[Key, Any] | None = None) -> None:
        self._values: dict[Key, Any] = {
            k: v for k, v in (initial or {}).items() if v is not None
        }

    def set(self, key: Key, value: Any) -> None:
        """Store ``value`` under ``key``. Storing None removes the key."""
        if value is None:
            self._values.pop(key, None)
        else:
            self._values[key] = value

    def remove(self, key: Key) -> Any:
        """Remove ``key`` and return its previous value, or None."""
        return self._values.pop(key, None)

    def get_or_none(self, key: Key) -> Any:
        value = self._values.get(key)
        if value is not None and not key.accepts(value):
            raise AttributeTypeError(key, key.value_type, value)
        return value

    def get(self, key: Key, default: Any = _MISSING) -> Any:
        """Return the stored value for ``key``.

        Falls back to ``default`` when nothing is stored. Raises
        AttributeNotFoundError if there is neither, and AttributeTypeError
        if the stored value does not match ``key.value_type``.
        """
        value = self.get_or_none(key)
        if value is not None:
            return value
        if default is _MISSING:
            raise AttributeNotFoundError(key)
        return default

    def has(self, key: Key) -> bool:
        return key in self._values

    def keys(self) -> frozenset[Key]:
        return frozenset(self._values)

    def items(self) -> list[tuple[Key, Any]]:
        return list(self._values.items())

    def copy(self) -> Attributes:
        return Attributes(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Key]:
        return iter(list(self._values))
