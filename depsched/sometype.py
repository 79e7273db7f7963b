"""A container that holds one value of any type and hands it back only as that type."""

from __future__ import annotations

import copy as _copy
from typing import Any, TypeVar

T = TypeVar("T")

_EMPTY: Any = object()


class BadAnyCast(TypeError):
    """Raised when a held value is requested as a type it does not have."""


class SomeType:
    """Holds a single value of arbitrary type, or nothing.

    Assign a new value with ``holder.value = ...``. :meth:`cast` returns the
    value only when its exact type is the one asked for.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any = _EMPTY) -> None:
        self.value = value

    @property
    def empty(self) -> bool:
        """True when no value is held."""
        return self.value is _EMPTY

    def cast(self, kind: type[T]) -> T:
        """Return the held value if its exact type is ``kind``."""
        if self.empty:
            raise BadAnyCast("Error: Empty value")
        if type(self.value) is not kind:
            raise BadAnyCast("Error: Different types")
        return self.value

    def swap(self, other: SomeType) -> None:
        """Exchange the contents of this holder with ``other``."""
        self.value, other.value = other.value, self.value

    def copy(self) -> SomeType:
        """Return an independent holder with a deep copy of the value."""
        if self.empty:
            return SomeType()
        return SomeType(_copy.deepcopy(self.value))

    def __repr__(self) -> str:
        if self.empty:
            return "SomeType()"
        return f"SomeType({self.value!r})"