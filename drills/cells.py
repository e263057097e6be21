"""Small value containers: a mutable cell and a transparent box."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Cell(Generic[T]):
    """A container whose value can be read and replaced."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def get(self) -> T:
        """Return the stored value."""
        return self._value

    def set(self, value: T) -> None:
        """Replace the stored value."""
        self._value = value

    def __repr__(self) -> str:
        return f"Cell({self._value!r})"


class MyBox(Generic[T]):
    """Wraps a value and compares and prints as the value itself."""

    __slots__ = ("val",)

    def __init__(self, val: T) -> None:
        self.val = val

    def __str__(self) -> str:
        return str(self.val)

    def __repr__(self) -> str:
        return f"MyBox {{ val: {self.val!r} }}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MyBox):
            return self.val == other.val
        return self.val == other

    def __hash__(self) -> int:
        return hash(self.val)