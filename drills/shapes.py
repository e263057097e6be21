"""Shapes with a common area interface."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable


class Shape(ABC):
    """A plane figure with an area."""

    @abstractmethod
    def area(self) -> float:
        """Return the area of the shape."""


@dataclass(frozen=True)
class Circle(Shape):
    """A circle of a given radius."""

    radius: float

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError("radius must not be negative")

    def area(self) -> float:
        return math.pi * self.radius * self.radius


@dataclass(frozen=True)
class Rectangle(Shape):
    """An axis-aligned rectangle."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("sides must not be negative")

    def area(self) -> float:
        return self.width * self.height


def areas(shapes: Iterable[Shape]) -> list[float]:
    """Return the area of each shape, in order."""
    return [shape.area() for shape in shapes]