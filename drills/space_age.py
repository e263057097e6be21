"""Ages measured in the years of other planets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

EARTH_YEAR_IN_SECONDS = 31_557_600


@dataclass(frozen=True)
class Duration:
    """A span of time measured in Earth years."""

    in_earth_years: float

    @classmethod
    def from_seconds(cls, seconds: float) -> "Duration":
        """Build a duration from a number of seconds."""
        return cls(seconds / EARTH_YEAR_IN_SECONDS)


class Planet(Enum):
    """A planet, valued by its orbital period in Earth years."""

    MERCURY = 0.2408467
    VENUS = 0.61519726
    EARTH = 1.0
    MARS = 1.8808158
    JUPITER = 11.862615
    SATURN = 29.447498
    URANUS = 84.016846
    NEPTUNE = 164.79132

    def years_during(self, duration: Duration) -> float:
        """Return how many of this planet's years fit into ``duration``."""
        return duration.in_earth_years / self.value