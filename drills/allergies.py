"""Allergy scores: which allergens a bit-packed score stands for."""

from __future__ import annotations

from enum import Enum

_SCORE_RANGE = 256


class Allergen(Enum):
    """An allergen and the score it contributes."""

    EGGS = 1
    PEANUTS = 2
    SHELLFISH = 4
    STRAWBERRIES = 8
    TOMATOES = 16
    CHOCOLATE = 32
    POLLEN = 64
    CATS = 128


class Allergies:
    """The allergens encoded by one allergy score."""

    def __init__(self, score: int) -> None:
        score = int(score)
        if score < 0:
            raise ValueError("an allergy score must not be negative")
        # Only the parts of the score below 256 name known allergens.
        self.score = score % _SCORE_RANGE

    def is_allergic_to(self, allergen: Allergen) -> bool:
        """Return True if the score includes ``allergen``."""
        return allergen in self.allergies()

    def allergies(self) -> list[Allergen]:
        """Return every allergen in the score, the highest-valued first."""
        remaining = self.score
        found = []
        for allergen in reversed(list(Allergen)):
            if remaining >= allergen.value:
                remaining -= allergen.value
                found.append(allergen)
        return found

    def __repr__(self) -> str:
        return f"Allergies({self.score})"