"""Shared behaviour through abstract interfaces: describing and counting things."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

_MAX_LEGS = 0xFF


class Describable(ABC):
    """Something that can describe itself in a line of text."""

    @abstractmethod
    def describe(self) -> str:
        """Return a one-line description."""

    def shout(self) -> str:
        """Return the description in upper case."""
        return self.describe().upper()


class Countable(ABC):
    """Something that has a natural count."""

    @abstractmethod
    def count(self) -> int:
        """Return the count."""


@dataclass(frozen=True)
class Animal(Describable, Countable):
    """An animal, counted by its legs."""

    name: str
    legs: int

    def __post_init__(self) -> None:
        if not 0 <= self.legs <= _MAX_LEGS:
            raise ValueError(f"legs must be between 0 and {_MAX_LEGS}")

    def describe(self) -> str:
        return f"Name:{self.name} Legs:{self.legs}"

    def count(self) -> int:
        return self.legs


@dataclass(frozen=True)
class Plant(Describable, Countable):
    """A plant, counted as one if it is flowering and zero otherwise."""

    name: str
    is_flowering: bool

    def describe(self) -> str:
        flowering = "true" if self.is_flowering else "false"
        return f"Name:{self.name} is_flowering:{flowering}"

    def count(self) -> int:
        return 1 if self.is_flowering else 0


@dataclass(frozen=True)
class Rock(Describable):
    """A rock, described by its weight."""

    weight: int

    def describe(self) -> str:
        return f"weight{self.weight}"


def describe_and_count(item: Union[Describable, Countable]) -> str:
    """Return the item's description followed by its count."""
    if not isinstance(item, Describable) or not isinstance(item, Countable):
        raise TypeError("item must be both describable and countable")
    return f"{item.describe()} count:{item.count()}"


def pick_countable(animal: Animal, plant: Plant) -> Countable:
    """Return the plant if it is flowering, otherwise the animal."""
    return plant if plant.is_flowering else animal


class Cat:
    """A cat."""

    def speak(self) -> str:
        """Return the cat's sound."""
        return "meow"


class Dog:
    """A dog."""

    def speak(self) -> str:
        """Return the dog's sound."""
        return "woof"