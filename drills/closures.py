"""Functions taking and returning functions, and simple iterators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


def apply_twice(val: T, f: Callable[[T], T]) -> T:
    """Apply ``f`` to ``val`` and then to the result."""
    return f(f(val))


def make_adder(val: int) -> Callable[[int], int]:
    """Return a function that adds ``val`` to its argument."""

    def adder(n: int) -> int:
        return n + val

    return adder


def long_words_upper(words: Iterable[str]) -> list[str]:
    """Upper-case the words longer than three characters."""
    return [word.upper() for word in words if len(word) > 3]


@dataclass
class ItemBag(Generic[T]):
    """An ordered collection of items that can be visited with a callback."""

    values: list[T] = field(default_factory=list)

    def push(self, val: T) -> None:
        """Append ``val``."""
        self.values.append(val)

    def for_each(self, f: Callable[[T], object]) -> None:
        """Call ``f`` on every item in order."""
        for val in self.values:
            f(val)

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)


class Countdown:
    """Counts down from a value to 1."""

    def __init__(self, val: int) -> None:
        if val < 0:
            raise ValueError("a countdown cannot start below zero")
        self.val = val

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self.val == 0:
            raise StopIteration
        current = self.val
        self.val -= 1
        return current