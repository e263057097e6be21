"""Classifying how two lists relate to each other."""

from __future__ import annotations

from enum import Enum
from typing import Sequence, TypeVar

T = TypeVar("T")


class Comparison(Enum):
    """How the first list relates to the second."""

    EQUAL = "equal"
    SUBLIST = "sublist"
    SUPERLIST = "superlist"
    UNEQUAL = "unequal"


def contains_run(haystack: Sequence[T], needle: Sequence[T]) -> bool:
    """Return True if ``needle`` occurs as a contiguous run in ``haystack``.

    An empty haystack contains nothing, not even an empty run.
    """
    hay = list(haystack)
    run = list(needle)
    width = len(run)
    return any(hay[start : start + width] == run for start in range(len(hay)))


def sublist(first_list: Sequence[T], second_list: Sequence[T]) -> Comparison:
    """Classify ``first_list`` against ``second_list``."""
    first, second = list(first_list), list(second_list)
    if first == second:
        return Comparison.EQUAL
    if contains_run(first, second):
        return Comparison.SUPERLIST
    if contains_run(second, first):
        return Comparison.SUBLIST
    return Comparison.UNEQUAL