"""Finding the anagrams of a word among candidates."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def char_counts(word: str) -> Counter[str]:
    """Count the characters of ``word``, ignoring case."""
    return Counter(char.lower()[0] for char in word)


def anagrams_for(word: str, possible_anagrams: Iterable[str]) -> set[str]:
    """Return the candidates that are anagrams of ``word``.

    Matching ignores case, and a word is never an anagram of itself.
    """
    lowered = word.lower()
    counts = char_counts(word)
    return {
        candidate
        for candidate in possible_anagrams
        if candidate.lower() != lowered and char_counts(candidate) == counts
    }