"""Small text-slicing helpers: parsing, splitting and word counting."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class TextParser:
    """Pulls simple pieces out of a line of text."""

    text: str

    def first_word(self) -> str:
        """Return everything before the first space, or the whole text."""
        return self.text.split(" ", 1)[0]

    def between(self, start: str, end: str) -> Optional[str]:
        """Return the text between the first ``start`` and the first ``end``.

        Returns None if either character is missing. Raises ValueError if
        the first ``end`` comes before the first ``start``.
        """
        start_idx = self.text.find(start)
        if start_idx < 0:
            return None
        end_idx = self.text.find(end)
        if end_idx < 0:
            return None
        if end_idx < start_idx + 1:
            raise ValueError(f"{end!r} occurs before {start!r}")
        return self.text[start_idx + 1 : end_idx]


class StrSplit:
    """Iterates over the pieces of a string between delimiters.

    A trailing delimiter does not produce a final empty piece.
    """

    def __init__(self, haystack: str, delimiter: str) -> None:
        if not delimiter:
            raise ValueError("the delimiter must not be empty")
        self._remainder = haystack
        self._delimiter = delimiter

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        index = self._remainder.find(self._delimiter)
        if index >= 0:
            piece = self._remainder[:index]
            self._remainder = self._remainder[index + len(self._delimiter) :]
            return piece
        if not self._remainder:
            raise StopIteration
        rest, self._remainder = self._remainder, ""
        return rest


def str_before(s: str, c: str) -> Optional[str]:
    """Return the tail of ``s`` starting at the first occurrence of ``c``.

    Only the first character of ``c`` is looked for. Returns None if it
    does not occur.
    """
    if not c:
        raise ValueError("the character to look for must not be empty")
    index = s.find(c[0])
    return s[index:] if index >= 0 else None


def word_counts(text: str) -> Counter[str]:
    """Count the words of ``text``, split on single spaces."""
    return Counter(text.split(" "))