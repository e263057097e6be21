"""Small string exercises."""

from __future__ import annotations

import unicodedata


def _clusters(text: str) -> list[str]:
    """Split text into base characters with their combining marks."""
    clusters: list[str] = []
    for char in text:
        if clusters and unicodedata.category(char).startswith("M"):
            clusters[-1] += char
        else:
            clusters.append(char)
    return clusters


def reverse(text: str) -> str:
    """Reverse ``text``, keeping combining marks on their base characters."""
    return "".join(reversed(_clusters(text)))


def capitalize_first(name: str) -> str:
    """Lower-case ``name`` and upper-case its first character."""
    if not name:
        raise ValueError("cannot capitalise an empty string")
    lowered = name.lower()
    return lowered[0].upper() + lowered[1:]