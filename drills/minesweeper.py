"""Annotating a minesweeper board with counts of adjacent mines."""

from __future__ import annotations

from typing import Optional, Sequence

MINE = "*"

_NEIGHBOURS = [
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
]


def _cell(minefield: Sequence[str], row: int, col: int) -> Optional[str]:
    if 0 <= row < len(minefield) and 0 <= col < len(minefield[row]):
        return minefield[row][col]
    return None


def count_adjacent_mines(minefield: Sequence[str], row: int, col: int) -> int:
    """Count the mines in the eight squares around (row, col)."""
    return sum(
        _cell(minefield, row + dr, col + dc) == MINE for dr, dc in _NEIGHBOURS
    )


def annotate(minefield: Sequence[str]) -> list[str]:
    """Replace each non-mine square by its count of adjacent mines.

    Squares with no adjacent mine keep their original character.
    """
    result = []
    for row, line in enumerate(minefield):
        annotated = []
        for col, square in enumerate(line):
            if square == MINE:
                annotated.append(MINE)
                continue
            count = count_adjacent_mines(minefield, row, col)
            annotated.append(str(count) if count else square)
        result.append("".join(annotated))
    return result