"""Chronological backtracking solver for the classic 9x9 Sudoku.

The search fills the first empty cell in row-major order with the smallest
safe digit, recurses, and resets the cell to 0 when the branch fails. The
grid is mutated in place and stays consistent at every step: a failed search
leaves it exactly as it was given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .grid import BOX, DIGITS, SIZE, Grid

_LOGGER = logging.getLogger(__name__)


@dataclass
class SolveStats:
    """Counters collected during a single search."""

    placements: int = 0
    backtracks: int = 0
    max_depth: int = 0


def find_empty(grid: Grid) -> Optional[Tuple[int, int]]:
    """Return ``(row, col)`` of the first empty cell, or ``None`` when full."""

    for row in range(SIZE):
        for col in range(SIZE):
            if grid[row][col] == 0:
                return row, col
    _LOGGER.debug("grid complete: no empty cells left")
    return None


def used_in_row(grid: Grid, row: int, num: int) -> bool:
    return num in grid[row]


def used_in_col(grid: Grid, col: int, num: int) -> bool:
    return any(grid[row][col] == num for row in range(SIZE))


def used_in_box(grid: Grid, row: int, col: int, num: int) -> bool:
    first_row = row - row % BOX
    first_col = col - col % BOX
    for r in range(first_row, first_row + BOX):
        for c in range(first_col, first_col + BOX):
            if grid[r][c] == num:
                return True
    return False


def is_location_safe(grid: Grid, row: int, col: int, num: int) -> bool:
    """Return ``True`` if ``num`` is absent from the row, column and box."""

    return (
        not used_in_row(grid, row, num)
        and not used_in_col(grid, col, num)
        and not used_in_box(grid, row, col, num)
    )


def solve(grid: Grid, stats: SolveStats | None = None) -> bool:
    """Fill ``grid`` in place; return ``False`` if no completion exists.

    Only the first solution found is produced. On failure every placement has
    been rolled back.
    """

    if stats is None:
        stats = SolveStats()
    return _solve(grid, stats, 0)


def _solve(grid: Grid, stats: SolveStats, depth: int) -> bool:
    if depth > stats.max_depth:
        stats.max_depth = depth

    cell = find_empty(grid)
    if cell is None:
        return True
    row, col = cell

    for num in DIGITS:
        if is_location_safe(grid, row, col, num):
            grid[row][col] = num
            stats.placements += 1
            if _solve(grid, stats, depth + 1):
                return True
            grid[row][col] = 0  # backtrack
            stats.backtracks += 1
    return False


__all__ = [
    "SolveStats",
    "find_empty",
    "is_location_safe",
    "solve",
    "used_in_box",
    "used_in_col",
    "used_in_row",
]
