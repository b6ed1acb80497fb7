"""Classic 9x9 Sudoku: grid helpers and the backtracking solver."""

from __future__ import annotations

from .grid import (
    EMBEDDED_PUZZLE,
    Grid,
    check_consistent,
    find_conflicts,
    format_boxed,
    format_rows,
    grid_copy,
    is_solution,
    parse_grid,
    puzzle_digest,
    to_string,
)
from .solver import SolveStats, find_empty, is_location_safe, solve

__all__ = [
    "EMBEDDED_PUZZLE",
    "Grid",
    "SolveStats",
    "check_consistent",
    "find_conflicts",
    "find_empty",
    "format_boxed",
    "format_rows",
    "grid_copy",
    "is_location_safe",
    "is_solution",
    "parse_grid",
    "puzzle_digest",
    "solve",
    "to_string",
]
