"""Grid helpers for the classic 9x9 Sudoku: parsing, formatting and checks."""

from __future__ import annotations

import hashlib
from typing import Iterator, List, Sequence, Tuple

from contracts.errors import GridFormatError, ValidationIssue, make_error

SIZE = 9
BOX = 3
DIGITS = range(1, SIZE + 1)

Grid = List[List[int]]
Cell = Tuple[int, int]

EMBEDDED_PUZZLE = (
    "043000009"
    "000600005"
    "000004100"
    "901050000"
    "000726000"
    "008010000"
    "010000720"
    "700000000"
    "200005060"
)


def grid_copy(g: Sequence[Sequence[int]]) -> Grid:
    return [list(row) for row in g]


def _cell_path(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def parse_grid(text: str) -> Grid:
    """Parse an 81-character row-major string; ``0`` and ``.`` mark empty cells.

    Whitespace (including newlines) is ignored so multi-line literals from the
    configuration file parse unchanged.
    """

    chars = "".join(text.split())
    issues: List[ValidationIssue] = []
    if len(chars) != SIZE * SIZE:
        issues.append(
            make_error("bad-shape", f"expected {SIZE * SIZE} cells, got {len(chars)}", "grid")
        )
        raise GridFormatError(issues)

    grid: Grid = []
    for r in range(SIZE):
        row = []
        for c in range(SIZE):
            ch = chars[r * SIZE + c]
            if ch == ".":
                row.append(0)
            elif ch.isdigit() and ch.isascii():
                row.append(int(ch))
            else:
                issues.append(make_error("bad-value", f"unexpected character {ch!r}", _cell_path(r, c)))
                row.append(0)
        grid.append(row)
    if issues:
        raise GridFormatError(issues)
    return grid


def to_string(g: Sequence[Sequence[int]]) -> str:
    return "".join(str(g[r][c]) for r in range(SIZE) for c in range(SIZE))


def format_rows(g: Sequence[Sequence[int]]) -> str:
    """Render one line per row with values separated by single spaces."""

    return "\n".join(" ".join(str(v) for v in row) for row in g)


def format_boxed(g: Sequence[Sequence[int]]) -> str:
    lines = []
    for r in range(SIZE):
        if r % BOX == 0:
            lines.append("+-------+-------+-------+")
        row = []
        for c in range(SIZE):
            v = g[r][c]
            row.append(str(v) if v != 0 else ".")
            if c % BOX == BOX - 1:
                row.append("|")
        lines.append("| " + " ".join(row))
    lines.append("+-------+-------+-------+")
    return "\n".join(lines)


def _units() -> Iterator[Tuple[str, List[Cell]]]:
    for r in range(SIZE):
        yield "row-duplicate", [(r, c) for c in range(SIZE)]
    for c in range(SIZE):
        yield "col-duplicate", [(r, c) for r in range(SIZE)]
    for br in range(0, SIZE, BOX):
        for bc in range(0, SIZE, BOX):
            yield "box-duplicate", [
                (br + dr, bc + dc) for dr in range(BOX) for dc in range(BOX)
            ]


def find_conflicts(g: Sequence[Sequence[int]]) -> List[ValidationIssue]:
    """Return every shape, value and uniqueness problem found in ``g``.

    Duplicates are reported once per repeated cell, on the later occurrence in
    the unit's scan order. An empty list means the givens are consistent.
    """

    if len(g) != SIZE or any(len(row) != SIZE for row in g):
        return [make_error("bad-shape", f"grid must be {SIZE}x{SIZE}", "grid")]

    issues: List[ValidationIssue] = []
    for r in range(SIZE):
        for c in range(SIZE):
            v = g[r][c]
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= SIZE:
                issues.append(make_error("bad-value", f"value {v!r} is not in 0..9", _cell_path(r, c)))
    if issues:
        return issues

    for code, cells in _units():
        seen: dict[int, Cell] = {}
        for r, c in cells:
            v = g[r][c]
            if v == 0:
                continue
            if v in seen:
                first = seen[v]
                issues.append(
                    make_error(code, f"digit {v} already at {_cell_path(*first)}", _cell_path(r, c))
                )
            else:
                seen[v] = (r, c)
    return issues


def check_consistent(g: Sequence[Sequence[int]]) -> None:
    """Raise :class:`GridFormatError` when ``g`` has any conflict."""

    issues = find_conflicts(g)
    if issues:
        raise GridFormatError(issues)


def is_solution(g: Sequence[Sequence[int]]) -> bool:
    """Return ``True`` when every row, column and box holds 1..9 exactly once."""

    need = list(DIGITS)
    if len(g) != SIZE or any(len(row) != SIZE for row in g):
        return False
    rows = all(sorted(row) == need for row in g)
    cols = all(sorted(col) == need for col in zip(*g))

    def box(br: int, bc: int) -> list[int]:
        return [g[r][c] for r in range(br, br + BOX) for c in range(bc, bc + BOX)]

    boxes = all(sorted(box(r, c)) == need for r in (0, 3, 6) for c in (0, 3, 6))
    return rows and cols and boxes


def puzzle_digest(g: Sequence[Sequence[int]]) -> str:
    return hashlib.sha256(to_string(g).encode("utf-8")).hexdigest()


__all__ = [
    "BOX",
    "DIGITS",
    "EMBEDDED_PUZZLE",
    "SIZE",
    "Grid",
    "check_consistent",
    "find_conflicts",
    "format_boxed",
    "format_rows",
    "grid_copy",
    "is_solution",
    "parse_grid",
    "puzzle_digest",
    "to_string",
]
