from __future__ import annotations

import hashlib

import pytest

from contracts.errors import GridFormatError
from sudoku import (
    EMBEDDED_PUZZLE,
    check_consistent,
    find_conflicts,
    format_boxed,
    format_rows,
    is_solution,
    parse_grid,
    puzzle_digest,
    to_string,
)

SOLVED = (
    "123456789"
    "456789123"
    "789123456"
    "214365897"
    "365897214"
    "897214365"
    "531642978"
    "642978531"
    "978531642"
)


def test_parse_accepts_dots_and_whitespace():
    text = "\n".join(EMBEDDED_PUZZLE[i:i + 9].replace("0", ".") for i in range(0, 81, 9))
    grid = parse_grid(text)
    assert grid[0] == [0, 4, 3, 0, 0, 0, 0, 0, 9]
    assert grid[8] == [2, 0, 0, 0, 0, 5, 0, 6, 0]
    assert to_string(grid) == EMBEDDED_PUZZLE


def test_parse_rejects_wrong_length():
    with pytest.raises(GridFormatError) as excinfo:
        parse_grid("123")
    assert [issue.code for issue in excinfo.value.issues] == ["bad-shape"]


def test_parse_reports_each_bad_character():
    text = "x" + EMBEDDED_PUZZLE[1:80] + "?"
    with pytest.raises(GridFormatError) as excinfo:
        parse_grid(text)
    issues = excinfo.value.issues
    assert [issue.path for issue in issues] == ["r1c1", "r9c9"]
    assert all(issue.code == "bad-value" for issue in issues)


def test_format_rows_is_space_separated():
    lines = format_rows(parse_grid(SOLVED)).splitlines()
    assert len(lines) == 9
    assert lines[0] == "1 2 3 4 5 6 7 8 9"
    assert lines[8] == "9 7 8 5 3 1 6 4 2"


def test_format_boxed_marks_empty_cells():
    lines = format_boxed(parse_grid(EMBEDDED_PUZZLE)).splitlines()
    assert lines[0] == "+-------+-------+-------+"
    assert lines[1] == "| . 4 3 | . . . | . . 9 |"
    assert lines[4] == "+-------+-------+-------+"
    assert len(lines) == 13


def test_consistent_puzzle_has_no_conflicts():
    assert find_conflicts(parse_grid(EMBEDDED_PUZZLE)) == []
    check_consistent(parse_grid(EMBEDDED_PUZZLE))


def test_duplicate_in_row_column_and_box():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][0] = 4
    grid[0][5] = 4  # row
    grid[7][0] = 4  # column
    grid[2][2] = 4  # box only
    issues = find_conflicts(grid)
    codes = {(issue.code, issue.path) for issue in issues}
    assert ("row-duplicate", "r1c6") in codes
    assert ("col-duplicate", "r8c1") in codes
    assert ("box-duplicate", "r3c3") in codes

    with pytest.raises(GridFormatError):
        check_consistent(grid)


def test_bad_shape_and_values():
    assert find_conflicts([[0] * 9] * 8)[0].code == "bad-shape"
    grid = [[0] * 9 for _ in range(9)]
    grid[1][1] = 10
    grid[2][2] = True
    issues = find_conflicts(grid)
    assert [issue.path for issue in issues] == ["r2c2", "r3c3"]


def test_is_solution():
    assert is_solution(parse_grid(SOLVED))
    grid = parse_grid(SOLVED)
    grid[0][0], grid[0][1] = grid[0][1], grid[0][0]
    assert not is_solution(grid)
    assert not is_solution(parse_grid(EMBEDDED_PUZZLE))


def test_is_solution_checks_boxes():
    latin = [[(r + c) % 9 + 1 for c in range(9)] for r in range(9)]
    assert not is_solution(latin)


def test_puzzle_digest_is_sha256_of_string_form():
    grid = parse_grid(EMBEDDED_PUZZLE)
    assert puzzle_digest(grid) == hashlib.sha256(EMBEDDED_PUZZLE.encode("utf-8")).hexdigest()
    assert len(puzzle_digest(grid)) == 64
