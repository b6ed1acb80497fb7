"""Shared error types for puzzle input validation."""

from __future__ import annotations


from dataclasses import dataclass
from typing import Iterable, List

SEVERITY_ERROR = "ERROR"


@dataclass(frozen=True)
class ValidationIssue:
    """Single finding produced while checking a puzzle input."""

    code: str
    msg: str
    path: str
    severity: str = SEVERITY_ERROR

    def __str__(self) -> str:
        return f"{self.path}: {self.code}: {self.msg}"


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


class GridFormatError(ValueError):
    """Raised when a Sudoku grid is malformed or its givens conflict."""

    def __init__(self, issues: Iterable[ValidationIssue]) -> None:
        self.issues: List[ValidationIssue] = list(issues)
        summary = "; ".join(str(issue) for issue in self.issues[:3])
        if len(self.issues) > 3:
            summary += f" (+{len(self.issues) - 3} more)"
        super().__init__(summary or "invalid grid")


__all__ = [
    "SEVERITY_ERROR",
    "GridFormatError",
    "ValidationIssue",
    "make_error",
]
