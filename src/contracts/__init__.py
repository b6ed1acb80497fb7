"""Input validation issues and JSON Schema contracts for log events."""

from __future__ import annotations

from .errors import GridFormatError, ValidationIssue, make_error
from .validator import check_event, validate_event

__all__ = [
    "GridFormatError",
    "ValidationIssue",
    "check_event",
    "make_error",
    "validate_event",
]
