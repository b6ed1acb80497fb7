"""Public facade for validating log events against their JSON schemas."""

from __future__ import annotations

from typing import Any, List, Mapping

from . import loader
from .errors import ValidationIssue, make_error


def _descriptor_for(event: Mapping[str, Any]) -> loader.SchemaDescriptor:
    event_type = event.get("type")
    if not isinstance(event_type, str) or not event_type:
        raise KeyError("Event is missing a 'type' field")
    return loader.get_descriptor(event_type)


def check_event(event: Mapping[str, Any]) -> List[ValidationIssue]:
    """Return all schema violations of *event* as :class:`ValidationIssue` items."""

    validator = loader.compile_schema(_descriptor_for(event))
    issues: List[ValidationIssue] = []
    errors = sorted(
        validator.iter_errors(dict(event)),
        key=lambda e: [str(part) for part in e.absolute_path],
    )
    for error in errors:
        path = "/".join(str(part) for part in error.absolute_path) or "$"
        issues.append(make_error(f"schema-{error.validator}", error.message, path))
    return issues


def validate_event(event: Mapping[str, Any]) -> None:
    """Raise ``jsonschema.ValidationError`` when *event* breaks its contract."""

    validator = loader.compile_schema(_descriptor_for(event))
    validator.validate(dict(event))


__all__ = ["check_event", "validate_event"]
