"""Schema loading utilities for event contracts."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import jsonschema

_SCHEMA_ROOT = Path(__file__).resolve().parent / "schemas"
_CATALOG_PATH = _SCHEMA_ROOT / "catalog.json"


@dataclass(frozen=True)
class SchemaDescriptor:
    """Descriptor binding an event type to its active schema."""

    event_type: str
    version: str
    schema_id: str
    schema_path: str


_catalog_cache: Dict[str, SchemaDescriptor] | None = None
_schema_cache: Dict[str, Dict[str, Any]] = {}
_compiled_cache: Dict[str, Any] = {}


def load_catalog() -> Dict[str, SchemaDescriptor]:
    """Load and cache the schema catalog."""

    global _catalog_cache
    if _catalog_cache is not None:
        return _catalog_cache

    raw_catalog = json.loads(_CATALOG_PATH.read_text("utf-8"))
    catalog: Dict[str, SchemaDescriptor] = {}
    for event_type, payload in raw_catalog.items():
        catalog[event_type] = SchemaDescriptor(
            event_type=event_type,
            version=payload["version"],
            schema_id=payload["schema_id"],
            schema_path=payload["schema_path"],
        )
    _catalog_cache = catalog
    return catalog


def get_descriptor(event_type: str) -> SchemaDescriptor:
    """Return the :class:`SchemaDescriptor` for *event_type*."""

    catalog = load_catalog()
    if event_type not in catalog:
        raise KeyError(f"Unknown event type: {event_type}")
    return catalog[event_type]


def load_schema(descriptor: SchemaDescriptor) -> Dict[str, Any]:
    """Load the JSON schema named by *descriptor* from the local schema directory."""

    resolved = (_SCHEMA_ROOT / descriptor.schema_path).resolve()
    if not resolved.is_relative_to(_SCHEMA_ROOT):
        raise ValueError("Schema path escapes the schema directory")

    if descriptor.schema_id in _schema_cache:
        return copy.deepcopy(_schema_cache[descriptor.schema_id])

    schema = json.loads(resolved.read_text("utf-8"))
    if "$id" in schema and schema["$id"] != descriptor.schema_id:
        raise ValueError(
            f"Schema id mismatch: catalog has {descriptor.schema_id!r}, schema has {schema['$id']!r}"
        )

    _schema_cache[descriptor.schema_id] = schema
    return copy.deepcopy(schema)


def compile_schema(descriptor: SchemaDescriptor) -> Any:
    """Return a cached ``jsonschema`` validator for *descriptor*."""

    cached = _compiled_cache.get(descriptor.schema_id)
    if cached is not None:
        return cached

    schema = load_schema(descriptor)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    validator = validator_cls(schema)
    _compiled_cache[descriptor.schema_id] = validator
    return validator


__all__ = [
    "SchemaDescriptor",
    "compile_schema",
    "get_descriptor",
    "load_catalog",
    "load_schema",
]
