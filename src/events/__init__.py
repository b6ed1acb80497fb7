"""JSONL event log for console runs."""

from __future__ import annotations

from .log import DEFAULT_MAX_BYTES, EventLog

__all__ = ["DEFAULT_MAX_BYTES", "EventLog"]
