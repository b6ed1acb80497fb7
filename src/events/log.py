"""Append-only JSONL journal of console runs.

Every run of ``puzzles`` may leave one JSON object behind. Objects are grouped
into one directory per UTC day and written to ``events_NN.jsonl`` files; once a
file reaches ``max_bytes`` the next free index takes over.
"""

from __future__ import annotations

import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional

from contracts.validator import validate_event
from project_config import get_section

__all__ = ["DEFAULT_MAX_BYTES", "EventLog"]

DEFAULT_MAX_BYTES = 100 * 1024 * 1024

_LOGGER = logging.getLogger(__name__)


class EventLog:
    """Validated event writer rooted at ``base_dir``."""

    def __init__(self, base_dir: str | Path, *, max_bytes: Optional[int] = None) -> None:
        self.base_dir = Path(base_dir)
        self.max_bytes = max_bytes or DEFAULT_MAX_BYTES
        self.current_path: Optional[Path] = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, base_dir: str | Path | None = None) -> "EventLog":
        """Build a log from the ``[events]`` section; ``base_dir`` wins over ``events.dir``."""

        if base_dir is None:
            base_dir = get_section("events.dir", "logs/events")
        return cls(base_dir, max_bytes=get_section("events.max_bytes", None))

    def _has_room(self, path: Path) -> bool:
        return not path.exists() or path.stat().st_size < self.max_bytes

    def _target(self, day: str) -> Path:
        day_dir = self.base_dir / day
        current = self.current_path
        if current is not None and current.parent == day_dir and self._has_room(current):
            return current

        day_dir.mkdir(parents=True, exist_ok=True)
        index = 0
        while not self._has_room(day_dir / f"events_{index:02d}.jsonl"):
            index += 1
        target = day_dir / f"events_{index:02d}.jsonl"
        if current is not None and target != current:
            _LOGGER.debug("event log moved from %s to %s", current, target)
        self.current_path = target
        return target

    def append(self, event: Mapping[str, Any]) -> Path:
        """Stamp ``event`` with a UTC ``ts``, validate it and write one line.

        Raises ``jsonschema.ValidationError`` before anything is written when
        the event breaks its contract.
        """

        now = datetime.now(timezone.utc)
        record = dict(event)
        record.setdefault("ts", now.isoformat(timespec="milliseconds"))
        validate_event(record)

        line = json.dumps(record, sort_keys=True, ensure_ascii=False)
        with self._lock:
            path = self._target(now.strftime("%Y%m%d"))
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        return path
