"""
Visitor counter kept in key/value storage (the browser's localStorage, or a
JSON file for the terminal client).

Two sessions starting at once can both read N and both write N+1. That race
is accepted; the number is cosmetic.
"""

from __future__ import annotations

import json
import logging
import random
from collections.abc import MutableMapping
from pathlib import Path
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

VISITOR_COUNT_KEY = "portfolio-visitor-count"

# First-ever count is drawn from [500, 1500)
_SEED_MIN = 500
_SEED_SPAN = 1000


class JsonFileStorage(MutableMapping):
    """A str→str mapping persisted to a JSON file on every write."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._data: dict[str, str] = {}
        if self._path.exists():
            try:
                loaded = json.loads(self._path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                logger.warning("Ignoring unreadable storage file %s: %s", self._path, exc)
            else:
                if isinstance(loaded, dict):
                    self._data = {str(k): str(v) for k, v in loaded.items()}

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self._data), encoding="utf-8")

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value
        self._flush()

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._flush()

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


class VisitorCounter:
    """Reads, seeds and increments the persisted visitor count."""

    def __init__(
        self,
        storage: Optional[MutableMapping] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._storage = storage if storage is not None else {}
        self._rng = rng or random.Random()

    @property
    def count(self) -> int:
        """Current count, seeding storage on first access."""
        raw = self._storage.get(VISITOR_COUNT_KEY)
        if raw is not None:
            try:
                return int(raw)
            except ValueError:
                logger.warning("Discarding corrupt visitor count %r", raw)
        seeded = _SEED_MIN + self._rng.randrange(_SEED_SPAN)
        self._storage[VISITOR_COUNT_KEY] = str(seeded)
        return seeded

    def record_visit(self) -> int:
        """Increment and persist the count; returns the new value."""
        updated = self.count + 1
        self._storage[VISITOR_COUNT_KEY] = str(updated)
        return updated
