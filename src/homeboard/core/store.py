"""Entity store: homeworks and completion records kept in sync with a
key-value medium.

Loading never raises.  Unparseable or wrongly-shaped stored values are
logged and treated as absent, falling back to the legacy key and then to
an empty collection.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any

from homeboard.core.config import StorageKeys
from homeboard.core.storage import KeyValueMedium
from homeboard.homework.model import Homework, Progress, demo_homeworks

logger = logging.getLogger(__name__)

_MISSING = object()


class EntityStore:
    """Authoritative in-memory snapshot of ``homeworks`` and ``progress``."""

    def __init__(self, medium: KeyValueMedium, keys: StorageKeys | None = None) -> None:
        self.medium = medium
        self.keys = keys or StorageKeys()
        self.homeworks: list[Homework] = []
        self.progress: Progress = {}

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def _read_raw(self, key: str) -> str | None:
        """The raw value under *key*; ``None`` if absent or unreadable."""
        try:
            return self.medium.get_item(key)
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable data stored under %r", key, exc_info=True)
            return None

    def _read_json(self, key: str) -> Any:
        """Decode the JSON stored under *key*; ``_MISSING`` if absent or corrupt."""
        raw = self._read_raw(key)
        if raw is None:
            return _MISSING
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unparseable data stored under %r", key)
            return _MISSING

    def _read_first(self, keys: tuple[str, ...], expected: type) -> Any:
        for key in keys:
            value = self._read_json(key)
            if value is _MISSING:
                continue
            if not isinstance(value, expected):
                logger.warning(
                    "Ignoring data under %r: expected %s, got %s",
                    key, expected.__name__, type(value).__name__,
                )
                continue
            return value
        return None

    def load(self, today: date | None = None) -> None:
        """Restore both collections, seeding demo data on the very first run."""
        raw_items = self._read_first(
            (self.keys.homeworks, self.keys.legacy_homeworks), list,
        )
        raw_progress = self._read_first(
            (self.keys.progress, self.keys.legacy_progress), dict,
        )
        self.homeworks = coerce_homeworks(raw_items or [])
        self.progress = coerce_progress(raw_progress or {})

        if self._read_raw(self.keys.seeded) is None:
            if not self.homeworks:
                self.homeworks = demo_homeworks(today)
                self.persist_homeworks()
                logger.info("Seeded %d demo homeworks", len(self.homeworks))
            # Existing data counts as seeded too, so emptying it later never reseeds
            self.medium.set_item(self.keys.seeded, "1")

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def persist_homeworks(self) -> None:
        payload = [hw.to_dict() for hw in self.homeworks]
        self.medium.set_item(self.keys.homeworks, json.dumps(payload, ensure_ascii=False))

    def persist_progress(self) -> None:
        self.medium.set_item(self.keys.progress, json.dumps(self.progress, ensure_ascii=False))

    def persist(self) -> None:
        """Write both collections."""
        self.persist_homeworks()
        self.persist_progress()


def coerce_homeworks(items: list[Any]) -> list[Homework]:
    """Turn stored/imported dicts into homeworks.

    Records that fail the presence checks are skipped; for repeated ids the
    first record wins.
    """
    result: list[Homework] = []
    seen: set[str] = set()
    for idx, item in enumerate(items):
        try:
            hw = Homework.from_dict(item)
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping homework record %d: %s", idx, exc)
            continue
        if hw.id in seen:
            logger.warning("Skipping homework record %d: duplicate id %r", idx, hw.id)
            continue
        seen.add(hw.id)
        result.append(hw)
    return result


def coerce_progress(raw: dict[Any, Any]) -> Progress:
    """Keep only ``{student: {homework_id: bool}}`` shaped entries."""
    progress: Progress = {}
    for student, entries in raw.items():
        if not isinstance(entries, dict):
            logger.warning("Skipping progress for %r: not a mapping", student)
            continue
        flags: dict[str, bool] = {}
        for hid, flag in entries.items():
            if not isinstance(flag, bool):
                logger.warning(
                    "Skipping progress %r/%r: expected a boolean, got %r", student, hid, flag,
                )
                continue
            flags[str(hid)] = flag
        progress[str(student)] = flags
    return progress
