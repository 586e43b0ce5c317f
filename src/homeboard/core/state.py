"""Board state: the single owner of homework and progress mutations. No UI logic."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from homeboard.core.config import BoardConfig
from homeboard.core.storage import FileStore, KeyValueMedium
from homeboard.core.store import EntityStore, coerce_homeworks, coerce_progress
from homeboard.homework.model import Homework, Progress, new_homework_id
from homeboard.homework.transfer import InvalidImportError, parse_import

logger = logging.getLogger(__name__)


@dataclass
class Snapshot:
    """A detached copy of the board contents."""
    homeworks: list[Homework] = field(default_factory=list)
    progress: Progress = field(default_factory=dict)


class BoardState:
    """Mutation API over an :class:`EntityStore`.

    Every mutation goes through :meth:`_commit`, which persists the touched
    collections and bumps every attached change signal.  Mutations return
    the new :class:`Snapshot`; a rejected add returns ``None``.

    One board is shared by all UI sessions so there is a single writer per
    medium; each session attaches its own signal.
    """

    def __init__(self, store: EntityStore) -> None:
        self.store = store
        self._change_signals: list[Any] = []  # shiny reactive.value per session
        self._change_counter = 0

    @classmethod
    def open(
        cls,
        config: BoardConfig | None = None,
        medium: KeyValueMedium | None = None,
        today: date | None = None,
    ) -> "BoardState":
        """Create a board on *medium* (default: a file store per *config*) and load it."""
        config = config or BoardConfig()
        if medium is None:
            medium = FileStore(config.storage_dir)
        store = EntityStore(medium, config.keys)
        store.load(today)
        return cls(store)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def homeworks(self) -> list[Homework]:
        return self.store.homeworks

    @property
    def progress(self) -> Progress:
        return self.store.progress

    def snapshot(self) -> Snapshot:
        return Snapshot(list(self.store.homeworks), copy.deepcopy(self.store.progress))

    def get(self, homework_id: str) -> Homework:
        """Get a homework by id. Raises KeyError if not found."""
        for hw in self.store.homeworks:
            if hw.id == homework_id:
                return hw
        raise KeyError(
            f"Homework '{homework_id}' not found. "
            f"Available: {[hw.id for hw in self.store.homeworks]}"
        )

    def is_done(self, student_name: str, homework_id: str) -> bool:
        return self.store.progress.get(student_name, {}).get(homework_id, False)

    def student_names(self) -> list[str]:
        """Return sorted list of students with a completion record."""
        return sorted(self.store.progress)

    def __len__(self) -> int:
        return len(self.store.homeworks)

    def __contains__(self, homework_id: str) -> bool:
        return any(hw.id == homework_id for hw in self.store.homeworks)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def attach_signal(self, signal: Any) -> None:
        """Register a settable signal to be bumped after every mutation."""
        self._change_signals.append(signal)

    def detach_signal(self, signal: Any) -> None:
        if signal in self._change_signals:
            self._change_signals.remove(signal)

    def _notify(self) -> None:
        """Bump every attached change signal."""
        self._change_counter += 1
        for signal in list(self._change_signals):
            signal.set(self._change_counter)

    def _commit(self, *, homeworks: bool = False, progress: bool = False) -> Snapshot:
        if homeworks:
            self.store.persist_homeworks()
        if progress:
            self.store.persist_progress()
        self._notify()
        return self.snapshot()

    def add_homework(
        self,
        title: str,
        subject: str,
        class_level: str,
        assigned_date: str | None = None,
        due_date: str | None = None,
        description: str = "",
        link: str = "",
        today: date | None = None,
    ) -> Snapshot | None:
        """Prepend a new homework.

        Input that would not survive a reload (blank title, subject or
        class, or a date that is not ``YYYY-MM-DD``) is ignored.
        """
        day = (today or date.today()).isoformat()
        try:
            hw = Homework.from_dict({
                "id": new_homework_id(),
                "title": title,
                "subject": subject,
                "classLevel": class_level,
                "assignedDate": assigned_date or day,
                "dueDate": due_date or day,
                "description": (description or "").strip(),
                "link": (link or "").strip(),
            })
        except ValueError as exc:
            logger.debug("Ignoring homework: %s", exc)
            return None
        self.store.homeworks = [hw, *self.store.homeworks]
        return self._commit(homeworks=True)

    def remove_homework(self, homework_id: str) -> Snapshot:
        """Remove a homework and every completion entry that points at it."""
        self.store.homeworks = [hw for hw in self.store.homeworks if hw.id != homework_id]
        for entries in self.store.progress.values():
            entries.pop(homework_id, None)
        return self._commit(homeworks=True, progress=True)

    def toggle_completion(self, student_name: str, homework_id: str, value: bool) -> Snapshot:
        """Set *student_name*'s done flag for *homework_id*."""
        self.store.progress.setdefault(student_name, {})[homework_id] = bool(value)
        return self._commit(progress=True)

    # ------------------------------------------------------------------
    # Export / import
    # ------------------------------------------------------------------

    def export_snapshot(self) -> dict[str, Any]:
        """Return a detached ``{"items", "progress"}`` document."""
        return {
            "items": [hw.to_dict() for hw in self.store.homeworks],
            "progress": copy.deepcopy(self.store.progress),
        }

    def import_snapshot(self, document: Any) -> Snapshot:
        """Replace homeworks and/or progress wholesale from an export document.

        A portion that is missing or has the wrong type is left unchanged.

        Raises
        ------
        InvalidImportError
            If *document* is not a mapping or neither portion is usable.
        """
        if not isinstance(document, dict):
            raise InvalidImportError(
                f"Import document must be an object, got {type(document).__name__}."
            )
        items = document.get("items")
        progress = document.get("progress")
        has_items = isinstance(items, list)
        has_progress = isinstance(progress, dict)
        if not (has_items or has_progress):
            raise InvalidImportError(
                "Import document needs an 'items' list or a 'progress' object."
            )

        if has_items:
            self.store.homeworks = coerce_homeworks(items)
        if has_progress:
            self.store.progress = coerce_progress(progress)
        logger.info(
            "Imported %s homeworks and %s student records",
            len(self.store.homeworks) if has_items else "no",
            len(self.store.progress) if has_progress else "no",
        )
        return self._commit(homeworks=has_items, progress=has_progress)

    def import_json(self, content: str | bytes) -> Snapshot:
        """Parse an uploaded export file and import it."""
        return self.import_snapshot(parse_import(content))
