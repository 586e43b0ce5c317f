"""Homework entity and its JSON-ready dict form."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date
from typing import Any

# Completion flags: student name -> homework id -> done
Progress = dict[str, dict[str, bool]]


def new_homework_id() -> str:
    """Return a fresh opaque homework id."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Homework:
    """A single assignment for one subject and class level.

    Dates are ISO 8601 strings (``YYYY-MM-DD``) so that lexicographic
    order equals chronological order.
    """

    id: str
    title: str
    subject: str
    class_level: str
    assigned_date: str
    due_date: str
    description: str = ""
    link: str = ""

    @property
    def due(self) -> date:
        return date.fromisoformat(self.due_date)

    def matches(self, needle: str) -> bool:
        """True if *needle* occurs (case-insensitive) in any searchable field."""
        needle = needle.lower()
        return any(
            needle in value.lower()
            for value in (self.title, self.description, self.subject, self.class_level)
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "title": self.title,
            "subject": self.subject,
            "classLevel": self.class_level,
            "assignedDate": self.assigned_date,
            "dueDate": self.due_date,
            "description": self.description,
            "link": self.link,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Homework":
        """Build a :class:`Homework` from its stored/exported dict.

        ``title``, ``subject`` and ``classLevel`` must be non-blank and the
        dates must be ISO ``YYYY-MM-DD``.  A missing ``id`` gets a fresh one.

        Raises
        ------
        TypeError
            If *data* is not a dict.
        ValueError
            If a required field is missing or blank, or a date is malformed.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a dict, got {type(data).__name__}.")

        title = str(data.get("title") or "").strip()
        if not title:
            raise ValueError("Homework is missing a title.")
        for key in ("subject", "classLevel", "dueDate"):
            if not str(data.get(key) or "").strip():
                raise ValueError(f"Homework '{title}' is missing '{key}'.")

        due_date = _iso_date(data["dueDate"], "dueDate", title)
        assigned = data.get("assignedDate")
        return cls(
            id=str(data.get("id") or new_homework_id()),
            title=title,
            subject=str(data["subject"]).strip(),
            class_level=str(data["classLevel"]).strip(),
            assigned_date=_iso_date(assigned, "assignedDate", title) if assigned else due_date,
            due_date=due_date,
            description=str(data.get("description") or ""),
            link=str(data.get("link") or ""),
        )


def _iso_date(value: Any, key: str, title: str) -> str:
    """Normalise *value* to ``YYYY-MM-DD``; ``ValueError`` if it is not a date."""
    try:
        return date.fromisoformat(str(value).strip()).isoformat()
    except ValueError:
        raise ValueError(
            f"Homework '{title}' has an invalid '{key}': {value!r} (expected YYYY-MM-DD)."
        ) from None


def demo_homeworks(today: date | None = None) -> list[Homework]:
    """The three sample assignments written on first run, all due *today*."""
    day = (today or date.today()).isoformat()
    samples = [
        ("Fractions worksheet", "Math", "5A", "Exercises 1-12 on page 34."),
        ("Reading log", "English", "7B", "Read chapter 3 and note five new words."),
        ("Plant cell diagram", "Biology", "9A", "Label all organelles."),
    ]
    return [
        Homework(
            id=new_homework_id(),
            title=title,
            subject=subject,
            class_level=class_level,
            assigned_date=day,
            due_date=day,
            description=description,
        )
        for title, subject, class_level, description in samples
    ]
