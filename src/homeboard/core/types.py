"""Subject and class-level enumerations, plus urgency tiers."""

from __future__ import annotations

from enum import Enum

SUBJECTS: tuple[str, ...] = (
    "Math",
    "German",
    "English",
    "French",
    "Biology",
    "Chemistry",
    "Physics",
    "History",
    "Geography",
    "Art",
    "Music",
    "Sports",
    "Computer Science",
)

CLASS_LEVELS: tuple[str, ...] = tuple(
    f"{grade}{section}" for grade in range(5, 11) for section in ("A", "B")
)


class Urgency(Enum):
    """How close a homework is to its due date."""
    OVERDUE = "overdue"
    DUE_TODAY = "due today"
    DUE_SOON = "due soon"
    UPCOMING = "upcoming"

    @property
    def tier(self) -> str:
        """Bootstrap colour class used by the UI to render the badge."""
        return _TIERS[self]


_TIERS: dict[Urgency, str] = {
    Urgency.OVERDUE: "danger",
    Urgency.DUE_TODAY: "warning",
    Urgency.DUE_SOON: "info",
    Urgency.UPCOMING: "secondary",
}
