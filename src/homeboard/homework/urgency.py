"""Due-date urgency, always relative to the moment it is asked."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from homeboard.core.types import Urgency
from homeboard.homework.model import Homework

_DAY = timedelta(days=1)


@dataclass(frozen=True)
class DueStatus:
    days_remaining: int
    urgency: Urgency

    @property
    def tier(self) -> str:
        return self.urgency.tier

    @property
    def description(self) -> str:
        days = self.days_remaining
        if days < 0:
            return f"Overdue by {-days} day{'s' if days != -1 else ''}"
        if days == 0:
            return "Due today"
        if days == 1:
            return "Due tomorrow"
        return f"Due in {days} days"


def days_remaining(due_date: str | date, now: datetime | None = None) -> int:
    """Whole days from *now* until midnight of *due_date*, rounded up."""
    if isinstance(due_date, str):
        due_date = date.fromisoformat(due_date)
    now = now or datetime.now()
    midnight = datetime.combine(due_date, datetime.min.time())
    return math.ceil((midnight - now) / _DAY)


def classify_due(due_date: str | date, now: datetime | None = None) -> DueStatus:
    """Classify a due date as overdue / due today / due soon / upcoming."""
    days = days_remaining(due_date, now)
    if days < 0:
        urgency = Urgency.OVERDUE
    elif days == 0:
        urgency = Urgency.DUE_TODAY
    elif days <= 2:
        urgency = Urgency.DUE_SOON
    else:
        urgency = Urgency.UPCOMING
    return DueStatus(days_remaining=days, urgency=urgency)


def annotate(
    homeworks: list[Homework], now: datetime | None = None,
) -> list[tuple[Homework, DueStatus]]:
    """Pair each homework with its due status, all measured from the same *now*."""
    now = now or datetime.now()
    return [(hw, classify_due(hw.due_date, now)) for hw in homeworks]
