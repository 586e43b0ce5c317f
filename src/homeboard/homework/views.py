"""Teacher and student homework lists."""

from __future__ import annotations

from homeboard.homework.model import Homework, Progress


def _by_due_date(homeworks: list[Homework]) -> list[Homework]:
    return sorted(homeworks, key=lambda hw: hw.due_date)


def teacher_view(
    homeworks: list[Homework],
    subject: str | None = None,
    class_level: str | None = None,
    query: str = "",
) -> list[Homework]:
    """Filter by subject, class and free-text *query*; earliest due first.

    Empty filters are ignored, and so is a whitespace-only query.  Otherwise
    the query is matched as given, case-insensitively, against title,
    description, subject and class level.
    """
    query = query or ""
    if not query.strip():
        query = ""
    result = [
        hw for hw in homeworks
        if (not subject or hw.subject == subject)
        and (not class_level or hw.class_level == class_level)
        and (not query or hw.matches(query))
    ]
    return _by_due_date(result)


def student_view(
    homeworks: list[Homework],
    progress: Progress,
    class_level: str,
    student_name: str,
    hide_completed: bool = False,
) -> list[Homework]:
    """Homework for one class, earliest due first, optionally without done items."""
    result = _by_due_date([hw for hw in homeworks if hw.class_level == class_level])
    if hide_completed:
        done = progress.get(student_name, {})
        result = [hw for hw in result if not done.get(hw.id, False)]
    return result
