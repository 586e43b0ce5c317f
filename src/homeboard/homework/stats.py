"""Overview aggregates -- homework per subject and completion per class."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pandas as pd

from homeboard.homework.model import Homework, Progress


@dataclass
class ClassCompletion:
    """Completion estimate for one class level.

    ``done`` is the sum of per-student shares: every done entry adds
    ``1 / n_students`` where ``n_students`` counts students with any record.
    This is an average normalised contribution, not the share of students
    who finished everything.
    """
    class_level: str
    total: int
    done: float
    percent: int


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _homework_frame(homeworks: list[Homework]) -> pd.DataFrame:
    return pd.DataFrame(
        [(hw.id, hw.subject, hw.class_level) for hw in homeworks],
        columns=["id", "subject", "class_level"],
    )


def subject_counts(homeworks: list[Homework]) -> list[tuple[str, int]]:
    """``(subject, count)`` pairs for the subjects present, in first-seen order."""
    if not homeworks:
        return []
    counts = _homework_frame(homeworks).groupby("subject", sort=False).size()
    return [(str(subject), int(n)) for subject, n in counts.items()]


def class_completion(homeworks: list[Homework], progress: Progress) -> list[ClassCompletion]:
    """Estimated completion per class level present in *homeworks*."""
    if not homeworks:
        return []
    frame = _homework_frame(homeworks)
    totals = frame.groupby("class_level", sort=False).size()

    students = [name for name, entries in progress.items() if entries]
    done_by_class = pd.Series(dtype=float)
    if students:
        done = pd.DataFrame(
            [hid for name in students for hid, flag in progress[name].items() if flag],
            columns=["id"],
        )
        merged = done.merge(frame[["id", "class_level"]], on="id", how="inner")
        done_by_class = merged.groupby("class_level").size() / len(students)

    result = []
    for class_level, total in totals.items():
        done_sum = float(done_by_class.get(class_level, 0.0))
        percent = _round_half_up(done_sum / total * 100) if total else 0
        result.append(ClassCompletion(str(class_level), int(total), done_sum, percent))
    return result


def overview_frame(homeworks: list[Homework], progress: Progress) -> pd.DataFrame:
    """Class completion as a display table."""
    rows = class_completion(homeworks, progress)
    return pd.DataFrame(
        [(r.class_level, r.total, round(r.done, 2), r.percent) for r in rows],
        columns=["Class", "Homework", "Done (est.)", "Percent"],
    )
