"""Homework entities, derived views and JSON transfer."""

from homeboard.homework.model import Homework, Progress, demo_homeworks, new_homework_id
from homeboard.homework.stats import (
    ClassCompletion,
    class_completion,
    overview_frame,
    subject_counts,
)
from homeboard.homework.transfer import (
    InvalidImportError,
    export_bytes,
    export_filename,
    export_json,
    parse_import,
)
from homeboard.homework.urgency import DueStatus, annotate, classify_due, days_remaining
from homeboard.homework.views import student_view, teacher_view

__all__ = [
    "ClassCompletion",
    "DueStatus",
    "Homework",
    "InvalidImportError",
    "Progress",
    "annotate",
    "class_completion",
    "classify_due",
    "days_remaining",
    "demo_homeworks",
    "export_bytes",
    "export_filename",
    "export_json",
    "new_homework_id",
    "overview_frame",
    "parse_import",
    "student_view",
    "subject_counts",
    "teacher_view",
]
