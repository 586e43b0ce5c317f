"""Homeboard -- a single-device homework board for a school.

Teachers assign homework per subject and class, students tick items off,
and an overview aggregates counts.  Works as a Shiny app and as a library.

Quick start (web app)::

    homeboard            # CLI command

Quick start (library)::

    from homeboard import BoardState, MemoryStore, teacher_view

    board = BoardState.open(medium=MemoryStore())
    board.add_homework("Essay", "English", "7B", due_date="2026-11-02")
    items = teacher_view(board.homeworks, class_level="7B")
"""

__version__ = "0.1.0"

from homeboard.core.config import BoardConfig, load_config
from homeboard.core.state import BoardState, Snapshot
from homeboard.core.storage import FileStore, KeyValueMedium, MemoryStore
from homeboard.core.store import EntityStore
from homeboard.core.types import Urgency
from homeboard.homework.model import Homework
from homeboard.homework.stats import class_completion, overview_frame, subject_counts
from homeboard.homework.transfer import InvalidImportError
from homeboard.homework.urgency import annotate, classify_due
from homeboard.homework.views import student_view, teacher_view

__all__ = [
    # Core
    "BoardConfig", "load_config", "BoardState", "Snapshot",
    "EntityStore", "FileStore", "KeyValueMedium", "MemoryStore", "Urgency",
    # Homework
    "Homework", "InvalidImportError",
    "teacher_view", "student_view", "annotate", "classify_due",
    "subject_counts", "class_completion", "overview_frame",
]
