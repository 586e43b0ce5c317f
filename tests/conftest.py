"""Shared test fixtures for Homeboard."""

from datetime import date, datetime

import pytest

from homeboard.core.config import StorageKeys
from homeboard.core.state import BoardState
from homeboard.core.storage import MemoryStore
from homeboard.core.store import EntityStore
from homeboard.homework.model import Homework

TODAY = date(2026, 3, 10)
NOW = datetime(2026, 3, 10, 14, 30)


def make_homework(hid, title="Task", subject="Math", class_level="5A",
                  due_date="2026-03-12", **kwargs):
    return Homework(
        id=hid,
        title=title,
        subject=subject,
        class_level=class_level,
        assigned_date=kwargs.pop("assigned_date", "2026-03-09"),
        due_date=due_date,
        **kwargs,
    )


@pytest.fixture
def sample_homeworks():
    """Small mixed list across subjects and classes, deliberately unsorted."""
    return [
        make_homework("h1", "Fractions worksheet", "Math", "5A", "2026-03-14",
                      description="Exercises on page 34"),
        make_homework("h2", "Poem analysis", "English", "7B", "2026-03-11"),
        make_homework("h3", "Times tables", "Math", "7B", "2026-03-09"),
        make_homework("h4", "Still life sketch", "Art", "5A", "2026-03-10",
                      description="Use charcoal"),
        make_homework("h5", "Cell diagram", "Biology", "5A", "2026-03-12"),
    ]


@pytest.fixture
def medium():
    """Already-seeded empty medium, so boards start without demo data."""
    return MemoryStore({StorageKeys().seeded: "1"})


@pytest.fixture
def board(medium):
    """Empty BoardState over an in-memory medium."""
    return BoardState.open(medium=medium, today=TODAY)


@pytest.fixture
def filled_board(medium, sample_homeworks):
    """BoardState pre-loaded with the sample homeworks."""
    store = EntityStore(medium)
    store.load(TODAY)
    store.homeworks = list(sample_homeworks)
    store.persist()
    return BoardState(store)
