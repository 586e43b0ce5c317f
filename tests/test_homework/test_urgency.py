"""Tests for due-date urgency."""

from datetime import date, datetime, timedelta

import pytest

from homeboard.core.types import Urgency
from homeboard.homework.urgency import annotate, classify_due, days_remaining

from conftest import NOW, TODAY, make_homework


def _offset(days: int) -> str:
    return (TODAY + timedelta(days=days)).isoformat()


class TestDaysRemaining:
    def test_today_is_zero_in_the_afternoon(self):
        assert days_remaining(TODAY, NOW) == 0

    def test_tomorrow_is_one(self):
        assert days_remaining(_offset(1), NOW) == 1

    def test_yesterday_is_minus_one(self):
        assert days_remaining(_offset(-1), NOW) == -1

    def test_exactly_midnight(self):
        midnight = datetime(2026, 3, 10)
        assert days_remaining(TODAY, midnight) == 0
        assert days_remaining(_offset(1), midnight) == 1

    def test_accepts_date_objects(self):
        assert days_remaining(date(2026, 3, 15), NOW) == 5


class TestClassifyDue:
    def test_offsets(self):
        result = [classify_due(_offset(d), NOW).urgency.value for d in (-1, 0, 1, 5)]
        assert result == ["overdue", "due today", "due soon", "upcoming"]

    @pytest.mark.parametrize("days,expected", [
        (-30, Urgency.OVERDUE),
        (2, Urgency.DUE_SOON),
        (3, Urgency.UPCOMING),
    ])
    def test_boundaries(self, days, expected):
        assert classify_due(_offset(days), NOW).urgency is expected

    def test_description(self):
        assert classify_due(_offset(-1), NOW).description == "Overdue by 1 day"
        assert classify_due(_offset(-3), NOW).description == "Overdue by 3 days"
        assert classify_due(_offset(0), NOW).description == "Due today"
        assert classify_due(_offset(1), NOW).description == "Due tomorrow"
        assert classify_due(_offset(4), NOW).description == "Due in 4 days"

    def test_tier(self):
        assert classify_due(_offset(-1), NOW).tier == "danger"
        assert classify_due(_offset(0), NOW).tier == "warning"

    def test_recomputed_against_now(self):
        due = _offset(1)
        assert classify_due(due, NOW).urgency is Urgency.DUE_SOON
        assert classify_due(due, NOW + timedelta(days=2)).urgency is Urgency.OVERDUE


def test_annotate_pairs_in_order():
    items = [make_homework("a", due_date=_offset(5)), make_homework("b", due_date=_offset(-2))]
    result = annotate(items, NOW)
    assert [hw.id for hw, _ in result] == ["a", "b"]
    assert [status.urgency for _, status in result] == [Urgency.UPCOMING, Urgency.OVERDUE]
