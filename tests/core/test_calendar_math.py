"""Tests for month arithmetic helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from flequit_recurrence.core.calendar_math import (
    add_months,
    align_awareness,
    day_in_month,
    nth_weekday,
)
from flequit_recurrence.models.recurrence import DayOfWeek


class TestAddMonths:
    def test_clamps_to_short_month(self):
        assert add_months(datetime(2024, 1, 31), 1) == datetime(2024, 2, 29)

    def test_crosses_year_boundary(self):
        assert add_months(datetime(2024, 11, 15), 3) == datetime(2025, 2, 15)

    def test_negative_months(self):
        assert add_months(datetime(2024, 3, 31), -1) == datetime(2024, 2, 29)

    def test_explicit_day_is_clamped(self):
        assert add_months(datetime(2024, 1, 5), 3, day=31) == datetime(2024, 4, 30)

    def test_keeps_time_of_day(self):
        result = add_months(datetime(2024, 1, 10, 14, 30, 15), 1)
        assert result == datetime(2024, 2, 10, 14, 30, 15)


@pytest.mark.parametrize(
    "year, month, expected",
    [(2024, 2, 29), (2023, 2, 28), (2024, 4, 30), (2024, 12, 31)],
)
def test_day_in_month_clamps_to_month_length(year, month, expected):
    result = day_in_month(datetime(2024, 5, 31, 9), year, month, 31)
    assert result == datetime(year, month, expected, 9)


class TestNthWeekday:
    def test_second_sunday(self):
        result = nth_weekday(datetime(2024, 1, 1), 2024, 2, DayOfWeek.SUNDAY, 2)
        assert result == datetime(2024, 2, 11)

    def test_first_day_is_a_match(self):
        result = nth_weekday(datetime(2024, 1, 1), 2024, 3, DayOfWeek.FRIDAY, 1)
        assert result == datetime(2024, 3, 1)

    def test_last_from_the_end(self):
        result = nth_weekday(datetime(2024, 1, 1, 8), 2024, 2, DayOfWeek.FRIDAY, -1)
        assert result == datetime(2024, 2, 23, 8)

    def test_fifth_missing_from_month(self):
        assert nth_weekday(datetime(2024, 1, 1), 2024, 2, DayOfWeek.FRIDAY, 5) is None


class TestAlignAwareness:
    def test_both_naive_unchanged(self):
        value = datetime(2024, 1, 5)
        assert align_awareness(value, datetime(2024, 1, 1)) is value

    def test_naive_read_in_zone_of_aware(self):
        tz = timezone(timedelta(hours=9))
        result = align_awareness(datetime(2024, 1, 5), datetime(2024, 1, 1, tzinfo=tz))
        assert result == datetime(2024, 1, 5, tzinfo=tz)

    def test_aware_reduced_to_wall_clock(self):
        aware = datetime(2024, 1, 5, 10, tzinfo=timezone.utc)
        assert align_awareness(aware, datetime(2024, 1, 1)) == datetime(2024, 1, 5, 10)
