"""Tests for plain unit addition."""

from datetime import datetime

import pytest

from flequit_recurrence.core.advancer import advance
from flequit_recurrence.models.recurrence import RecurrenceUnit


@pytest.mark.parametrize(
    "unit, interval, expected",
    [
        (RecurrenceUnit.MINUTE, 90, datetime(2024, 1, 10, 10, 30)),
        (RecurrenceUnit.HOUR, 5, datetime(2024, 1, 10, 14, 0)),
        (RecurrenceUnit.DAY, 5, datetime(2024, 1, 15, 9, 0)),
        (RecurrenceUnit.WEEK, 2, datetime(2024, 1, 24, 9, 0)),
        (RecurrenceUnit.MONTH, 1, datetime(2024, 2, 10, 9, 0)),
        (RecurrenceUnit.QUARTER, 1, datetime(2024, 4, 10, 9, 0)),
        (RecurrenceUnit.HALF_YEAR, 1, datetime(2024, 7, 10, 9, 0)),
        (RecurrenceUnit.YEAR, 2, datetime(2026, 1, 10, 9, 0)),
    ],
)
def test_advance_each_unit(unit, interval, expected):
    assert advance(datetime(2024, 1, 10, 9, 0), unit, interval) == expected


class TestClamping:
    def test_month_end(self):
        assert advance(datetime(2024, 1, 31), RecurrenceUnit.MONTH, 1) == datetime(2024, 2, 29)

    def test_quarter_end(self):
        assert advance(datetime(2024, 11, 30), RecurrenceUnit.QUARTER, 1) == datetime(2025, 2, 28)

    def test_half_year_end(self):
        assert advance(datetime(2024, 8, 31), RecurrenceUnit.HALF_YEAR, 1) == datetime(2025, 2, 28)

    def test_leap_day_yearly(self):
        assert advance(datetime(2024, 2, 29), RecurrenceUnit.YEAR, 1) == datetime(2025, 2, 28)


def test_day_crosses_month_and_year():
    assert advance(datetime(2024, 12, 30), RecurrenceUnit.DAY, 3) == datetime(2025, 1, 2)
