"""Tests for the extended (multi-date) pattern resolvers."""

from datetime import datetime

from flequit_recurrence.core.extended import resolve_extended, week_in_period
from flequit_recurrence.models.recurrence import DayOfWeek, WeekdayInPeriod


def _week(week: int, day: str) -> dict:
    return {"week": week, "day_of_week": day}


class TestExtendedWeekly:
    def test_next_listed_weekday(self, make_rule):
        rule = make_rule(
            unit="week", extended_pattern={"weekly": {"days_of_week": ["monday", "thursday"]}}
        )
        assert resolve_extended(datetime(2024, 1, 1), rule) == datetime(2024, 1, 4)


class TestExtendedMonthly:
    def test_later_day_in_same_month(self, make_rule):
        rule = make_rule(unit="month", extended_pattern={"monthly": {"days_of_month": [10, 25]}})
        assert resolve_extended(datetime(2024, 1, 12, 9), rule) == datetime(2024, 1, 25, 9)

    def test_rolls_into_next_month(self, make_rule):
        rule = make_rule(unit="month", extended_pattern={"monthly": {"days_of_month": [5]}})
        assert resolve_extended(datetime(2024, 1, 12), rule) == datetime(2024, 2, 5)

    def test_day_clamped_to_month_length(self, make_rule):
        rule = make_rule(unit="month", extended_pattern={"monthly": {"days_of_month": [31]}})
        assert resolve_extended(datetime(2024, 1, 31), rule) == datetime(2024, 2, 29)

    def test_days_and_weeks_mixed(self, make_rule):
        rule = make_rule(
            unit="month",
            extended_pattern={
                "monthly": {"days_of_month": [20], "weeks_of_month": [_week(1, "monday")]}
            },
        )
        assert resolve_extended(datetime(2024, 1, 10), rule) == datetime(2024, 1, 20)
        # First Monday of February 2024 comes before the 20th
        assert resolve_extended(datetime(2024, 1, 20), rule) == datetime(2024, 2, 5)

    def test_week_five_is_last_weekday(self, make_rule):
        rule = make_rule(
            unit="month", extended_pattern={"monthly": {"weeks_of_month": [_week(5, "friday")]}}
        )
        assert resolve_extended(datetime(2024, 1, 26), rule) == datetime(2024, 2, 23)

    def test_interval_skips_months(self, make_rule):
        rule = make_rule(
            unit="month", interval=3, extended_pattern={"monthly": {"days_of_month": [1]}}
        )
        assert resolve_extended(datetime(2024, 1, 15), rule) == datetime(2024, 4, 1)


class TestExtendedPeriods:
    def test_quarter_offsets(self, make_rule):
        rule = make_rule(
            unit="quarter",
            extended_pattern={"quarterly": {"offset_months": [0, 2], "days_of_month": [15]}},
        )
        assert resolve_extended(datetime(2024, 1, 20), rule) == datetime(2024, 3, 15)
        assert resolve_extended(datetime(2024, 3, 15), rule) == datetime(2024, 4, 15)

    def test_quarter_nth_weekday_of_period(self, make_rule):
        rule = make_rule(
            unit="quarter",
            extended_pattern={"quarterly": {"weeks_of_period": [_week(2, "tuesday")]}},
        )
        # The second 7-day block of the quarter starts on Monday 2024-01-08
        assert resolve_extended(datetime(2024, 1, 1), rule) == datetime(2024, 1, 9)

    def test_half_year_week_past_period_end_is_skipped(self, make_rule):
        rule = make_rule(
            unit="half_year",
            extended_pattern={"half_year": {"weeks_of_period": [_week(27, "monday")]}},
        )
        # Week 27 of Jan-Jun 2024 lands on 2024-07-01, outside the period
        assert resolve_extended(datetime(2024, 1, 1), rule) == datetime(2024, 12, 30)

    def test_week_in_period_bounds(self):
        entry = WeekdayInPeriod(week=14, day_of_week=DayOfWeek.MONDAY)
        assert week_in_period(datetime(2024, 1, 1), 3, entry) is None
        assert week_in_period(datetime(2024, 1, 1), 6, entry) == datetime(2024, 4, 1)


class TestExtendedYearly:
    def test_month_days_and_weeks(self, make_rule):
        rule = make_rule(
            unit="year",
            extended_pattern={
                "yearly": {
                    "months": [
                        {"month": 3, "days_of_month": [1]},
                        {"month": 11, "weeks_of_month": [_week(4, "thursday")]},
                    ]
                }
            },
        )
        assert resolve_extended(datetime(2024, 3, 1), rule) == datetime(2024, 11, 28)
        assert resolve_extended(datetime(2024, 11, 28), rule) == datetime(2025, 3, 1)

    def test_interval_years(self, make_rule):
        rule = make_rule(
            unit="year",
            interval=2,
            extended_pattern={"yearly": {"months": [{"month": 6, "days_of_month": [30]}]}},
        )
        assert resolve_extended(datetime(2024, 7, 1), rule) == datetime(2026, 6, 30)
