"""Multi-date patterns: several days or Nth weekdays per month, period or year.

Each resolver collects the candidate dates of one cycle (a month, a quarter,
a half year or a year, ``interval`` apart), keeps those after the base date
and returns the earliest. Cycles without a later candidate are skipped, up to
``MAX_LOOKAHEAD_CYCLES`` of them.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from flequit_recurrence.models.exceptions import InvalidRuleError
from flequit_recurrence.models.recurrence import (
    PERIOD_MONTHS,
    ExtendedMonthlyPattern,
    ExtendedPeriodPattern,
    ExtendedWeeklyPattern,
    ExtendedYearlyPattern,
    RecurrenceRule,
    WeekdayInPeriod,
)

from .calendar_math import day_in_month
from .codecs import day_of_week_to_number, weekday_number
from .monthly import week_in_month
from .weekly import next_weekly_date

MAX_LOOKAHEAD_CYCLES = 48


def resolve_extended(base_date: datetime, rule: RecurrenceRule) -> datetime | None:
    """Next occurrence of the rule's extended pattern, or None if none is found."""
    pattern = rule.extended_pattern.for_unit(rule.unit)
    match pattern:
        case ExtendedWeeklyPattern(days_of_week=days):
            return next_weekly_date(base_date, days, rule.interval)
        case ExtendedMonthlyPattern():
            return _resolve_monthly(base_date, pattern, rule.interval)
        case ExtendedPeriodPattern():
            length = PERIOD_MONTHS[rule.unit]
            return _resolve_period(base_date, pattern, rule.interval * length, length)
        case ExtendedYearlyPattern():
            return _resolve_yearly(base_date, pattern, rule.interval)
        case other:
            raise InvalidRuleError(f"Unsupported extended pattern: {other!r}")


def _earliest_after(
    base_date: datetime, candidates: Iterable[datetime | None]
) -> datetime | None:
    later = [c for c in candidates if c is not None and c > base_date]
    return min(later, default=None)


def _resolve_monthly(
    base_date: datetime, pattern: ExtendedMonthlyPattern, interval: int
) -> datetime | None:
    for cycle in range(MAX_LOOKAHEAD_CYCLES):
        month = base_date + relativedelta(day=1, months=cycle * interval)
        candidates = [
            day_in_month(base_date, month.year, month.month, day)
            for day in pattern.days_of_month
        ]
        candidates += [
            week_in_month(base_date, month.year, month.month, entry.week, entry.day_of_week)
            for entry in pattern.weeks_of_month
        ]
        found = _earliest_after(base_date, candidates)
        if found is not None:
            return found
    return None


def week_in_period(
    period_start: datetime, length_in_months: int, entry: WeekdayInPeriod
) -> datetime | None:
    """``entry.day_of_week`` in the ``entry.week``-th 7-day block of the period.

    Returns None when that day falls after the end of the period.
    """
    week_start = period_start + timedelta(weeks=entry.week - 1)
    offset = (day_of_week_to_number(entry.day_of_week) - weekday_number(week_start)) % 7
    candidate = week_start + timedelta(days=offset)
    if candidate >= period_start + relativedelta(months=length_in_months):
        return None
    return candidate


def _resolve_period(
    base_date: datetime,
    pattern: ExtendedPeriodPattern,
    interval_in_months: int,
    length_in_months: int,
) -> datetime | None:
    offsets = pattern.offset_months or (0,)
    for cycle in range(MAX_LOOKAHEAD_CYCLES):
        period_start = base_date + relativedelta(day=1, months=cycle * interval_in_months)
        candidates = []
        for offset in offsets:
            month = period_start + relativedelta(months=offset)
            candidates += [
                day_in_month(base_date, month.year, month.month, day)
                for day in pattern.days_of_month
            ]
        candidates += [
            week_in_period(period_start, length_in_months, entry)
            for entry in pattern.weeks_of_period
        ]
        found = _earliest_after(base_date, candidates)
        if found is not None:
            return found
    return None


def _resolve_yearly(
    base_date: datetime, pattern: ExtendedYearlyPattern, interval: int
) -> datetime | None:
    for cycle in range(MAX_LOOKAHEAD_CYCLES):
        year = base_date.year + cycle * interval
        candidates = []
        for month in pattern.months:
            candidates += [
                day_in_month(base_date, year, month.month, day)
                for day in month.days_of_month
            ]
            candidates += [
                week_in_month(base_date, year, month.month, entry.week, entry.day_of_week)
                for entry in month.weeks_of_month
            ]
        found = _earliest_after(base_date, candidates)
        if found is not None:
            return found
    return None
