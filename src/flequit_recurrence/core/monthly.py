"""Monthly rules: fixed day of month or Nth weekday of month."""

from datetime import datetime

from flequit_recurrence.models.exceptions import InvalidRuleError
from flequit_recurrence.models.recurrence import (
    DayOfWeek,
    NthWeekdayOfMonth,
    RecurrenceRule,
    SpecificDayOfMonth,
    WeekOfMonth,
)

from .calendar_math import add_months, nth_weekday
from .codecs import week_of_month_to_number


def resolve_monthly(base_date: datetime, rule: RecurrenceRule) -> datetime | None:
    """Next monthly occurrence, or None when the pattern has no date.

    Without a pattern the day of month of ``base_date`` is kept (clamped).
    """
    match rule.monthly_pattern:
        case None:
            return add_months(base_date, rule.interval)
        case SpecificDayOfMonth(day=day):
            return add_months(base_date, rule.interval, day=day)
        case NthWeekdayOfMonth(position=position, weekday=weekday):
            month_start = add_months(base_date, rule.interval, day=1)
            return nth_weekday_of_month(
                base_date, month_start.year, month_start.month, position, weekday
            )
        case other:
            raise InvalidRuleError(f"Unsupported monthly pattern: {other!r}")


def nth_weekday_of_month(
    like: datetime, year: int, month: int, position: WeekOfMonth, weekday: DayOfWeek
) -> datetime | None:
    """The ``position`` ``weekday`` of the month, with the time of day of ``like``.

    ``fifth`` is the last such weekday of the month, so it always exists.
    """
    return week_in_month(like, year, month, week_of_month_to_number(position), weekday)


def week_in_month(
    like: datetime, year: int, month: int, week: int, weekday: DayOfWeek
) -> datetime | None:
    """Numeric form of ``nth_weekday_of_month``: weeks 1..4, 5 or -1 for the last."""
    if week in (5, -1):
        return nth_weekday(like, year, month, weekday, -1)
    return nth_weekday(like, year, month, weekday, week)
