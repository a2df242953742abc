"""Weekly rules with an optional set of target weekdays."""

from collections.abc import Iterable
from datetime import datetime, timedelta

from flequit_recurrence.models.recurrence import DayOfWeek, RecurrenceRule

from .codecs import day_of_week_to_number, weekday_number


def resolve_weekly(base_date: datetime, rule: RecurrenceRule) -> datetime:
    """Next date matching the rule's weekdays.

    A later target weekday in the current week wins; otherwise jump
    ``interval`` weeks ahead to the earliest target weekday. Weeks run
    Sunday to Saturday.
    """
    if not rule.days_of_week:
        return base_date + timedelta(weeks=rule.interval)
    return next_weekly_date(base_date, rule.days_of_week, rule.interval)


def next_weekly_date(
    base_date: datetime, days: Iterable[DayOfWeek], interval: int
) -> datetime:
    targets = sorted({day_of_week_to_number(day) for day in days})
    current = weekday_number(base_date)

    later_this_week = [day for day in targets if day > current]
    if later_this_week:
        return base_date + timedelta(days=later_this_week[0] - current)

    offset = interval * 7 + (targets[0] - current)
    return base_date + timedelta(days=offset)
