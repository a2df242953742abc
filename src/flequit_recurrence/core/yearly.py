"""Yearly rules restricted to a set of months."""

from datetime import datetime

from dateutil.relativedelta import relativedelta

from flequit_recurrence.models.recurrence import RecurrenceRule, RecurrenceUnit

from .advancer import advance


def resolve_yearly(base_date: datetime, rule: RecurrenceRule) -> datetime:
    """Next listed month later this year, else the first listed month
    ``interval`` years ahead. The day of month is kept and clamped.
    """
    pattern = rule.yearly_pattern
    if pattern is None:
        return advance(base_date, RecurrenceUnit.YEAR, rule.interval)

    later_this_year = [month for month in pattern.months if month > base_date.month]
    if later_this_year:
        return base_date + relativedelta(month=later_this_year[0])
    return base_date + relativedelta(years=rule.interval, month=pattern.months[0])
