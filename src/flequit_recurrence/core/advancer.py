"""Plain unit addition for rules without a weekday or month pattern."""

from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from flequit_recurrence.models.exceptions import InvalidRuleError
from flequit_recurrence.models.recurrence import RecurrenceUnit


def advance(value: datetime, unit: RecurrenceUnit, interval: int) -> datetime:
    """Add ``interval`` units to ``value``.

    Month-based units clamp the day of month to the target month, so
    Feb 29 + 1 year is Feb 28.
    """
    match unit:
        case RecurrenceUnit.MINUTE:
            return value + timedelta(minutes=interval)
        case RecurrenceUnit.HOUR:
            return value + timedelta(hours=interval)
        case RecurrenceUnit.DAY:
            return value + timedelta(days=interval)
        case RecurrenceUnit.WEEK:
            return value + timedelta(weeks=interval)
        case RecurrenceUnit.MONTH:
            return value + relativedelta(months=interval)
        case RecurrenceUnit.QUARTER:
            return value + relativedelta(months=interval * 3)
        case RecurrenceUnit.HALF_YEAR:
            return value + relativedelta(months=interval * 6)
        case RecurrenceUnit.YEAR:
            return value + relativedelta(years=interval)
        case _:
            raise InvalidRuleError(f"Unsupported recurrence unit: {unit!r}")
