"""Calendar arithmetic shared by the resolvers, on top of ``relativedelta``."""

from datetime import datetime

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from flequit_recurrence.models.recurrence import DayOfWeek

_RELATIVE_WEEKDAYS = {
    DayOfWeek.MONDAY: MO,
    DayOfWeek.TUESDAY: TU,
    DayOfWeek.WEDNESDAY: WE,
    DayOfWeek.THURSDAY: TH,
    DayOfWeek.FRIDAY: FR,
    DayOfWeek.SATURDAY: SA,
    DayOfWeek.SUNDAY: SU,
}


def add_months(value: datetime, months: int, day: int | None = None) -> datetime:
    """Move ``value`` by ``months`` calendar months, keeping the time of day.

    The day of month is ``day`` (or the current one) clamped to the length of
    the target month, so Jan 31 + 1 month is Feb 28/29 rather than March.
    """
    if day is None:
        return value + relativedelta(months=months)
    return value + relativedelta(months=months, day=day)


def day_in_month(like: datetime, year: int, month: int, day: int) -> datetime:
    """``day`` of the given month (clamped), at the time of day of ``like``."""
    return like + relativedelta(year=year, month=month, day=day)


def nth_weekday(
    like: datetime, year: int, month: int, weekday: DayOfWeek, n: int
) -> datetime | None:
    """The ``n``-th ``weekday`` of the month, counting from the end when negative.

    Returns None when the month has fewer than ``n`` such days.
    """
    relative = _RELATIVE_WEEKDAYS[weekday]
    if n < 0:
        return like + relativedelta(year=year, month=month, day=31, weekday=relative(n))
    result = like + relativedelta(year=year, month=month, day=1, weekday=relative(n))
    if result.month != month:
        return None
    return result


def align_awareness(reference: datetime, like: datetime) -> datetime:
    """``reference`` made comparable with ``like`` by wall-clock time.

    When exactly one of them carries a ``tzinfo``, the naive one is read in
    the zone of the other.
    """
    if (reference.tzinfo is None) == (like.tzinfo is None):
        return reference
    return reference.replace(tzinfo=like.tzinfo)
