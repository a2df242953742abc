"""Codecs between weekday/week-position symbols and integers.

Weekdays are numbered 0=Sunday .. 6=Saturday. Week positions are numbered
1..5 for first..fifth and -1 for last.
"""

from datetime import datetime

from flequit_recurrence.models.recurrence import DayOfWeek, WeekdayCategory, WeekOfMonth

DAY_OF_WEEK_NUMBERS: dict[DayOfWeek, int] = {
    DayOfWeek.SUNDAY: 0,
    DayOfWeek.MONDAY: 1,
    DayOfWeek.TUESDAY: 2,
    DayOfWeek.WEDNESDAY: 3,
    DayOfWeek.THURSDAY: 4,
    DayOfWeek.FRIDAY: 5,
    DayOfWeek.SATURDAY: 6,
}

WEEK_OF_MONTH_NUMBERS: dict[WeekOfMonth, int] = {
    WeekOfMonth.FIRST: 1,
    WeekOfMonth.SECOND: 2,
    WeekOfMonth.THIRD: 3,
    WeekOfMonth.FOURTH: 4,
    WeekOfMonth.FIFTH: 5,
    WeekOfMonth.LAST: -1,
}

WEEKEND_NUMBERS = frozenset({0, 6})

# Holidays are approximated by the weekend.
WEEKEND_CATEGORIES = frozenset(
    {
        WeekdayCategory.WEEKEND,
        WeekdayCategory.HOLIDAY,
        WeekdayCategory.WEEKEND_HOLIDAY,
    }
)

_NUMBER_TO_DAY = {number: day for day, number in DAY_OF_WEEK_NUMBERS.items()}


def day_of_week_to_number(day: DayOfWeek) -> int:
    return DAY_OF_WEEK_NUMBERS[day]


def number_to_day_of_week(number: int) -> DayOfWeek:
    return _NUMBER_TO_DAY[number % 7]


def week_of_month_to_number(position: WeekOfMonth) -> int:
    return WEEK_OF_MONTH_NUMBERS[position]


def weekday_number(value: datetime) -> int:
    """Weekday of ``value`` with Sunday as 0 (``datetime.weekday`` starts on Monday)."""
    return (value.weekday() + 1) % 7


def in_category(number: int, category: WeekdayCategory) -> bool:
    is_weekend = number % 7 in WEEKEND_NUMBERS
    if category in WEEKEND_CATEGORIES:
        return is_weekend
    return not is_weekend


def matches_weekday(value: datetime, target: DayOfWeek | WeekdayCategory) -> bool:
    """Whether ``value`` falls on a specific weekday or inside a weekday category."""
    number = weekday_number(value)
    if isinstance(target, WeekdayCategory):
        return in_category(number, target)
    return number == day_of_week_to_number(target)
