"""Post-processing of raw occurrences by date and weekday conditions."""

from datetime import datetime, timedelta

from flequit_recurrence.models.exceptions import InvalidRuleError
from flequit_recurrence.models.recurrence import (
    AdjustmentDirection,
    AdjustmentTarget,
    DateCondition,
    DateRelation,
    RecurrenceAdjustment,
    WeekdayCategory,
    WeekdayCondition,
)

from .codecs import day_of_week_to_number, in_category, matches_weekday, weekday_number


def apply_adjustment(value: datetime, adjustment: RecurrenceAdjustment) -> datetime:
    """Fold ``value`` through every date condition, then every weekday condition.

    Each condition sees the output of the previous one.
    """
    result = value
    for date_condition in adjustment.date_conditions:
        result = apply_date_condition(result, date_condition)
    for weekday_condition in adjustment.weekday_conditions:
        result = apply_weekday_condition(result, weekday_condition)
    return result


def date_condition_holds(value: datetime, condition: DateCondition) -> bool:
    """Compare calendar days of ``value`` and the condition's reference date."""
    day = value.date()
    reference = condition.reference_date.date()
    match condition.relation:
        case DateRelation.BEFORE:
            return day < reference
        case DateRelation.ON_OR_BEFORE:
            return day <= reference
        case DateRelation.ON_OR_AFTER:
            return day >= reference
        case DateRelation.AFTER:
            return day > reference
        case other:
            raise InvalidRuleError(f"Unsupported date relation: {other!r}")


def apply_date_condition(value: datetime, condition: DateCondition) -> datetime:
    """Shift one day forward when the condition holds."""
    if date_condition_holds(value, condition):
        return value + timedelta(days=1)
    return value


def apply_weekday_condition(value: datetime, condition: WeekdayCondition) -> datetime:
    if not matches_weekday(value, condition.if_weekday):
        return value

    step = 1 if condition.then_direction is AdjustmentDirection.NEXT else -1

    if condition.then_days is not None:
        return value + timedelta(days=step * condition.then_days)

    match condition.then_target:
        case AdjustmentTarget.SPECIFIC_WEEKDAY:
            target = day_of_week_to_number(condition.then_weekday)
            current = weekday_number(value)
            # Always move: landing on the same weekday means a full week.
            distance = ((target - current) * step) % 7 or 7
            return value + timedelta(days=step * distance)
        case (
            AdjustmentTarget.WEEKDAY
            | AdjustmentTarget.WEEKEND
            | AdjustmentTarget.HOLIDAY
            | AdjustmentTarget.NON_HOLIDAY
            | AdjustmentTarget.WEEKEND_HOLIDAY
            | AdjustmentTarget.NON_WEEKEND_HOLIDAY
        ):
            category = WeekdayCategory(condition.then_target.value)
            candidate = value + timedelta(days=step)
            while not in_category(weekday_number(candidate), category):
                candidate += timedelta(days=step)
            return candidate
        case other:
            raise InvalidRuleError(f"Unsupported adjustment target: {other!r}")
