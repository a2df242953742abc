"""End-of-series checks."""

from datetime import datetime

from flequit_recurrence.models.recurrence import RecurrenceRule

from .calendar_math import align_awareness


def is_exhausted(value: datetime, rule: RecurrenceRule) -> bool:
    """True when ``value`` lies past the rule's end date.

    A naive end date is compared by wall-clock time against an aware value,
    and the other way round.
    """
    if rule.end_date is None:
        return False
    return value > align_awareness(rule.end_date, value)


def occurrences_exhausted(rule: RecurrenceRule, occurrences_so_far: int | None) -> bool:
    """True when the caller-tracked count has already reached ``max_occurrences``.

    The evaluator holds no state, so the count is only enforced when the
    caller supplies it.
    """
    if rule.max_occurrences is None or occurrences_so_far is None:
        return False
    return occurrences_so_far >= rule.max_occurrences
