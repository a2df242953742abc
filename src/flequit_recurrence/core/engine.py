"""Recurrence evaluation facade.

``next_occurrence`` dispatches on the rule's unit to the matching resolver,
pipes the raw date through the rule's adjustment and finally applies the
termination checks. Absence of a next date is ``None``, never an exception.
"""

from datetime import datetime

from flequit_recurrence.models.exceptions import InvalidRuleError
from flequit_recurrence.models.recurrence import RecurrenceRule, RecurrenceUnit

from .adjustment import apply_adjustment
from .advancer import advance
from .extended import resolve_extended
from .monthly import resolve_monthly
from .termination import is_exhausted, occurrences_exhausted
from .weekly import resolve_weekly
from .yearly import resolve_yearly


def next_occurrence(
    base_date: datetime,
    rule: RecurrenceRule,
    *,
    occurrences_so_far: int | None = None,
) -> datetime | None:
    """Compute the occurrence following ``base_date``.

    Args:
        base_date: Date of the current occurrence
        rule: Rule to evaluate
        occurrences_so_far: Number of occurrences that already exist,
            including the one at ``base_date``. Only used to enforce
            ``rule.max_occurrences``; omit it to skip that check.

    Returns:
        The next occurrence, or None when the series has ended or the
        rule's pattern yields no date.
    """
    if occurrences_exhausted(rule, occurrences_so_far):
        return None

    candidate = resolve_raw(base_date, rule)
    if candidate is None:
        return None

    if rule.adjustment is not None and not rule.adjustment.is_empty:
        candidate = apply_adjustment(candidate, rule.adjustment)

    if is_exhausted(candidate, rule):
        return None
    return candidate


def resolve_raw(base_date: datetime, rule: RecurrenceRule) -> datetime | None:
    """Unadjusted next date for the rule's unit."""
    if rule.extended_pattern is not None:
        return resolve_extended(base_date, rule)
    match rule.unit:
        case (
            RecurrenceUnit.MINUTE
            | RecurrenceUnit.HOUR
            | RecurrenceUnit.DAY
            | RecurrenceUnit.QUARTER
            | RecurrenceUnit.HALF_YEAR
        ):
            return advance(base_date, rule.unit, rule.interval)
        case RecurrenceUnit.YEAR:
            return resolve_yearly(base_date, rule)
        case RecurrenceUnit.WEEK:
            return resolve_weekly(base_date, rule)
        case RecurrenceUnit.MONTH:
            return resolve_monthly(base_date, rule)
        case other:
            raise InvalidRuleError(f"Unsupported recurrence unit: {other!r}")


class RecurrenceEngine:
    """Stateless service object for callers that inject their collaborators."""

    def next_occurrence(
        self,
        base_date: datetime,
        rule: RecurrenceRule,
        *,
        occurrences_so_far: int | None = None,
    ) -> datetime | None:
        return next_occurrence(base_date, rule, occurrences_so_far=occurrences_so_far)
