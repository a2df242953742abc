"""Bounded previews of upcoming occurrences."""

from collections.abc import Iterator
from datetime import datetime

from flequit_recurrence.models.recurrence import RecurrenceRule

from .engine import next_occurrence


def generate(
    start_date: datetime, rule: RecurrenceRule, max_count: int
) -> Iterator[datetime]:
    """Yield up to ``max_count`` occurrences after ``start_date``.

    Each result is fed back in as the next base date. The start date counts
    as the first occurrence of the series, so ``rule.max_occurrences`` caps
    the preview as well. Stops early on the first missing occurrence.
    """
    current = start_date
    produced = 0
    while produced < max_count:
        upcoming = next_occurrence(current, rule, occurrences_so_far=produced + 1)
        if upcoming is None:
            return
        yield upcoming
        produced += 1
        current = upcoming


def preview(start_date: datetime, rule: RecurrenceRule, max_count: int) -> list[datetime]:
    """Materialised ``generate``."""
    return list(generate(start_date, rule, max_count))
