"""Parsing of date arguments given on the command line."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

_RELATIVE_DAYS = {"yesterday": -1, "today": 0, "tomorrow": 1}


def parse_date_input(text: str, now: datetime | None = None) -> datetime:
    """Parse ``today``/``tomorrow``/``yesterday``, ``in N days``, a plain
    ``YYYY-MM-DD`` date or an ISO datetime.

    Relative forms resolve to midnight of the target day. No time-zone
    conversion is applied to ISO input.

    Raises:
        ValueError: If the text matches none of the accepted forms
    """
    value = text.strip().lower()
    if not value:
        raise ValueError("Date cannot be empty")

    now = now or datetime.now()
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)

    if value in _RELATIVE_DAYS:
        return midnight + timedelta(days=_RELATIVE_DAYS[value])

    match = re.fullmatch(r"in (\d+) days?", value)
    if match:
        return midnight + timedelta(days=int(match.group(1)))

    try:
        return datetime.fromisoformat(text.strip())
    except ValueError as e:
        raise ValueError(
            f"Invalid date '{text}'. Use today, tomorrow, YYYY-MM-DD or an ISO datetime."
        ) from e
