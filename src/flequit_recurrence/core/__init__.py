"""Pure recurrence evaluation: resolvers, adjustment, termination and previews."""

from .adjustment import apply_adjustment
from .advancer import advance
from .engine import RecurrenceEngine, next_occurrence
from .extended import resolve_extended
from .monthly import resolve_monthly
from .sequence import generate, preview
from .termination import is_exhausted
from .weekly import resolve_weekly
from .yearly import resolve_yearly

__all__ = [
    "RecurrenceEngine",
    "next_occurrence",
    "generate",
    "preview",
    "advance",
    "resolve_weekly",
    "resolve_monthly",
    "resolve_yearly",
    "resolve_extended",
    "apply_adjustment",
    "is_exhausted",
]
