"""flequit-recurrence domain models.

This package contains the Pydantic models for recurrence rules, their
adjustment conditions, and the task records the rescheduler works with.
All of them are frozen so evaluation can never mutate its inputs.
"""

from .config_models import AppConfig, OutputConfig, PreviewConfig
from .exceptions import InvalidRuleError, InvalidTaskError, RecurrenceError
from .recurrence import (
    AdjustmentDirection,
    AdjustmentTarget,
    DateCondition,
    DateRelation,
    DayOfWeek,
    ExtendedMonthlyPattern,
    ExtendedPattern,
    ExtendedPeriodPattern,
    ExtendedWeeklyPattern,
    ExtendedYearlyMonth,
    ExtendedYearlyPattern,
    MonthlyPattern,
    NthWeekdayOfMonth,
    RecurrenceAdjustment,
    RecurrenceRule,
    RecurrenceUnit,
    SpecificDayOfMonth,
    WeekdayCategory,
    WeekdayCondition,
    WeekdayInMonth,
    WeekdayInPeriod,
    WeekOfMonth,
    YearlyPattern,
    build_rule,
)
from .task import Task, TaskDraft, TaskStatus

__all__ = [
    # Rule models
    "RecurrenceRule",
    "RecurrenceUnit",
    "RecurrenceAdjustment",
    "MonthlyPattern",
    "SpecificDayOfMonth",
    "NthWeekdayOfMonth",
    "YearlyPattern",
    "ExtendedPattern",
    "ExtendedWeeklyPattern",
    "ExtendedMonthlyPattern",
    "ExtendedPeriodPattern",
    "ExtendedYearlyPattern",
    "ExtendedYearlyMonth",
    "WeekdayInMonth",
    "WeekdayInPeriod",
    "build_rule",
    # Conditions
    "DateCondition",
    "DateRelation",
    "WeekdayCondition",
    "AdjustmentDirection",
    "AdjustmentTarget",
    # Calendar symbols
    "DayOfWeek",
    "WeekdayCategory",
    "WeekOfMonth",
    # Task models
    "Task",
    "TaskDraft",
    "TaskStatus",
    # Config models
    "AppConfig",
    "OutputConfig",
    "PreviewConfig",
    # Errors
    "RecurrenceError",
    "InvalidRuleError",
    "InvalidTaskError",
]
