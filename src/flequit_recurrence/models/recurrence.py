"""Recurrence rule data models.

A rule is an immutable value: every model here is frozen, list-valued fields
are stored as tuples, and an invalid combination is rejected when the rule is
built rather than when it is evaluated.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .exceptions import InvalidRuleError


def _date_to_datetime(value: Any) -> Any:
    """Accept plain dates (e.g. from YAML) wherever a datetime is expected."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    return value


LocalDateTime = Annotated[datetime, BeforeValidator(_date_to_datetime)]


class RecurrenceUnit(str, Enum):
    """Interval unit of a recurrence rule."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    HALF_YEAR = "half_year"
    YEAR = "year"


# Older rules spell the half-year unit without the underscore.
_UNIT_ALIASES = {"halfyear": RecurrenceUnit.HALF_YEAR.value}


class DayOfWeek(str, Enum):
    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"


class WeekdayCategory(str, Enum):
    """Groups of weekdays a condition can match or move to.

    There is no holiday calendar: the holiday categories treat Saturday and
    Sunday as the holidays.
    """

    WEEKDAY = "weekday"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"
    NON_HOLIDAY = "non_holiday"
    WEEKEND_HOLIDAY = "weekend_holiday"
    NON_WEEKEND_HOLIDAY = "non_weekend_holiday"


class WeekOfMonth(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"
    FIFTH = "fifth"
    LAST = "last"


class DateRelation(str, Enum):
    BEFORE = "before"
    ON_OR_BEFORE = "on_or_before"
    ON_OR_AFTER = "on_or_after"
    AFTER = "after"


class AdjustmentDirection(str, Enum):
    PREVIOUS = "previous"
    NEXT = "next"


class AdjustmentTarget(str, Enum):
    """Where a matching weekday condition moves the date to."""

    SPECIFIC_WEEKDAY = "specific_weekday"
    DAYS_OFFSET = "days_offset"
    WEEKDAY = "weekday"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"
    NON_HOLIDAY = "non_holiday"
    WEEKEND_HOLIDAY = "weekend_holiday"
    NON_WEEKEND_HOLIDAY = "non_weekend_holiday"


class SpecificDayOfMonth(BaseModel):
    """Monthly pattern on a fixed day, clamped to the month length.

    Attributes:
        day: Day of month (1-31)
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["specific_day"] = "specific_day"
    day: int = Field(ge=1, le=31)


class NthWeekdayOfMonth(BaseModel):
    """Monthly pattern on the Nth (or last) given weekday of the month.

    Attributes:
        position: Which occurrence of the weekday inside the month
        weekday: Weekday to land on
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["nth_weekday"] = "nth_weekday"
    position: WeekOfMonth
    weekday: DayOfWeek


MonthlyPattern = Annotated[
    Union[SpecificDayOfMonth, NthWeekdayOfMonth], Field(discriminator="kind")
]


class YearlyPattern(BaseModel):
    """Yearly pattern restricted to a set of months.

    Attributes:
        months: Target months (1-12), deduplicated and sorted
    """

    model_config = ConfigDict(frozen=True)

    months: tuple[int, ...] = Field(min_length=1)

    @field_validator("months")
    @classmethod
    def validate_months(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        for month in v:
            if not 1 <= month <= 12:
                raise ValueError(f"month must be between 1 and 12, got {month}")
        return tuple(sorted(set(v)))


def _days_of_month(v: tuple[int, ...]) -> tuple[int, ...]:
    for day in v:
        if not 1 <= day <= 31:
            raise ValueError(f"day of month must be between 1 and 31, got {day}")
    return tuple(sorted(set(v)))


DaysOfMonth = Annotated[tuple[int, ...], AfterValidator(_days_of_month)]


class WeekdayInMonth(BaseModel):
    """Nth weekday of a month; week 5 means the last such weekday."""

    model_config = ConfigDict(frozen=True)

    week: int = Field(ge=1, le=5)
    day_of_week: DayOfWeek


class WeekdayInPeriod(BaseModel):
    """Nth weekday of a period, counted in 7-day blocks from its first day."""

    model_config = ConfigDict(frozen=True)

    week: int = Field(ge=1)
    day_of_week: DayOfWeek


class ExtendedWeeklyPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    days_of_week: tuple[DayOfWeek, ...] = Field(min_length=1)


class ExtendedMonthlyPattern(BaseModel):
    """Several days and/or Nth weekdays per month; the earliest later one wins.

    Attributes:
        days_of_month: Days of month (1-31), clamped to the month length
        weeks_of_month: Nth weekdays of the month
    """

    model_config = ConfigDict(frozen=True)

    days_of_month: DaysOfMonth = ()
    weeks_of_month: tuple[WeekdayInMonth, ...] = ()

    @model_validator(mode="after")
    def validate_not_empty(self) -> ExtendedMonthlyPattern:
        if not self.days_of_month and not self.weeks_of_month:
            raise ValueError("days_of_month or weeks_of_month is required")
        return self


class ExtendedPeriodPattern(BaseModel):
    """Quarterly or half-yearly pattern.

    A period starts on the first of the base date's month and spans 3 or 6
    months.

    Attributes:
        offset_months: Months into the period that ``days_of_month`` apply to
            (defaults to the first month)
        days_of_month: Days of month (1-31), clamped to the month length
        weeks_of_period: Nth weekdays counted from the start of the period
    """

    model_config = ConfigDict(frozen=True)

    offset_months: tuple[int, ...] = ()
    days_of_month: DaysOfMonth = ()
    weeks_of_period: tuple[WeekdayInPeriod, ...] = ()

    @field_validator("offset_months")
    @classmethod
    def validate_offsets(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        for offset in v:
            if offset < 0:
                raise ValueError(f"offset month must not be negative, got {offset}")
        return tuple(sorted(set(v)))

    @model_validator(mode="after")
    def validate_not_empty(self) -> ExtendedPeriodPattern:
        if not self.days_of_month and not self.weeks_of_period:
            raise ValueError("days_of_month or weeks_of_period is required")
        return self


class ExtendedYearlyMonth(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: int = Field(ge=1, le=12)
    days_of_month: DaysOfMonth = ()
    weeks_of_month: tuple[WeekdayInMonth, ...] = ()

    @model_validator(mode="after")
    def validate_not_empty(self) -> ExtendedYearlyMonth:
        if not self.days_of_month and not self.weeks_of_month:
            raise ValueError(
                f"month {self.month}: days_of_month or weeks_of_month is required"
            )
        return self


class ExtendedYearlyPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    months: tuple[ExtendedYearlyMonth, ...] = Field(min_length=1)


class ExtendedPattern(BaseModel):
    """Multi-date patterns, one slot per unit. Only the rule's unit may be set."""

    model_config = ConfigDict(frozen=True)

    weekly: ExtendedWeeklyPattern | None = None
    monthly: ExtendedMonthlyPattern | None = None
    quarterly: ExtendedPeriodPattern | None = None
    half_year: ExtendedPeriodPattern | None = None
    yearly: ExtendedYearlyPattern | None = None

    def for_unit(self, unit: RecurrenceUnit) -> BaseModel | None:
        field = _EXTENDED_FIELDS.get(unit)
        return getattr(self, field) if field else None

    def defined_fields(self) -> list[str]:
        return [name for name in _EXTENDED_FIELDS.values() if getattr(self, name) is not None]


_EXTENDED_FIELDS = {
    RecurrenceUnit.WEEK: "weekly",
    RecurrenceUnit.MONTH: "monthly",
    RecurrenceUnit.QUARTER: "quarterly",
    RecurrenceUnit.HALF_YEAR: "half_year",
    RecurrenceUnit.YEAR: "yearly",
}

# Months per period for the period-based extended patterns.
PERIOD_MONTHS = {RecurrenceUnit.QUARTER: 3, RecurrenceUnit.HALF_YEAR: 6}


class DateCondition(BaseModel):
    """Positional relationship between a candidate date and a reference date.

    Attributes:
        id: Optional identifier of the stored condition
        relation: How the candidate relates to the reference date
        reference_date: Date to compare against
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    relation: DateRelation
    reference_date: LocalDateTime


class WeekdayCondition(BaseModel):
    """If the candidate falls on ``if_weekday``, move it per the ``then_*`` fields.

    Attributes:
        id: Optional identifier of the stored condition
        if_weekday: Specific weekday or weekday category to match
        then_direction: Move backwards or forwards
        then_target: What to move to
        then_weekday: Target weekday (target=specific_weekday)
        then_days: Number of days to shift; when set it wins over then_target
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    if_weekday: DayOfWeek | WeekdayCategory
    then_direction: AdjustmentDirection
    then_target: AdjustmentTarget
    then_weekday: DayOfWeek | None = None
    then_days: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def validate_target(self) -> WeekdayCondition:
        if self.then_days is not None:
            return self
        if self.then_target is AdjustmentTarget.DAYS_OFFSET:
            raise ValueError("then_days is required for a days_offset target")
        if (
            self.then_target is AdjustmentTarget.SPECIFIC_WEEKDAY
            and self.then_weekday is None
        ):
            raise ValueError(
                "then_weekday or then_days is required for a specific_weekday target"
            )
        return self


class RecurrenceAdjustment(BaseModel):
    """Post-processing conditions, applied date conditions first."""

    model_config = ConfigDict(frozen=True)

    date_conditions: tuple[DateCondition, ...] = ()
    weekday_conditions: tuple[WeekdayCondition, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.date_conditions and not self.weekday_conditions


class RecurrenceRule(BaseModel):
    """Declarative recurrence rule.

    Attributes:
        unit: Interval unit
        interval: Number of units between occurrences (>= 1)
        days_of_week: Target weekdays for weekly rules
        monthly_pattern: Day-of-month or Nth-weekday pattern for monthly rules
        yearly_pattern: Target months for yearly rules
        extended_pattern: Multi-date pattern for the rule's unit
        adjustment: Conditions applied to each raw occurrence
        end_date: Occurrences after this moment are suppressed
        max_occurrences: Total number of occurrences, counted by the caller
    """

    model_config = ConfigDict(frozen=True)

    unit: RecurrenceUnit
    interval: int = Field(default=1, ge=1)
    days_of_week: tuple[DayOfWeek, ...] | None = None
    monthly_pattern: MonthlyPattern | None = None
    yearly_pattern: YearlyPattern | None = None
    extended_pattern: ExtendedPattern | None = None
    adjustment: RecurrenceAdjustment | None = None
    end_date: LocalDateTime | None = None
    max_occurrences: int | None = Field(default=None, ge=1)

    @field_validator("unit", mode="before")
    @classmethod
    def normalize_unit(cls, v: Any) -> Any:
        if isinstance(v, str):
            key = v.strip().lower().replace("-", "_")
            return _UNIT_ALIASES.get(key, key)
        return v

    @field_validator("days_of_week")
    @classmethod
    def normalize_days_of_week(
        cls, v: tuple[DayOfWeek, ...] | None
    ) -> tuple[DayOfWeek, ...] | None:
        # An empty set means "no weekly pattern".
        if not v:
            return None
        return tuple(dict.fromkeys(v))

    @model_validator(mode="after")
    def validate_patterns(self) -> RecurrenceRule:
        if self.monthly_pattern is not None and self.unit is not RecurrenceUnit.MONTH:
            raise ValueError(
                f"monthly_pattern requires unit 'month', got '{self.unit.value}'"
            )
        if self.yearly_pattern is not None and self.unit is not RecurrenceUnit.YEAR:
            raise ValueError(
                f"yearly_pattern requires unit 'year', got '{self.unit.value}'"
            )
        if self.extended_pattern is not None:
            self._validate_extended(self.extended_pattern)
        return self

    def _validate_extended(self, pattern: ExtendedPattern) -> None:
        expected = _EXTENDED_FIELDS.get(self.unit)
        for name in pattern.defined_fields():
            if name != expected:
                raise ValueError(
                    f"extended_pattern.{name} does not apply to unit '{self.unit.value}'"
                )
        selected = pattern.for_unit(self.unit)
        if selected is None:
            raise ValueError(
                f"extended_pattern has no entry for unit '{self.unit.value}'"
            )
        weekly_days = self.unit is RecurrenceUnit.WEEK and self.days_of_week
        if weekly_days or self.monthly_pattern or self.yearly_pattern:
            raise ValueError("extended_pattern cannot be combined with a basic pattern")
        if isinstance(selected, ExtendedPeriodPattern):
            upper = PERIOD_MONTHS[self.unit] - 1
            for offset in selected.offset_months:
                if offset > upper:
                    raise ValueError(
                        f"offset month must be between 0 and {upper}, got {offset}"
                    )

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> RecurrenceRule:
        """Build a rule from raw data, raising InvalidRuleError on bad input."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise InvalidRuleError(describe_validation_error(e)) from e


def build_rule(**fields: Any) -> RecurrenceRule:
    """Keyword-argument shortcut for ``RecurrenceRule.from_data``."""
    return RecurrenceRule.from_data(fields)


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic error into a single readable line."""
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item.get("loc", ()))
        msg = item.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)
