"""Task data models consumed and produced by the rescheduler."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .exceptions import InvalidTaskError
from .recurrence import LocalDateTime, RecurrenceRule, describe_validation_error


class TaskStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WAITING = "waiting"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Task(BaseModel):
    """Task record as seen by the rescheduler.

    Attributes:
        id: Unique identifier for the task
        title: Task title
        description: Optional detailed description
        status: Lifecycle status
        plan_start_date: Planned start (range tasks)
        plan_end_date: Planned end / due date
        is_range_date: Whether the task spans plan_start_date..plan_end_date
        recurrence_rule: Rule producing the next instance on completion
        occurrence_count: How many instances of the series exist so far
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.NOT_STARTED
    plan_start_date: LocalDateTime | None = None
    plan_end_date: LocalDateTime | None = None
    is_range_date: bool = False
    recurrence_rule: RecurrenceRule | None = None
    occurrence_count: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def validate_plan_dates(self) -> Task:
        start, end = self.plan_start_date, self.plan_end_date
        if start is not None and end is not None:
            if (start.tzinfo is None) != (end.tzinfo is None):
                raise ValueError(
                    "plan_start_date and plan_end_date must both carry a timezone or neither"
                )
        return self

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Task:
        """Build a task from raw data, raising InvalidTaskError on bad input."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise InvalidTaskError(describe_validation_error(e)) from e


class TaskDraft(BaseModel):
    """Data for a new task instance, handed to the task-creation collaborator.

    Attributes:
        title: Copied from the completed task
        description: Copied from the completed task
        status: Always starts as not_started
        plan_start_date: Shifted start keeping the original span (range tasks)
        plan_end_date: The computed next occurrence
        is_range_date: Copied from the completed task
        recurrence_rule: Same rule as the completed task
        occurrence_count: Completed task's count plus one
    """

    model_config = ConfigDict(frozen=True)

    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.NOT_STARTED
    plan_start_date: LocalDateTime | None = None
    plan_end_date: LocalDateTime
    is_range_date: bool = False
    recurrence_rule: RecurrenceRule
    occurrence_count: int = Field(default=2, ge=1)
