"""Next-instance scheduling for completed recurring tasks.

When a recurring task is marked completed, the next occurrence is computed
from its planned end date (or the current time) and turned into a draft for a
new task instance. Persisting the draft belongs to the injected task-creation
collaborator; an ended series produces no draft and no error.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from flequit_recurrence.core.engine import next_occurrence
from flequit_recurrence.models.task import Task, TaskDraft, TaskStatus
from flequit_recurrence.utils.logger import get_logger

TaskCreator = Callable[[TaskDraft], Any]


def build_next_task(task: Task, *, now: datetime | None = None) -> TaskDraft | None:
    """Draft the next instance of ``task``, or None when there is none.

    Args:
        task: The task that was just completed
        now: Base date used when the task has no planned end date
            (defaults to the current local time)

    Returns:
        A not-started draft carrying the same rule, or None when the task
        is not recurring or its series has ended.
    """
    rule = task.recurrence_rule
    if rule is None:
        return None

    base = task.plan_end_date or now or datetime.now()
    upcoming = next_occurrence(base, rule, occurrences_so_far=task.occurrence_count)
    if upcoming is None:
        return None

    start = None
    if task.is_range_date and task.plan_start_date and task.plan_end_date:
        start = upcoming - (task.plan_end_date - task.plan_start_date)

    return TaskDraft(
        title=task.title,
        description=task.description,
        status=TaskStatus.NOT_STARTED,
        plan_start_date=start,
        plan_end_date=upcoming,
        is_range_date=task.is_range_date,
        recurrence_rule=rule,
        occurrence_count=task.occurrence_count + 1,
    )


class TaskRescheduler:
    """Reacts to task completion by handing the next instance to ``create_task``."""

    def __init__(
        self,
        create_task: TaskCreator,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._create_task = create_task
        self._clock = clock

    def handle_completion(self, task: Task) -> TaskDraft | None:
        """Schedule the next instance of a completed task.

        Returns the draft that was handed to the creator, if any.
        """
        logger = get_logger("rescheduler")
        if task.recurrence_rule is None:
            return None

        draft = build_next_task(task, now=self._clock())
        if draft is None:
            logger.info("recurrence ended: task %s", task.id)
            return None

        logger.info(
            "next occurrence scheduled: task %s -> %s",
            task.id,
            draft.plan_end_date.isoformat(),
        )
        self._create_task(draft)
        return draft
