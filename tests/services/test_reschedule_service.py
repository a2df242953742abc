"""Tests for the completion-driven rescheduler."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from flequit_recurrence.models.task import Task, TaskStatus
from flequit_recurrence.services.reschedule_service import TaskRescheduler, build_next_task


def _task(**overrides) -> Task:
    data = {
        "id": "task-1",
        "title": "Weekly review",
        "description": "Review the week",
        "status": "completed",
        "plan_end_date": datetime(2024, 1, 12),
        "recurrence_rule": {"unit": "day"},
    }
    data.update(overrides)
    return Task.from_data(data)


class TestBuildNextTask:
    def test_not_recurring(self):
        assert build_next_task(_task(recurrence_rule=None)) is None

    def test_copies_fields_and_resets_status(self):
        draft = build_next_task(_task())
        assert draft is not None
        assert draft.title == "Weekly review"
        assert draft.description == "Review the week"
        assert draft.status is TaskStatus.NOT_STARTED
        assert draft.plan_end_date == datetime(2024, 1, 13)
        assert draft.plan_start_date is None
        assert draft.occurrence_count == 2

    def test_range_span_preserved(self):
        task = _task(
            is_range_date=True,
            plan_start_date=datetime(2024, 1, 10),
            plan_end_date=datetime(2024, 1, 12),
        )
        draft = build_next_task(task)
        assert draft.plan_end_date == datetime(2024, 1, 13)
        assert draft.plan_start_date == datetime(2024, 1, 11)
        assert draft.is_range_date

    def test_aware_range_with_naive_rule_end_date(self):
        task = _task(
            is_range_date=True,
            plan_start_date=datetime(2024, 1, 10, tzinfo=timezone.utc),
            plan_end_date=datetime(2024, 1, 12, tzinfo=timezone.utc),
            recurrence_rule={"unit": "day", "end_date": datetime(2024, 1, 20)},
        )
        draft = build_next_task(task)
        assert draft.plan_end_date == datetime(2024, 1, 13, tzinfo=timezone.utc)
        assert draft.plan_start_date == datetime(2024, 1, 11, tzinfo=timezone.utc)

    def test_range_without_start_sets_end_only(self):
        draft = build_next_task(_task(is_range_date=True))
        assert draft.plan_start_date is None

    def test_falls_back_to_now(self):
        task = _task(plan_end_date=None)
        draft = build_next_task(task, now=datetime(2024, 3, 1, 9))
        assert draft.plan_end_date == datetime(2024, 3, 2, 9)

    def test_series_ended_by_end_date(self):
        task = _task(recurrence_rule={"unit": "day", "end_date": datetime(2024, 1, 12)})
        assert build_next_task(task) is None

    def test_series_ended_by_max_occurrences(self):
        task = _task(
            recurrence_rule={"unit": "day", "max_occurrences": 3}, occurrence_count=3
        )
        assert build_next_task(task) is None


class TestTaskRescheduler:
    def test_hands_draft_to_creator(self):
        create = MagicMock()
        rescheduler = TaskRescheduler(create)

        draft = rescheduler.handle_completion(_task())

        create.assert_called_once_with(draft)
        assert draft.plan_end_date == datetime(2024, 1, 13)

    def test_non_recurring_task_is_ignored(self):
        create = MagicMock()
        assert TaskRescheduler(create).handle_completion(_task(recurrence_rule=None)) is None
        create.assert_not_called()

    def test_ended_series_creates_nothing(self):
        create = MagicMock()
        task = _task(recurrence_rule={"unit": "day", "end_date": datetime(2024, 1, 12)})
        assert TaskRescheduler(create).handle_completion(task) is None
        create.assert_not_called()

    def test_uses_clock_without_end_date(self):
        create = MagicMock()
        rescheduler = TaskRescheduler(create, clock=lambda: datetime(2024, 5, 1, 8))
        draft = rescheduler.handle_completion(_task(plan_end_date=None))
        assert draft.plan_end_date == datetime(2024, 5, 2, 8)

    def test_logs_outcome(self, isolated_logger):
        TaskRescheduler(MagicMock()).handle_completion(_task())
        log_text = (isolated_logger / "flequit-recur.log").read_text(encoding="utf-8")
        assert "next occurrence scheduled: task task-1" in log_text

    def test_creator_errors_propagate(self):
        create = MagicMock(side_effect=RuntimeError("store is down"))
        with pytest.raises(RuntimeError, match="store is down"):
            TaskRescheduler(create).handle_completion(_task())
