"""Command 'reschedule' of flequit-recur"""

from pathlib import Path

import typer

from flequit_recurrence.models.task import Task
from flequit_recurrence.services.reschedule_service import build_next_task
from flequit_recurrence.utils.ui.formatters import format_info, format_output

from .decorators import command_wrapper
from .rule_options import (
    OutputOption,
    load_data_file,
    parse_date_argument,
    resolve_output,
)

app = typer.Typer()


@app.command("reschedule")
@command_wrapper
def reschedule_command(
    task_file: Path = typer.Argument(..., help="JSON or YAML file of the completed task"),
    now: str | None = typer.Option(
        None, "--now", help="Base date for tasks without a planned end date"
    ),
    output: OutputOption = None,
) -> None:
    """Show the next instance of a completed recurring task."""
    output_format, _ = resolve_output(output)
    task = Task.from_data(load_data_file(task_file))
    base = parse_date_argument(now) if now is not None else None

    if task.recurrence_rule is None:
        format_info(f"Task '{task.id}' is not recurring")
        return

    draft = build_next_task(task, now=base)
    if draft is None:
        format_info(f"Recurrence has ended for task '{task.id}'")
        return

    format_output(draft.model_dump(mode="json", exclude_none=True), output_format)
