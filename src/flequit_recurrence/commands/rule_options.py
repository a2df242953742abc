"""Shared command options and loaders for rules and tasks."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml

from flequit_recurrence.models.recurrence import (
    DayOfWeek,
    RecurrenceRule,
    RecurrenceUnit,
    WeekOfMonth,
)
from flequit_recurrence.services.config_service import get_config_service
from flequit_recurrence.utils.dates import parse_date_input
from flequit_recurrence.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from flequit_recurrence.utils.ui import formatters

from .decorators import AppError

RuleFileOption = Annotated[
    Path | None,
    typer.Option("--rule", "-r", help="JSON or YAML file holding the recurrence rule"),
]
UnitOption = Annotated[
    RecurrenceUnit | None, typer.Option("--unit", "-u", help="Interval unit")
]
IntervalOption = Annotated[
    int, typer.Option("--interval", "-i", min=1, help="Units between occurrences")
]
DaysOption = Annotated[
    list[DayOfWeek] | None,
    typer.Option("--day", help="Target weekday for weekly rules (repeatable)"),
]
DayOfMonthOption = Annotated[
    int | None,
    typer.Option("--day-of-month", min=1, max=31, help="Fixed day for monthly rules"),
]
NthOption = Annotated[
    WeekOfMonth | None,
    typer.Option("--nth", help="Week position for monthly rules (use with --weekday)"),
]
WeekdayOption = Annotated[
    DayOfWeek | None, typer.Option("--weekday", help="Weekday used with --nth")
]
MonthsOption = Annotated[
    list[int] | None,
    typer.Option("--month", min=1, max=12, help="Target month for yearly rules (repeatable)"),
]
UntilOption = Annotated[
    str | None, typer.Option("--until", help="End date (today/tomorrow/YYYY-MM-DD)")
]
MaxOption = Annotated[
    int | None, typer.Option("--max", min=1, help="Maximum number of occurrences")
]
OutputOption = Annotated[
    str | None,
    typer.Option("--output", "-o", help="Output format (pretty/table/json/yaml)"),
]


def load_data_file(path: Path) -> dict[str, Any]:
    """Read a JSON or YAML mapping from ``path``."""
    if not path.exists():
        raise AppError(f"File not found: {path}", exit_code=ERROR_NOT_FOUND)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise AppError(f"Cannot parse {path}: {e}", exit_code=ERROR_INVALID_ARGS) from e
    if not isinstance(data, dict):
        raise AppError(
            f"{path} must contain a mapping at the top level",
            exit_code=ERROR_INVALID_ARGS,
        )
    return data


def parse_date_argument(text: str) -> datetime:
    """``parse_date_input`` for command arguments, failing with exit code 2."""
    try:
        return parse_date_input(text)
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e


def rule_from_options(
    *,
    rule_file: Path | None = None,
    unit: RecurrenceUnit | None = None,
    interval: int = 1,
    days: list[DayOfWeek] | None = None,
    day_of_month: int | None = None,
    nth: WeekOfMonth | None = None,
    weekday: DayOfWeek | None = None,
    months: list[int] | None = None,
    until: str | None = None,
    max_occurrences: int | None = None,
) -> RecurrenceRule:
    """Build a rule from ``--rule FILE`` or from the inline flags.

    Raises:
        AppError: If neither or both sources are given, or the flags conflict
        InvalidRuleError: If the resulting rule is invalid
    """
    if rule_file is not None:
        if unit is not None:
            raise AppError(
                "Use either --rule or --unit, not both", exit_code=ERROR_INVALID_ARGS
            )
        return RecurrenceRule.from_data(load_data_file(rule_file))

    if unit is None:
        raise AppError(
            "A rule is required: pass --rule FILE or --unit", exit_code=ERROR_INVALID_ARGS
        )
    if day_of_month is not None and nth is not None:
        raise AppError(
            "--day-of-month and --nth are mutually exclusive", exit_code=ERROR_INVALID_ARGS
        )
    if (nth is None) != (weekday is None):
        raise AppError(
            "--nth and --weekday must be given together", exit_code=ERROR_INVALID_ARGS
        )

    data: dict[str, Any] = {"unit": unit, "interval": interval}
    if days:
        data["days_of_week"] = days
    if day_of_month is not None:
        data["monthly_pattern"] = {"kind": "specific_day", "day": day_of_month}
    elif nth is not None:
        data["monthly_pattern"] = {
            "kind": "nth_weekday",
            "position": nth,
            "weekday": weekday,
        }
    if months:
        data["yearly_pattern"] = {"months": months}
    if until is not None:
        data["end_date"] = parse_date_argument(until)
    if max_occurrences is not None:
        data["max_occurrences"] = max_occurrences
    return RecurrenceRule.from_data(data)


_OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")


def resolve_output(output: str | None) -> tuple[str, str]:
    """Return ``(output_format, date_format)`` from the flag and the settings.

    Also switches rich colour on or off to follow ``output.color``.
    """
    settings = get_config_service().config.output
    output_format = (output or settings.format).lower()
    if output_format not in _OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}'. Choose from: {', '.join(_OUTPUT_FORMATS)}",
            exit_code=ERROR_INVALID_ARGS,
        )
    formatters.console.no_color = not settings.color
    return output_format, settings.date_format
