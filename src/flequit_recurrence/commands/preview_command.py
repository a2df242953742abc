"""Command 'preview' of flequit-recur"""

import typer

from flequit_recurrence.core.sequence import preview
from flequit_recurrence.services.config_service import get_config_service
from flequit_recurrence.utils.ui.formatters import format_occurrences

from .decorators import command_wrapper
from .rule_options import (
    DayOfMonthOption,
    DaysOption,
    IntervalOption,
    MaxOption,
    MonthsOption,
    NthOption,
    OutputOption,
    RuleFileOption,
    UnitOption,
    UntilOption,
    WeekdayOption,
    parse_date_argument,
    resolve_output,
    rule_from_options,
)

app = typer.Typer()


@app.command("preview")
@command_wrapper
def preview_command(
    start: str = typer.Argument(..., help="First occurrence (today/YYYY-MM-DD/ISO)"),
    rule_file: RuleFileOption = None,
    unit: UnitOption = None,
    interval: IntervalOption = 1,
    days: DaysOption = None,
    day_of_month: DayOfMonthOption = None,
    nth: NthOption = None,
    weekday: WeekdayOption = None,
    months: MonthsOption = None,
    until: UntilOption = None,
    max_occurrences: MaxOption = None,
    count: int | None = typer.Option(
        None, "--count", "-n", min=1, help="Number of dates to show"
    ),
    output: OutputOption = None,
) -> None:
    """List the upcoming occurrences after START."""
    output_format, date_format = resolve_output(output)
    rule = rule_from_options(
        rule_file=rule_file,
        unit=unit,
        interval=interval,
        days=days,
        day_of_month=day_of_month,
        nth=nth,
        weekday=weekday,
        months=months,
        until=until,
        max_occurrences=max_occurrences,
    )
    start_date = parse_date_argument(start)

    if count is None:
        count = get_config_service().config.preview.count

    format_occurrences(preview(start_date, rule, count), date_format, output_format)
