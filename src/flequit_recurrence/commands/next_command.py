"""Command 'next' of flequit-recur"""

import typer

from flequit_recurrence.core.engine import next_occurrence
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


@app.command("next")
@command_wrapper
def next_command(
    base: str = typer.Argument(..., help="Current occurrence (today/YYYY-MM-DD/ISO)"),
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
    occurrence: int | None = typer.Option(
        None,
        "--occurrence",
        min=1,
        help="Number of occurrences so far, counted against --max",
    ),
    output: OutputOption = None,
) -> None:
    """Show the occurrence following BASE."""
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
    base_date = parse_date_argument(base)

    upcoming = next_occurrence(base_date, rule, occurrences_so_far=occurrence)
    dates = [upcoming] if upcoming is not None else []
    format_occurrences(dates, date_format, output_format)
