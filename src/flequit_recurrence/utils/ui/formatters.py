"""Output formatters for different formats."""

import json
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display JSON-compatible data based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), end="")
    elif output_format == "table":
        format_table(data)
    else:
        format_pretty(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        if isinstance(data[0], dict):
            format_dict_table(data)
        else:
            for item in data:
                console.print(item)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    columns = list(items[0].keys())

    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        table.add_row(*(_format_value(item.get(col)) for col in columns))

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _format_value(value))

    console.print(table)


def format_pretty(data: Any) -> None:
    """Readable rendering for humans: lists as bullets, dicts as key/value."""
    if isinstance(data, list):
        if not data:
            console.print("[yellow]No items found[/yellow]")
            return
        for item in data:
            console.print(f"  • {_format_value(item)}")
    elif isinstance(data, dict):
        for key, value in data.items():
            formatted_key = key.replace("_", " ").title()
            console.print(f"[cyan]{formatted_key}:[/cyan] {_format_value(value)}")
    else:
        console.print(data)


def format_occurrences(
    dates: list[datetime], date_format: str, output_format: str = "pretty"
) -> None:
    """Display a numbered list of occurrence dates."""
    if output_format in ("json", "yaml"):
        format_output([d.isoformat() for d in dates], output_format)
        return

    if not dates:
        console.print("[yellow]No further occurrences[/yellow]")
        return

    if output_format == "table":
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("#", justify="right")
        table.add_column("Date")
        for index, value in enumerate(dates, start=1):
            table.add_row(str(index), value.strftime(date_format))
        console.print(table)
        return

    for index, value in enumerate(dates, start=1):
        console.print(f"[dim]{index:>3}.[/dim] [bold]{value.strftime(date_format)}[/bold]")


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if value is None:
        return "-"
    return str(value)
