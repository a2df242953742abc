"""Configuration management commands."""

import typer
from pydantic import ValidationError

from flequit_recurrence.models.recurrence import describe_validation_error
from flequit_recurrence.services.config_service import get_config_service
from flequit_recurrence.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from flequit_recurrence.utils.typer_helpers import SuggestingGroup, parse_config_value
from flequit_recurrence.utils.ui.console import get_console
from flequit_recurrence.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    format_output(get_config_service().config.model_dump(), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_NOT_FOUND)
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., preview.count)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    parsed_value = parse_config_value(value)
    try:
        get_config_service().set(key, parsed_value)
    except KeyError as e:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_NOT_FOUND
        ) from e
    except ValidationError as e:
        raise AppError(
            f"Invalid value for '{key}': {describe_validation_error(e)}",
            exit_code=ERROR_INVALID_ARGS,
        ) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    try:
        get_config_service().reset(key)
    except KeyError as e:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_NOT_FOUND
        ) from e

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
