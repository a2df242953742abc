"""Decorators for command functions."""

import functools
import time
from collections.abc import Callable

import typer

from flequit_recurrence.models.exceptions import RecurrenceError
from flequit_recurrence.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS
from flequit_recurrence.utils.logger import get_logger
from flequit_recurrence.utils.ui.formatters import format_error


class AppError(Exception):
    """Error raised by a command, carrying the exit code to leave with."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _describe_failure(error: Exception) -> tuple[str, int]:
    """Message shown to the user and exit code for a failed command."""
    if isinstance(error, AppError):
        return str(error), error.exit_code
    if isinstance(error, RecurrenceError):
        return str(error), ERROR_INVALID_ARGS
    return f"An unexpected error occurred: {error}", ERROR_GENERAL


def command_wrapper(func: Callable):
    """Log each run of a command and turn its errors into an exit code.

    ``typer.Exit`` passes through untouched. Unexpected errors are logged
    with their traceback.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger("commands")
        name = func.__name__.removesuffix("_command")
        start = time.monotonic()
        logger.info("command started: %s", name)
        try:
            result = func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            message, exit_code = _describe_failure(e)
            logger.error(
                "command failed: %s (%.3fs, exit %d) - %s",
                name,
                time.monotonic() - start,
                exit_code,
                e,
                exc_info=exit_code == ERROR_GENERAL,
            )
            format_error(message)
            raise typer.Exit(code=exit_code) from e

        logger.info("command completed: %s (%.3fs)", name, time.monotonic() - start)
        return result

    return wrapper
