"""Main entry point for flequit-recur."""

import typer

from flequit_recurrence.commands import (
    config_command,
    next_command,
    preview_command,
    reschedule_command,
    version_command,
)
from flequit_recurrence.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="flequit-recur",
    cls=SuggestingGroup,
    help="Evaluate task recurrence rules: next dates, previews and rescheduling",
    no_args_is_help=True,
)

# Top-level commands
app.command("next")(next_command.next_command)
app.command("preview")(preview_command.preview_command)
app.command("reschedule")(reschedule_command.reschedule_command)
app.command("version")(version_command.version)

app.add_typer(config_command.app, name="config", help="Configuration management")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
