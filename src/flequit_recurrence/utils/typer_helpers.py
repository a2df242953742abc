"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from flequit_recurrence.utils.exit_codes import ERROR_GENERAL
from flequit_recurrence.utils.ui.console import get_console


class SuggestingGroup(TyperGroup):
    """Typer group that answers an unknown command with "did you mean" hints."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            suggestions = self.suggest(args[0]) if args else []
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{args[0]}" for "{ctx.command_path}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            console.print()
            console.print(f"Run '{ctx.command_path} --help' for the list of commands.")
            raise typer.Exit(ERROR_GENERAL) from e

    def suggest(self, attempted: str) -> list[str]:
        """Up to three command names close to ``attempted``."""
        return get_close_matches(attempted, list(self.commands), n=3, cutoff=0.6)


def parse_config_value(value: str) -> str | int | bool:
    """Convert a raw ``config set`` argument to bool/int where it looks like one."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    return value
