"""Command 'version' of flequit-recur"""

import typer

from flequit_recurrence import __version__
from flequit_recurrence.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(__version__)
