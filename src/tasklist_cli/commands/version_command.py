"""Command 'version' of tasklist-cli"""

import typer

from tasklist_cli import __version__
from tasklist_cli.utils.ui.console import get_console

app = typer.Typer()
console = get_console()


@app.command("version")
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Tasklist CLI[/bold] version [cyan]{__version__}[/cyan]")
