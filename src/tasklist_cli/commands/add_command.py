"""Command 'add' of tasklist-cli"""

import typer

from tasklist_cli.services.task_store import get_task_store
from tasklist_cli.utils.task_helpers import find_shortest_unique_suffix
from tasklist_cli.utils.ui.console import get_console
from tasklist_cli.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("add")
@command_wrapper
def add_task(
    title: str | None = typer.Argument(None, help="Task title"),
    priority: str | None = typer.Option(
        None, "--priority", "-p", help="Priority (low/medium/high)"
    ),
    date: str | None = typer.Option(None, "--date", "-d", help="Due date (YYYY-MM-DD)"),
    time: str | None = typer.Option(None, "--time", "-t", help="Due time (HH:MM)"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """
    Add a new pending task.

    Examples:
      tasklist add "Pay rent" -p high -d 2025-04-01 -t 09:00
      tasklist add "Buy milk" --priority low
    """
    if json_opt:
        output = "json"

    store = get_task_store()
    task = store.add(title, date=date, time=time, priority=priority)

    if output in ("pretty", "table"):
        suffix = find_shortest_unique_suffix([t.id for t in store], task.id)
        format_success(f"Added: {task.title}")
        console.print(f"[dim]ID: {suffix}[/dim]")
    else:
        format_output([task], output)
