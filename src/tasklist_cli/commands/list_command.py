"""Command 'list' of tasklist-cli"""

from typing import get_args

import typer

from tasklist_cli.exceptions import AppError
from tasklist_cli.models import PRIORITY_CHOICES, DayBucket, TaskFilters
from tasklist_cli.services.config_service import get_config_service
from tasklist_cli.services.filter_service import filter_tasks
from tasklist_cli.services.task_store import get_task_store
from tasklist_cli.utils.exit_codes import ERROR_INVALID_ARGS
from tasklist_cli.utils.ui.formatters import OUTPUT_FORMATS, format_output

from .decorators import command_wrapper

app = typer.Typer()

STATUS_CHOICES = ("all", "pending", "completed")


def _check_choice(name: str, value: str, choices: tuple[str, ...]) -> None:
    if value not in choices:
        raise AppError(
            f"Invalid {name} '{value}'. Choose from: {', '.join(choices)}",
            exit_code=ERROR_INVALID_ARGS,
        )


@app.command("list")
@command_wrapper
def list_tasks(
    search: str = typer.Option("", "--search", "-s", help="Title contains (case-insensitive)"),
    status: str = typer.Option("all", "--status", help="all, pending or completed"),
    date: str = typer.Option("", "--date", "-d", help="Exact due date (YYYY-MM-DD)"),
    day: str = typer.Option("all", "--day", help="all, today, tomorrow or week"),
    priority: str = typer.Option("all", "--priority", "-p", help="all, low, medium or high"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """List tasks, optionally filtered."""
    if json_opt:
        output = "json"
    if output is None:
        output = get_config_service().config.output.format

    status = status.lower()
    day = day.lower()
    _check_choice("output format", output, OUTPUT_FORMATS)
    _check_choice("status", status, STATUS_CHOICES)
    _check_choice("day", day, get_args(DayBucket))
    _check_choice("priority", priority, ("all", *PRIORITY_CHOICES))

    filters = TaskFilters(
        search=search, status=status, date=date, day=day, priority=priority
    )
    tasks = filter_tasks(get_task_store().tasks, filters)
    format_output(tasks, output)
