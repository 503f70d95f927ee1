"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from tasklist_cli.models import Task
from tasklist_cli.utils.task_helpers import find_shortest_unique_suffix
from tasklist_cli.utils.ui.console import get_console
from tasklist_cli.utils.ui.render import NO_TASKS_MESSAGE, TaskRowView, render_task_list

console = get_console()

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")

# Priority Icons & Colors
PRIORITY_ICONS = {
    "high": "🔴",
    "medium": "🟡",
    "low": "🟢",
}

PRIORITY_COLORS = {
    "high": "bold red",
    "medium": "bold yellow",
    "low": "green",
}

# Status Icons
STATUS_ICONS = {
    "open": "⬜",
    "completed": "☑️",
}


def tasks_to_dicts(tasks: list[Task]) -> list[dict]:
    """Serialise tasks to JSON-compatible dicts."""
    return [task.model_dump(mode="json") for task in tasks]


def format_output(tasks: list[Task], output_format: str = "pretty") -> None:
    """Display a task list in the requested format."""
    if output_format == "json":
        print(json.dumps(tasks_to_dicts(tasks), indent=2, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.dump(tasks_to_dicts(tasks), default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(tasks)
    else:
        # Default to pretty
        format_tasks_pretty(tasks)


def format_table(tasks: list[Task]) -> None:
    """Format tasks as a table."""
    view = render_task_list(tasks)
    if view.empty:
        console.print(f"[yellow]{NO_TASKS_MESSAGE}[/yellow]")
        return

    all_ids = [task.id for task in tasks]
    table = Table(show_header=True, header_style="bold magenta")
    for column in ("ID", "Title", "Date", "Time", "Status", "Priority"):
        table.add_column(column)

    for task in tasks:
        title = Text(task.title, style="strike dim" if task.is_completed else "")
        table.add_row(
            find_shortest_unique_suffix(all_ids, task.id),
            title,
            task.date or "-",
            task.time or "-",
            task.status.value,
            task.priority.value,
        )

    console.print(table)


def format_tasks_pretty(tasks: list[Task]) -> None:
    """Format tasks in pretty format, one row per task in list order."""
    view = render_task_list(tasks)
    if view.empty:
        console.print(f"[yellow]{view.placeholder}[/yellow]")
        return

    pending = sum(1 for row in view.rows if not row.completed)
    header = Text()
    header.append("📋 Tasks ", style="bold cyan")
    header.append(f"({pending} pending, {len(view.rows) - pending} completed)", style="dim")
    console.print(header)
    console.print()

    all_ids = [task.id for task in tasks]
    for row in view.rows:
        format_task_item(row, find_shortest_unique_suffix(all_ids, row.task_id))
    console.print()


def format_task_item(row: TaskRowView, suffix: str, indent: str = "  ") -> None:
    """Format a single task row."""
    status_icon = STATUS_ICONS["completed"] if row.completed else STATUS_ICONS["open"]

    line = Text(f"{indent}{status_icon} ")
    line.append(row.title, style="strike dim" if row.completed else "bold")
    line.append(f"  {PRIORITY_ICONS.get(row.priority, '')} ", style="")
    line.append(row.priority, style=PRIORITY_COLORS.get(row.priority, ""))
    line.append(f"  [{suffix}]", style="dim")
    console.print(line)
    console.print(Text(f"{indent}   {row.subtitle}", style="cyan"))


def format_config(data: dict[str, Any], output_format: str = "pretty") -> None:
    """Display a configuration dict."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
        return
    if output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
        return

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    for section, values in data.items():
        if isinstance(values, dict):
            for key, value in values.items():
                table.add_row(f"{section}.{key}", "-" if value is None else str(value))
        else:
            table.add_row(section, "-" if values is None else str(values))
    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")
