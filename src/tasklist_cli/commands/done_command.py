"""Command 'done' of tasklist-cli"""

import typer

from tasklist_cli.services.task_store import get_task_store
from tasklist_cli.utils.task_helpers import resolve_task_id
from tasklist_cli.utils.ui.console import get_console
from tasklist_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("done")
@command_wrapper
def toggle_done(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
) -> None:
    """Mark a task as done, or back to pending if it already is."""
    store = get_task_store()
    resolved_id = resolve_task_id(store, task_id)
    task = store.toggle_status(resolved_id)
    assert task is not None

    if task.is_completed:
        format_success(f"✓ Completed: {task.title}")
        console.print(f"[dim]To undo: tasklist done {task_id}[/dim]")
    else:
        format_success(f"Reopened: {task.title}")
