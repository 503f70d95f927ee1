"""Command 'delete' of tasklist-cli"""

import typer

from tasklist_cli.services.task_store import get_task_store
from tasklist_cli.utils.task_helpers import resolve_task_id
from tasklist_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("delete")
@command_wrapper
def delete_task(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    store = get_task_store()
    resolved_id = resolve_task_id(store, task_id)
    task = store.get(resolved_id)
    assert task is not None

    if not force:
        confirm = typer.confirm(f"Delete task '{task.title}'?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    store.remove(resolved_id)
    format_success(f"Deleted: {task.title}")
