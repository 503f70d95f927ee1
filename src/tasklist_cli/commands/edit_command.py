"""Command 'edit' of tasklist-cli"""

import typer

from tasklist_cli.services.task_store import get_task_store
from tasklist_cli.utils.task_helpers import resolve_task_id
from tasklist_cli.utils.ui.edit_controller import EditController
from tasklist_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("edit")
@command_wrapper
def edit_task(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
    title: str | None = typer.Option(None, "--title", help="New title"),
    date: str | None = typer.Option(
        None, "--date", "-d", help="New due date (empty string clears it)"
    ),
    time: str | None = typer.Option(
        None, "--time", "-t", help="New due time (empty string clears it)"
    ),
    priority: str | None = typer.Option(
        None, "--priority", "-p", help="New priority (low/medium/high)"
    ),
) -> None:
    """
    Edit a task's title, date, time and priority.

    Fields not given keep their current value. Without any option the
    fields are prompted for, pre-filled with the current values.
    """
    store = get_task_store()
    resolved_id = resolve_task_id(store, task_id)
    task = store.get(resolved_id)
    assert task is not None

    controller = EditController(store)
    draft = controller.begin(task)

    if all(value is None for value in (title, date, time, priority)):
        draft.title = typer.prompt("Title", default=draft.title)
        draft.date = typer.prompt("Date", default=draft.date, show_default=bool(draft.date))
        draft.time = typer.prompt("Time", default=draft.time, show_default=bool(draft.time))
        draft.priority = typer.prompt(
            f"Priority ({'/'.join(draft.priority_options)})", default=draft.priority
        )
    else:
        if title is not None:
            draft.title = title
        if date is not None:
            draft.date = date
        if time is not None:
            draft.time = time
        if priority is not None:
            draft.priority = priority

    updated = controller.save()
    assert updated is not None
    format_success(f"Updated: {updated.title}")
