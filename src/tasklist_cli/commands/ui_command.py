"""Command 'ui' of tasklist-cli"""

import typer

from .decorators import command_wrapper

app = typer.Typer()


@app.command("ui")
@command_wrapper
def open_ui() -> None:
    """Open the full-screen task list."""
    # Lazy import keeps Textual out of the other commands' startup
    from tasklist_cli.utils.ui.task_list_view import TaskListApp

    TaskListApp().run()
