"""Main entry point for Tasklist CLI."""

import typer

from tasklist_cli.commands import (
    add_command,
    config_command,
    delete_command,
    done_command,
    edit_command,
    list_command,
    ui_command,
    version_command,
    watch_command,
)
from tasklist_cli.utils.typer_helpers import SuggestingGroup

# Create main app with custom group class
app = typer.Typer(
    name="tasklist",
    cls=SuggestingGroup,
    help="A terminal task list with local storage and reminders",
    no_args_is_help=True,
)

# Add top-level commands
app.command("add")(add_command.add_task)
app.command("list")(list_command.list_tasks)
app.command("done")(done_command.toggle_done)
app.command("edit")(edit_command.edit_task)
app.command("delete")(delete_command.delete_task)
app.command("watch")(watch_command.watch)
app.command("ui")(ui_command.open_ui)
app.command("version")(version_command.version)

# Add subcommands
app.add_typer(config_command.app, name="config", help="Configuration management")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
