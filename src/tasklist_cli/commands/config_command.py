"""Configuration management commands."""

import typer

from tasklist_cli.exceptions import AppError
from tasklist_cli.services.config_service import get_config_service, parse_value
from tasklist_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from tasklist_cli.utils.ui.console import get_console
from tasklist_cli.utils.ui.formatters import format_config, format_info, format_success

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_service = get_config_service()
    format_config(config_service.config.model_dump(), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., reminders.lead_minutes)"),
) -> None:
    """Get a configuration value."""
    config_service = get_config_service()
    value = config_service.get(key)
    if value is None and not config_service._is_nullable(key):
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_NOT_FOUND)
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., reminders.lead_minutes)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    config_service = get_config_service()
    parsed_value = parse_value(value)
    try:
        config_service.set(key, parsed_value)
    except KeyError as e:
        raise AppError(e.args[0], exit_code=ERROR_NOT_FOUND) from e
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    config_service = get_config_service()
    try:
        config_service.reset(key)
    except KeyError as e:
        raise AppError(e.args[0], exit_code=ERROR_NOT_FOUND) from e

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
