"""Command 'watch' of tasklist-cli"""

import time
from datetime import timedelta

import typer

from tasklist_cli.repositories.task_repository import get_task_repository
from tasklist_cli.services.config_service import get_config_service
from tasklist_cli.services.notification_service import (
    ConsoleNotifier,
    load_permission,
    request_permission_once,
)
from tasklist_cli.services.reminder_service import ReminderScheduler
from tasklist_cli.utils.logger import get_logger
from tasklist_cli.utils.ui.console import get_console
from tasklist_cli.utils.ui.formatters import format_info

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


def sync_reminders(scheduler: ReminderScheduler, tasks, previous) -> int:
    """Re-arm reminders after the stored list changed on disk.

    Tasks that disappeared lose their reminder; every other task is
    rescheduled from its current date and time.
    """
    current_ids = {task.id for task in tasks}
    for task in previous:
        if task.id not in current_ids:
            scheduler.cancel(task.id)
    return scheduler.schedule_all(tasks)


@app.command("watch")
@command_wrapper
def watch(
    interval: float = typer.Option(
        5.0, "--interval", "-i", help="Seconds between checks for changed tasks"
    ),
) -> None:
    """
    Run in the foreground and show reminders before tasks are due.

    Reminders fire 15 minutes (config reminders.lead_minutes) before a
    task's date and time. Tasks added or edited from another terminal are
    picked up on the next check. Press Ctrl+C to stop.
    """
    config = get_config_service().config
    logger = get_logger("watch")

    notifier = ConsoleNotifier(load_permission(), console=console)
    request_permission_once(notifier)

    scheduler = ReminderScheduler(
        notifier,
        lead=timedelta(minutes=config.reminders.lead_minutes),
        enabled=config.reminders.enabled,
    )
    repository = get_task_repository()
    tasks = repository.load()
    armed = scheduler.schedule_all(tasks)
    format_info(f"Watching {len(tasks)} task(s), {armed} reminder(s) armed. Press Ctrl+C to stop.")

    try:
        while True:
            time.sleep(interval)
            latest = repository.load()
            if latest != tasks:
                armed = sync_reminders(scheduler, latest, tasks)
                logger.info("task list changed, %d reminder(s) armed", armed)
                tasks = latest
    except KeyboardInterrupt:
        console.print("\n[yellow]Stopped watching.[/yellow]")
    finally:
        scheduler.cancel_all()
