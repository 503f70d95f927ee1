"""Tests for the watch command."""

from datetime import datetime, timedelta
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tasklist_cli.commands.watch_command import app, sync_reminders
from tasklist_cli.repositories.task_repository import get_task_repository
from tasklist_cli.services.reminder_service import ReminderScheduler

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(tmp_config):
    tmp_config.set("notifications.permission", "granted")
    yield tmp_config


def _due_in(make_task, task_id, minutes):
    due = datetime.now() + timedelta(minutes=minutes)
    return make_task(task_id, date=due.strftime("%Y-%m-%d"), time=due.strftime("%H:%M"))


def test_watch_arms_reminders_and_stops_on_ctrl_c(make_task):
    get_task_repository().save([_due_in(make_task, "a", 120), make_task("b")])

    with patch("tasklist_cli.commands.watch_command.time.sleep", side_effect=KeyboardInterrupt):
        result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "Watching 2 task(s), 1 reminder(s) armed" in result.output
    assert "Stopped watching" in result.output


def test_watch_asks_permission_once(tmp_config):
    tmp_config.set("notifications.permission", "default")

    with patch("tasklist_cli.commands.watch_command.time.sleep", side_effect=KeyboardInterrupt):
        result = runner.invoke(app, [], input="n\n")

    assert result.exit_code == 0
    assert "Allow reminder notifications?" in result.output
    assert tmp_config.get("notifications.permission") == "denied"


def test_watch_picks_up_changes(make_task):
    repo = get_task_repository()
    repo.save([])
    calls = []

    def fake_sleep(_):
        if not calls:
            repo.save([_due_in(make_task, "late", 90)])
            calls.append(1)
            return
        raise KeyboardInterrupt

    with patch("tasklist_cli.commands.watch_command.time.sleep", side_effect=fake_sleep):
        with patch.object(ReminderScheduler, "schedule_all", return_value=1) as schedule_all:
            result = runner.invoke(app, ["--interval", "0"])

    assert result.exit_code == 0
    assert schedule_all.call_count == 2
    assert [t.id for t in schedule_all.call_args.args[0]] == ["late"]


def test_sync_reminders_cancels_removed_tasks(notifier, timers, clock, make_task):
    scheduler = ReminderScheduler(notifier, timers, clock)
    old = [make_task("a", date="2025-04-01", time="09:00")]
    scheduler.schedule_all(old)

    armed = sync_reminders(scheduler, [make_task("b", date="2025-04-01", time="10:00")], old)

    assert armed == 1
    assert scheduler.pending() == ["b"]
