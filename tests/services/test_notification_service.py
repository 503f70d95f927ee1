"""Tests for notification permission and the console notifier."""

from io import StringIO
from unittest.mock import MagicMock, patch

from rich.console import Console

from tasklist_cli.services.notification_service import (
    ConsoleNotifier,
    NotificationPermission,
    load_permission,
    remember_permission,
    request_permission_once,
)


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, force_terminal=False, width=80), buffer


class TestRequestPermissionOnce:
    def test_asks_when_undecided(self, notifier):
        notifier.permission = NotificationPermission.DEFAULT
        with patch(
            "tasklist_cli.services.notification_service.remember_permission"
        ) as remember:
            assert request_permission_once(notifier) is True
        assert notifier.requests == 1
        remember.assert_called_once_with(NotificationPermission.GRANTED)

    def test_does_not_ask_when_granted(self, notifier):
        notifier.permission = NotificationPermission.GRANTED
        assert request_permission_once(notifier) is False
        assert notifier.requests == 0

    def test_does_not_ask_when_denied(self, notifier):
        notifier.permission = NotificationPermission.DENIED
        assert request_permission_once(notifier) is False
        assert notifier.requests == 0


class TestPersistedPermission:
    def test_default_is_undecided(self, tmp_config):
        assert load_permission() is NotificationPermission.DEFAULT

    def test_remember_then_load(self, tmp_config):
        remember_permission(NotificationPermission.DENIED)
        assert load_permission() is NotificationPermission.DENIED
        assert tmp_config.get("notifications.permission") == "denied"

    def test_remember_failure_is_logged_not_raised(self, tmp_config):
        with patch.object(tmp_config, "save_config", side_effect=RuntimeError("read-only")):
            remember_permission(NotificationPermission.GRANTED)


class TestConsoleNotifier:
    def test_request_permission_granted(self):
        callback = MagicMock()
        notifier = ConsoleNotifier(confirm=lambda prompt: True)
        notifier.request_permission(callback)
        assert notifier.permission is NotificationPermission.GRANTED
        callback.assert_called_once_with(NotificationPermission.GRANTED)

    def test_request_permission_denied(self):
        notifier = ConsoleNotifier(confirm=lambda prompt: False)
        notifier.request_permission()
        assert notifier.permission is NotificationPermission.DENIED

    def test_notify_prints_panel(self):
        console, buffer = _console()
        notifier = ConsoleNotifier(NotificationPermission.GRANTED, console=console)
        notifier.notify("Task Reminder", "⏰ 15 minutes left for: Pay rent")
        output = buffer.getvalue()
        assert "Task Reminder" in output
        assert "Pay rent" in output

    def test_alert_waits_for_enter(self):
        console, buffer = _console()
        notifier = ConsoleNotifier(console=console)
        with patch.object(console, "input", return_value="") as wait:
            notifier.alert("⏰ 15 minutes left for: Pay rent")
        wait.assert_called_once()
        assert "Pay rent" in buffer.getvalue()
