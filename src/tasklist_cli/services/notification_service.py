"""Reminder delivery: notification permission and console notifier.

Permission follows the browser tri-state. It is asked for once, cached on
the notifier and persisted in the config so later runs do not ask again.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from enum import Enum
from typing import Protocol

import typer
from rich.console import Console
from rich.panel import Panel

from tasklist_cli.utils.logger import get_logger
from tasklist_cli.utils.ui.console import get_console


class NotificationPermission(str, Enum):
    """Notification permission state."""

    DEFAULT = "default"
    GRANTED = "granted"
    DENIED = "denied"


PermissionCallback = Callable[[NotificationPermission], None]


class Notifier(Protocol):
    """Something that can show reminders to the user."""

    @property
    def permission(self) -> NotificationPermission: ...

    def request_permission(self, callback: PermissionCallback | None = None) -> None: ...

    def notify(self, title: str, body: str) -> None: ...

    def alert(self, body: str) -> None: ...


def load_permission() -> NotificationPermission:
    """Read the persisted permission from the config."""
    from tasklist_cli.services.config_service import get_config_service

    return NotificationPermission(get_config_service().config.notifications.permission)


def remember_permission(permission: NotificationPermission) -> None:
    """Persist a permission decision; failures are logged, not raised."""
    from tasklist_cli.services.config_service import get_config_service

    try:
        get_config_service().set("notifications.permission", permission.value)
    except (RuntimeError, ValueError, KeyError) as e:
        get_logger("notifications").error("could not save permission: %s", e)


def request_permission_once(notifier: Notifier) -> bool:
    """Ask for permission if it was never granted nor denied.

    The answer is not awaited; reminders use whatever the notifier has
    cached when they fire.

    Returns:
        True if a request was made
    """
    if notifier.permission is not NotificationPermission.DEFAULT:
        return False
    notifier.request_permission(remember_permission)
    return True


class ConsoleNotifier:
    """Shows reminders on the terminal.

    Notifications are printed as a panel; alerts ring the bell and block
    until Enter is pressed. Deliveries from concurrent timers are serialised.
    """

    def __init__(
        self,
        permission: NotificationPermission = NotificationPermission.DEFAULT,
        console: Console | None = None,
        confirm: Callable[[str], bool] | None = None,
    ):
        self._permission = permission
        self.console = console or get_console()
        self._confirm = confirm or (lambda prompt: typer.confirm(prompt, default=True))
        self._lock = threading.Lock()

    @property
    def permission(self) -> NotificationPermission:
        return self._permission

    def request_permission(self, callback: PermissionCallback | None = None) -> None:
        allowed = self._confirm("Allow reminder notifications?")
        self._permission = (
            NotificationPermission.GRANTED if allowed else NotificationPermission.DENIED
        )
        get_logger("notifications").info("permission set to %s", self._permission.value)
        if callback is not None:
            callback(self._permission)

    def notify(self, title: str, body: str) -> None:
        with self._lock:
            self.console.bell()
            self.console.print(Panel(body, title=title, border_style="cyan"))

    def alert(self, body: str) -> None:
        with self._lock:
            self.console.bell()
            self.console.print(f"[bold yellow]{body}[/bold yellow]")
            self.console.input("[dim]Press Enter to dismiss[/dim] ")
