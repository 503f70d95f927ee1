"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state.
"""

from __future__ import annotations

from datetime import datetime
from unittest.mock import patch

import pytest

from tasklist_cli.adapters.local_storage import KeyValueStore
from tasklist_cli.models import Task
from tasklist_cli.repositories.task_repository import TaskRepository
from tasklist_cli.services.notification_service import NotificationPermission


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True, scope="session")
def isolated_log_dir(tmp_path_factory):
    """Keep the rotating log file out of the real user log dir."""
    log_dir = str(tmp_path_factory.mktemp("logs"))
    with patch("tasklist_cli.utils.logger.user_log_dir", return_value=log_dir):
        yield log_dir


# ---------------------------------------------------------------------------
# Config isolation helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config, data and storage files land in
    *tmp_path* only. Also clears the lru_cache so each test gets a fresh
    service instance, which commands pick up through get_config_service().
    """
    from tasklist_cli.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    with patch("tasklist_cli.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("tasklist_cli.services.config_service.user_data_dir", return_value=tmpdir):
            with patch(
                "tasklist_cli.adapters.local_storage.user_data_dir", return_value=tmpdir
            ):
                yield get_config_service()
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Storage and task helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def storage(tmp_path) -> KeyValueStore:
    """Key-value store rooted in a temporary directory."""
    return KeyValueStore(tmp_path / "storage")


@pytest.fixture()
def repository(storage) -> TaskRepository:
    return TaskRepository(storage)


def _make_task(task_id: str = "t1", title: str = "Task", **fields) -> Task:
    fields.setdefault("priority", "medium")
    return Task(id=task_id, title=title, **fields)


@pytest.fixture()
def make_task():
    """Factory building a task with sensible defaults."""
    return _make_task


# ---------------------------------------------------------------------------
# Reminder fakes
# ---------------------------------------------------------------------------


class FakeClock:
    """Settable clock for the reminder scheduler."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class FakeTimer:
    def __init__(self, delay: float, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        self.callback()


class FakeTimerFactory:
    """Records armed timers instead of starting threads."""

    def __init__(self):
        self.timers: list[FakeTimer] = []

    def __call__(self, delay: float, callback) -> FakeTimer:
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled]


class RecordingNotifier:
    """Notifier that records deliveries."""

    def __init__(self, permission=NotificationPermission.GRANTED, answer=True):
        self.permission = permission
        self.answer = answer
        self.notifications: list[tuple[str, str]] = []
        self.alerts: list[str] = []
        self.requests = 0

    def request_permission(self, callback=None) -> None:
        self.requests += 1
        self.permission = (
            NotificationPermission.GRANTED if self.answer else NotificationPermission.DENIED
        )
        if callback is not None:
            callback(self.permission)

    def notify(self, title: str, body: str) -> None:
        self.notifications.append((title, body))

    def alert(self, body: str) -> None:
        self.alerts.append(body)


@pytest.fixture()
def clock():
    return FakeClock(datetime(2025, 4, 1, 8, 0))


@pytest.fixture()
def timers():
    return FakeTimerFactory()


@pytest.fixture()
def notifier():
    return RecordingNotifier()
