"""Reminder scheduler.

Arms one one-shot timer per task that has both a date and a time, firing a
reminder ``lead`` (15 minutes by default) before the task is due. Reminders
whose instant has already passed are dropped, never caught up.

Timers are kept in a schedule keyed by task id so that deleting or
rescheduling a task cancels its pending reminder.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from typing import Protocol

from tasklist_cli.models import Task
from tasklist_cli.services.notification_service import NotificationPermission, Notifier
from tasklist_cli.utils.logger import get_logger

REMINDER_LEAD = timedelta(minutes=15)

# Largest delay a browser timer accepts (2**31 - 1 ms)
MAX_TIMER_DELAY = 2_147_483_647 / 1000

REMINDER_TITLE = "Task Reminder"


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def threading_timer_factory(delay: float, callback: Callable[[], None]) -> TimerHandle:
    """Start a daemon ``threading.Timer``."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


def due_instant(task: Task) -> datetime | None:
    """Combine a task's date and time into a local datetime.

    Returns None when either part is missing or the pair does not parse.
    """
    if not task.date or not task.time:
        return None
    try:
        return datetime.fromisoformat(f"{task.date.strip()}T{task.time.strip()}")
    except ValueError:
        return None


def reminder_message(title: str, lead: timedelta = REMINDER_LEAD) -> str:
    """Build the reminder text for a task title."""
    minutes = int(lead.total_seconds() // 60)
    return f"⏰ {minutes} minutes left for: {title}"


class ReminderScheduler:
    """Schedules and delivers task reminders.

    Args:
        notifier: Where reminders are shown
        timer_factory: Starts a timer and returns a cancellable handle
        clock: Returns the current local time
        lead: How long before the due instant the reminder fires
        enabled: When False, ``schedule`` never arms anything
    """

    def __init__(
        self,
        notifier: Notifier,
        timer_factory: TimerFactory = threading_timer_factory,
        clock: Callable[[], datetime] = datetime.now,
        lead: timedelta = REMINDER_LEAD,
        enabled: bool = True,
    ):
        self.notifier = notifier
        self.timer_factory = timer_factory
        self.clock = clock
        self.lead = lead
        self.enabled = enabled
        self._timers: dict[str, TimerHandle] = {}
        self._lock = threading.Lock()
        self.logger = get_logger("reminders")

    def reminder_instant(self, task: Task) -> datetime | None:
        """Return when the reminder for *task* should fire, or None."""
        due = due_instant(task)
        if due is None:
            return None
        return due - self.lead

    def schedule(self, task: Task) -> bool:
        """Arm the reminder for *task*, replacing any pending one.

        Returns:
            True if a timer was armed
        """
        self.cancel(task.id)
        if not self.enabled:
            return False

        remind_at = self.reminder_instant(task)
        if remind_at is None:
            self.logger.debug("no reminder for %s: missing or invalid date/time", task.id)
            return False

        delay = (remind_at - self.clock()).total_seconds()
        if delay <= 0:
            self.logger.debug("no reminder for %s: %s already passed", task.id, remind_at)
            return False

        self._arm(task.id, task.title, remind_at, delay)
        return True

    def schedule_all(self, tasks: Iterable[Task]) -> int:
        """Arm reminders for every task; returns how many were armed."""
        return sum(1 for task in tasks if self.schedule(task))

    def cancel(self, task_id: str) -> bool:
        """Cancel the pending reminder of *task_id*, if any."""
        with self._lock:
            handle = self._timers.pop(task_id, None)
        if handle is None:
            return False
        handle.cancel()
        self.logger.debug("cancelled reminder for %s", task_id)
        return True

    def cancel_all(self) -> None:
        """Cancel every pending reminder."""
        with self._lock:
            handles = list(self._timers.values())
            self._timers.clear()
        for handle in handles:
            handle.cancel()

    def pending(self) -> list[str]:
        """Ids of tasks with an armed reminder."""
        with self._lock:
            return list(self._timers)

    def deliver(self, title: str) -> None:
        """Show the reminder for *title* through the notifier."""
        message = reminder_message(title, self.lead)
        if self.notifier.permission is NotificationPermission.GRANTED:
            self.notifier.notify(REMINDER_TITLE, message)
        else:
            self.notifier.alert(message)

    def _arm(self, task_id: str, title: str, remind_at: datetime, delay: float) -> None:
        armed: list[TimerHandle] = []

        def fire() -> None:
            self._fire(task_id, title, remind_at, armed)

        # Held until the handle is recorded; a timer that fires early waits here
        with self._lock:
            handle = self.timer_factory(min(delay, MAX_TIMER_DELAY), fire)
            armed.append(handle)
            self._timers[task_id] = handle
        self.logger.info("reminder for %s armed at %s", task_id, remind_at.isoformat())

    def _fire(
        self,
        task_id: str,
        title: str,
        remind_at: datetime,
        armed: list[TimerHandle],
    ) -> None:
        with self._lock:
            if self._timers.get(task_id) is not armed[0]:
                # Cancelled or replaced after the timer went off
                return
            self._timers.pop(task_id, None)

        # Capped delays wake up early; wait out the remainder
        remaining = (remind_at - self.clock()).total_seconds()
        if remaining > 0:
            self._arm(task_id, title, remind_at, remaining)
            return

        self.logger.info("delivering reminder for %s", task_id)
        self.deliver(title)
