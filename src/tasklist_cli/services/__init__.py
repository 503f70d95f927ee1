"""Services module for Tasklist CLI - Business logic layer."""

from .filter_service import filter_tasks
from .reminder_service import ReminderScheduler
from .task_store import TaskStore, get_task_store

__all__ = [
    "TaskStore",
    "get_task_store",
    "ReminderScheduler",
    "filter_tasks",
]
