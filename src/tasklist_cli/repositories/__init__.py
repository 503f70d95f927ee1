"""Persistence for the task list.

Implementations sit on the key-value adapters in tasklist_cli.adapters.
"""

from .task_repository import (
    DEFAULT_KEY,
    TaskRepository,
    get_task_repository,
    load_tasks,
    save_tasks,
)

__all__ = [
    "DEFAULT_KEY",
    "TaskRepository",
    "get_task_repository",
    "load_tasks",
    "save_tasks",
]
