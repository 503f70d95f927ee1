"""Tasklist CLI domain models.

This package contains Pydantic models that represent the task entity, its
filter criteria and the application configuration.
"""

from .config_models import (
    AppConfig,
    NotificationConfig,
    OutputConfig,
    ReminderConfig,
    StorageConfig,
)
from .core import (
    PRIORITY_CHOICES,
    DayBucket,
    Priority,
    Task,
    TaskCreate,
    TaskFilters,
    TaskStatus,
    TaskUpdate,
)

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "TaskFilters",
    "TaskStatus",
    "Priority",
    "PRIORITY_CHOICES",
    "DayBucket",
    # Config models
    "AppConfig",
    "StorageConfig",
    "ReminderConfig",
    "NotificationConfig",
    "OutputConfig",
]
