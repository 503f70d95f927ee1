"""Task data models."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskStatus(str, Enum):
    """Completion status of a task."""

    PENDING = "Pending"
    COMPLETED = "Completed"

    def toggled(self) -> TaskStatus:
        """Return the opposite status."""
        if self is TaskStatus.COMPLETED:
            return TaskStatus.PENDING
        return TaskStatus.COMPLETED


class Priority(str, Enum):
    """Task priority level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


PRIORITY_CHOICES: tuple[str, ...] = tuple(p.value for p in Priority)

DayBucket = Literal["all", "today", "tomorrow", "week"]


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class Task(BaseModel):
    """Task model representing a single to-do item.

    Attributes:
        id: Unique identifier, immutable after creation
        title: Display string, required at creation
        date: Optional calendar date (YYYY-MM-DD)
        time: Optional time of day (HH:MM)
        status: Pending or Completed
        priority: low, medium or high
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str
    title: str
    date: str | None = None
    time: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    priority: Priority

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        # Timestamp fallback ids were persisted as numbers
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("date", "time", mode="before")
    @classmethod
    def _normalize_blank(cls, value: object) -> object:
        return _blank_to_none(value)

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED


class TaskCreate(BaseModel):
    """Model for creating a new task.

    Attributes:
        title: Task title (required, stripped)
        date: Optional due date
        time: Optional due time
        priority: Priority level (required)
    """

    title: str = Field(min_length=1)
    date: str | None = None
    time: str | None = None
    priority: Priority

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("date", "time", mode="before")
    @classmethod
    def _normalize_blank(cls, value: object) -> object:
        return _blank_to_none(value)


class TaskUpdate(TaskCreate):
    """Model for overwriting the mutable fields of an existing task.

    All four fields are replaced together, mirroring the inline edit form.
    """


class TaskFilters(BaseModel):
    """Filter criteria for the task list.

    Every criterion defaults to its "all" state; criteria combine with AND.

    Attributes:
        search: Case-insensitive substring of the title
        status: "all", "pending" or "completed"
        date: Exact YYYY-MM-DD match ("" or "all" disables it)
        day: Relative day bucket ("all", "today", "tomorrow", "week")
        priority: "all" or an exact priority value
    """

    search: str = ""
    status: str = "all"
    date: str = ""
    day: DayBucket = "all"
    priority: str = "all"

    @field_validator("search", "date", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("status", "priority", mode="before")
    @classmethod
    def _none_to_all(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return "all"
        return value

    @classmethod
    def cleared(cls) -> TaskFilters:
        """Return criteria reset to their default state."""
        return cls()

    @property
    def is_default(self) -> bool:
        return self == TaskFilters()
