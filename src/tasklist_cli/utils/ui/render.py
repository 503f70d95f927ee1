"""Pure projection of a task sequence into displayable rows.

Both the Textual app and the plain CLI output build on this, so the two
show the same title, subtitle and toggle label for a task. The projection
keeps no state: the same tasks always give the same view.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from tasklist_cli.models import Task

NO_TASKS_MESSAGE = "No tasks found"


@dataclass(frozen=True)
class TaskRowView:
    """Display data for one task row."""

    task_id: str
    title: str
    completed: bool
    subtitle: str
    toggle_label: str
    priority: str


@dataclass(frozen=True)
class TaskListView:
    """Display data for the whole list; ``empty`` shows the placeholder."""

    rows: tuple[TaskRowView, ...] = field(default_factory=tuple)

    @property
    def empty(self) -> bool:
        return not self.rows

    @property
    def placeholder(self) -> str | None:
        return NO_TASKS_MESSAGE if self.empty else None


def task_subtitle(task: Task) -> str:
    """Date, time and status line shown under the title."""
    return f"{task.date or ''} {task.time or ''} • {task.status.value}"


def toggle_label(task: Task) -> str:
    return "Undo" if task.is_completed else "Done"


def render_row(task: Task) -> TaskRowView:
    return TaskRowView(
        task_id=task.id,
        title=task.title,
        completed=task.is_completed,
        subtitle=task_subtitle(task),
        toggle_label=toggle_label(task),
        priority=task.priority.value,
    )


def render_task_list(tasks: Iterable[Task]) -> TaskListView:
    """Project *tasks*, in order, into a list view."""
    return TaskListView(rows=tuple(render_row(task) for task in tasks))
