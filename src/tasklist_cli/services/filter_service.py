"""Filter engine for the task list.

Filtering is a pure function over the store's sequence and is re-run from
scratch whenever a criterion changes. The result keeps insertion order.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from tasklist_cli.models import Task, TaskFilters

WEEK_DAYS = 7


def parse_task_date(value: str | None) -> date | None:
    """Parse a YYYY-MM-DD task date into a calendar day, None if absent or malformed."""
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def matches_day_bucket(task: Task, bucket: str, today: date) -> bool:
    """Check a task against a relative day bucket.

    A task with no (or an unparseable) date never matches today, tomorrow or
    week. The week window is inclusive: today through today + 7 days.
    """
    if bucket == "all":
        return True

    task_day = parse_task_date(task.date)
    if task_day is None:
        return False

    if bucket == "today":
        return task_day == today
    if bucket == "tomorrow":
        return task_day == today + timedelta(days=1)
    if bucket == "week":
        return today <= task_day <= today + timedelta(days=WEEK_DAYS)
    return True


def matches(task: Task, filters: TaskFilters, today: date) -> bool:
    """Return True if *task* satisfies every criterion in *filters*."""
    search = filters.search.lower()
    if search and search not in task.title.lower():
        return False

    status = filters.status.lower()
    if status != "all" and task.status.value.lower() != status:
        return False

    if filters.date and filters.date != "all" and task.date != filters.date:
        return False

    if not matches_day_bucket(task, filters.day, today):
        return False

    if filters.priority != "all" and task.priority.value != filters.priority:
        return False

    return True


def filter_tasks(
    tasks: Iterable[Task],
    filters: TaskFilters | None = None,
    today: date | None = None,
) -> list[Task]:
    """Return the tasks matching *filters*, in their original order.

    Args:
        tasks: Task sequence, usually the whole store
        filters: Criteria; None means no filtering
        today: Reference day for day buckets (defaults to the local date now)

    Returns:
        New list of matching tasks
    """
    if filters is None or filters.is_default:
        return list(tasks)
    if today is None:
        today = datetime.now().date()
    return [task for task in tasks if matches(task, filters, today)]
