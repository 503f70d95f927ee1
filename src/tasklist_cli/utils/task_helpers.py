"""Task helper utilities."""

from __future__ import annotations

from tasklist_cli.exceptions import AmbiguousTaskIdError, TaskNotFoundError
from tasklist_cli.services.task_store import TaskStore


def find_shortest_unique_suffix(task_ids: list[str], target_id: str) -> str:
    """
    Find the shortest suffix of target_id that uniquely identifies it.

    Args:
        task_ids: List of all task IDs
        target_id: The task ID to find a unique suffix for

    Returns:
        The shortest unique suffix
    """
    # Try increasingly longer suffixes from the end
    for length in range(1, len(target_id) + 1):
        suffix = target_id[-length:]
        matches = [tid for tid in task_ids if tid.endswith(suffix)]
        if len(matches) == 1:
            return suffix
    return target_id  # Fallback to full ID


def resolve_task_id(store: TaskStore, task_id_or_suffix: str) -> str:
    """
    Resolve a task ID or suffix to a full task ID.

    Args:
        store: The task store to search
        task_id_or_suffix: Full task ID or suffix to resolve

    Returns:
        The full task ID

    Raises:
        TaskNotFoundError: If no matching task is found
        AmbiguousTaskIdError: If multiple tasks end with the suffix
    """
    wanted = task_id_or_suffix.strip()
    if wanted and store.get(wanted) is not None:
        return wanted

    tasks = store.tasks
    matching_tasks = [task for task in tasks if wanted and task.id.endswith(wanted)]

    if not matching_tasks:
        raise TaskNotFoundError(f"No task found with ID or suffix '{task_id_or_suffix}'")

    if len(matching_tasks) > 1:
        all_task_ids = [t.id for t in tasks]
        suggestions = []
        for task in matching_tasks:
            unique_suffix = find_shortest_unique_suffix(all_task_ids, task.id)
            title = task.title
            # Truncate long titles
            if len(title) > 70:
                title = title[:67] + "..."
            suggestions.append(f"  [{unique_suffix}] {title}")

        raise AmbiguousTaskIdError(
            f"Multiple tasks match suffix '{task_id_or_suffix}':\n"
            + "\n".join(suggestions)
            + "\n\nUse the suffix in brackets to select a specific task."
        )

    return matching_tasks[0].id
