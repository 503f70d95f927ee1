"""Task store - the in-memory task list and its mutation operations.

The store is the single source of truth while the app runs. Every mutation
goes through one of its methods, which then:

1. persists the whole list through the repository,
2. keeps the reminder schedule in step,
3. notifies subscribers so the UI can re-render.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from pydantic import ValidationError

from tasklist_cli.exceptions import TaskValidationError
from tasklist_cli.models import Task, TaskCreate, TaskStatus, TaskUpdate
from tasklist_cli.repositories.task_repository import TaskRepository
from tasklist_cli.services.reminder_service import ReminderScheduler
from tasklist_cli.utils.id_utils import generate_task_id
from tasklist_cli.utils.logger import get_logger

Listener = Callable[[], None]


def _validate(model: type[TaskCreate], **fields: object) -> TaskCreate:
    try:
        return model(**fields)
    except ValidationError as e:
        raise TaskValidationError() from e


class TaskStore:
    """Ordered collection of tasks owned by the running session.

    Args:
        repository: Where the list is mirrored after every mutation
        tasks: Initial tasks, in display order
        scheduler: Optional reminder scheduler kept in step with the list
    """

    def __init__(
        self,
        repository: TaskRepository,
        tasks: list[Task] | None = None,
        scheduler: ReminderScheduler | None = None,
    ):
        self.repository = repository
        self.scheduler = scheduler
        self._tasks: list[Task] = list(tasks or [])
        self._listeners: list[Listener] = []
        self.logger = get_logger("store")

    @classmethod
    def load(
        cls,
        repository: TaskRepository,
        scheduler: ReminderScheduler | None = None,
    ) -> TaskStore:
        """Build a store from persisted state and seed reminders for it."""
        store = cls(repository, repository.load(), scheduler)
        if scheduler is not None:
            armed = scheduler.schedule_all(store._tasks)
            store.logger.info("armed %d reminder(s) for %d task(s)", armed, len(store))
        return store

    # -------------------- reading --------------------

    @property
    def tasks(self) -> list[Task]:
        """Copy of the task list in insertion order."""
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        """Return the task with *task_id*, or None."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    # -------------------- change notification --------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* after every mutation; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self) -> None:
        self.repository.save(self._tasks)
        for listener in list(self._listeners):
            listener()

    # -------------------- mutations --------------------

    def add(
        self,
        title: str | None,
        date: str | None = None,
        time: str | None = None,
        priority: str | None = None,
    ) -> Task:
        """Append a new pending task.

        Raises:
            TaskValidationError: If title or priority is empty or invalid
        """
        data = _validate(TaskCreate, title=title, date=date, time=time, priority=priority)
        task = Task(
            id=generate_task_id(),
            title=data.title,
            date=data.date,
            time=data.time,
            status=TaskStatus.PENDING,
            priority=data.priority,
        )
        self._tasks.append(task)
        self.logger.info("added task %s", task.id)
        self.repository.save(self._tasks)
        if self.scheduler is not None:
            self.scheduler.schedule(task)
        for listener in list(self._listeners):
            listener()
        return task

    def toggle_status(self, task_id: str) -> Task | None:
        """Flip a task between Pending and Completed; unknown ids are ignored."""
        task = self.get(task_id)
        if task is None:
            return None
        task.status = task.status.toggled()
        self.logger.info("task %s is now %s", task_id, task.status.value)
        self._commit()
        return task

    def remove(self, task_id: str) -> bool:
        """Remove the task with *task_id*.

        Removing an id that is not present is a no-op.

        Returns:
            True if a task was removed
        """
        remaining = [task for task in self._tasks if task.id != task_id]
        if len(remaining) == len(self._tasks):
            return False
        self._tasks = remaining
        if self.scheduler is not None:
            self.scheduler.cancel(task_id)
        self.logger.info("removed task %s", task_id)
        self._commit()
        return True

    def edit(
        self,
        task_id: str,
        title: str | None,
        date: str | None,
        time: str | None,
        priority: str | None,
    ) -> Task | None:
        """Overwrite the four editable fields of a task in place.

        Edits are held to the same rules as new tasks: a blank title or a
        missing priority is rejected and the task is left unchanged.

        Raises:
            TaskValidationError: If title or priority is empty or invalid
        """
        task = self.get(task_id)
        if task is None:
            return None
        data = _validate(TaskUpdate, title=title, date=date, time=time, priority=priority)
        task.title = data.title
        task.date = data.date
        task.time = data.time
        task.priority = data.priority
        self.logger.info("edited task %s", task_id)
        if self.scheduler is not None:
            self.scheduler.schedule(task)
        self._commit()
        return task


def get_task_store(scheduler: ReminderScheduler | None = None) -> TaskStore:
    """Load the task store from the configured storage."""
    from tasklist_cli.repositories.task_repository import get_task_repository

    return TaskStore.load(get_task_repository(), scheduler)
