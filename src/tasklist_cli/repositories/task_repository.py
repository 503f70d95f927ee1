"""Task persistence on top of the key-value store.

The whole task list lives under a single key as a JSON array of
``{id, title, date, time, status, priority}`` records. There is no schema
version: anything that does not parse is treated as corruption and wiped.
"""

from __future__ import annotations

import contextlib

from pydantic import TypeAdapter, ValidationError

from tasklist_cli.adapters.local_storage import KeyValueStore
from tasklist_cli.models import Task
from tasklist_cli.utils.logger import get_logger

DEFAULT_KEY = "tasks"

_TASK_LIST = TypeAdapter(list[Task])


class TaskRepository:
    """Loads and saves the task list, tolerating corruption and write failures."""

    def __init__(self, storage: KeyValueStore, key: str = DEFAULT_KEY):
        self.storage = storage
        self.key = key

    def load(self, key: str | None = None) -> list[Task]:
        """Read the task list stored under *key*.

        Returns an empty list when nothing is stored. A value that is not a
        JSON array of tasks is removed and an empty list returned. Never
        raises.
        """
        key = key or self.key
        logger = get_logger("storage")
        try:
            raw = self.storage.get_item(key)
            if raw is None:
                return []
            tasks = _TASK_LIST.validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning("discarding unreadable value for '%s': %s", key, e)
            with contextlib.suppress(OSError):
                self.storage.remove_item(key)
            return []

        seen: set[str] = set()
        unique: list[Task] = []
        for task in tasks:
            if task.id in seen:
                logger.warning("dropping duplicate task id %s in '%s'", task.id, key)
                continue
            seen.add(task.id)
            unique.append(task)

        logger.debug("loaded %d task(s) from '%s'", len(unique), key)
        return unique

    def save(self, tasks: list[Task], key: str | None = None) -> bool:
        """Overwrite *key* with the serialised task list.

        Write failures (quota exceeded, unwritable directory) are logged and
        swallowed; the caller's in-memory list stays authoritative.

        Returns:
            True if the value was written
        """
        key = key or self.key
        logger = get_logger("storage")
        try:
            payload = _TASK_LIST.dump_json(list(tasks)).decode("utf-8")
            self.storage.set_item(key, payload)
        except OSError as e:
            logger.error("Save error: %s", e)
            return False
        logger.debug("saved %d task(s) to '%s'", len(tasks), key)
        return True


def get_task_repository() -> TaskRepository:
    """Build a repository from the current configuration."""
    from tasklist_cli.services.config_service import get_config_service

    config = get_config_service().config
    storage = KeyValueStore(
        root=config.storage.data_dir,
        quota_bytes=config.storage.quota_bytes,
    )
    return TaskRepository(storage, key=config.storage.key)


def load_tasks(key: str = DEFAULT_KEY) -> list[Task]:
    """Load tasks under *key* from the configured storage."""
    return get_task_repository().load(key)


def save_tasks(tasks: list[Task], key: str = DEFAULT_KEY) -> bool:
    """Save tasks under *key* to the configured storage."""
    return get_task_repository().save(tasks, key)
