"""Inline edit state machine for a task row.

A row is either showing the task (DISPLAY) or an editable form (EDITING).
Saving commits through the store, which persists and re-renders; cancelling
just re-renders from the unchanged store.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from tasklist_cli.models import PRIORITY_CHOICES, Task
from tasklist_cli.services.task_store import TaskStore


class EditState(str, Enum):
    DISPLAY = "display"
    EDITING = "editing"


@dataclass
class EditDraft:
    """Form values while a row is being edited."""

    task_id: str
    title: str
    date: str
    time: str
    priority: str
    priority_options: tuple[str, ...] = PRIORITY_CHOICES

    @classmethod
    def from_task(cls, task: Task) -> EditDraft:
        return cls(
            task_id=task.id,
            title=task.title,
            date=task.date or "",
            time=task.time or "",
            priority=task.priority.value,
        )


class EditController:
    """Drives one row between DISPLAY and EDITING.

    Args:
        store: Store receiving committed edits
        rerender: Called after cancel to rebuild the list; saves re-render
            through the store's own listeners
    """

    def __init__(self, store: TaskStore, rerender: Callable[[], None] | None = None):
        self.store = store
        self.rerender = rerender
        self.state = EditState.DISPLAY
        self.draft: EditDraft | None = None

    @property
    def editing(self) -> bool:
        return self.state is EditState.EDITING

    def begin(self, task: Task) -> EditDraft:
        """Enter EDITING with a draft pre-filled from *task*."""
        self.draft = EditDraft.from_task(task)
        self.state = EditState.EDITING
        return self.draft

    def save(self, draft: EditDraft | None = None) -> Task | None:
        """Commit *draft* (or the current draft) and return to DISPLAY.

        On a validation error the controller stays in EDITING so the form
        can be corrected.

        Raises:
            RuntimeError: If no edit is in progress
            TaskValidationError: If the title or priority is empty
        """
        if not self.editing:
            raise RuntimeError("save() called while not editing")
        draft = draft or self.draft
        assert draft is not None
        task = self.store.edit(
            draft.task_id,
            title=draft.title,
            date=draft.date,
            time=draft.time,
            priority=draft.priority,
        )
        self._reset()
        return task

    def cancel(self) -> None:
        """Discard the draft and return to DISPLAY.

        Raises:
            RuntimeError: If no edit is in progress
        """
        if not self.editing:
            raise RuntimeError("cancel() called while not editing")
        self._reset()
        if self.rerender is not None:
            self.rerender()

    def discard(self) -> None:
        """Return to DISPLAY without re-rendering; no-op when not editing."""
        self._reset()

    def _reset(self) -> None:
        self.draft = None
        self.state = EditState.DISPLAY
