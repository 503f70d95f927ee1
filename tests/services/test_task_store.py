"""Tests for the task store mutations."""

from unittest.mock import MagicMock, patch

import pytest

from tasklist_cli.exceptions import TaskValidationError
from tasklist_cli.models import Priority, TaskStatus
from tasklist_cli.services.reminder_service import ReminderScheduler
from tasklist_cli.services.task_store import TaskStore, get_task_store


@pytest.fixture()
def store(repository) -> TaskStore:
    return TaskStore(repository)


@pytest.fixture()
def scheduler(notifier, timers, clock) -> ReminderScheduler:
    return ReminderScheduler(notifier, timer_factory=timers, clock=clock)


class TestAdd:
    def test_add_appends_pending_task_and_persists(self, store, repository):
        task = store.add("Pay rent", date="2025-04-01", time="09:00", priority="high")

        assert task.status is TaskStatus.PENDING
        assert task.priority is Priority.HIGH
        assert store.tasks == [task]
        assert repository.load() == [task]

    def test_add_keeps_insertion_order(self, store):
        first = store.add("First", priority="low")
        second = store.add("Second", priority="low")
        assert [t.id for t in store] == [first.id, second.id]

    def test_add_trims_title(self, store):
        assert store.add("  Buy milk ", priority="low").title == "Buy milk"

    def test_ids_are_unique(self, store):
        ids = {store.add(f"Task {i}", priority="low").id for i in range(20)}
        assert len(ids) == 20

    @pytest.mark.parametrize(
        ("title", "priority"),
        [("", "low"), ("   ", "high"), ("Pay rent", ""), ("Pay rent", None)],
    )
    def test_add_rejects_missing_title_or_priority(self, store, repository, title, priority):
        with pytest.raises(TaskValidationError, match="Enter task title and priority!"):
            store.add(title, priority=priority)
        assert len(store) == 0
        assert repository.load() == []

    def test_add_notifies_listeners(self, store):
        listener = MagicMock()
        store.subscribe(listener)
        store.add("x", priority="low")
        listener.assert_called_once_with()

    def test_add_schedules_reminder(self, repository, scheduler, timers):
        store = TaskStore(repository, scheduler=scheduler)
        task = store.add("Pay rent", date="2025-04-01", time="09:00", priority="high")
        assert scheduler.pending() == [task.id]
        assert len(timers.active) == 1


class TestToggle:
    def test_toggle_flips_and_persists(self, store, repository):
        task = store.add("x", priority="low")

        store.toggle_status(task.id)
        assert store.get(task.id).status is TaskStatus.COMPLETED
        assert repository.load()[0].status is TaskStatus.COMPLETED

        store.toggle_status(task.id)
        assert store.get(task.id).status is TaskStatus.PENDING

    def test_toggle_unknown_id_is_noop(self, store):
        listener = MagicMock()
        store.subscribe(listener)
        assert store.toggle_status("missing") is None
        listener.assert_not_called()


class TestRemove:
    def test_remove_deletes_and_persists(self, store, repository):
        keep = store.add("keep", priority="low")
        drop = store.add("drop", priority="low")

        assert store.remove(drop.id) is True
        assert [t.id for t in store] == [keep.id]
        assert [t.id for t in repository.load()] == [keep.id]

    def test_remove_missing_is_noop(self, store):
        store.add("keep", priority="low")
        assert store.remove("missing") is False
        assert len(store) == 1

    def test_remove_cancels_reminder(self, repository, scheduler, timers):
        store = TaskStore(repository, scheduler=scheduler)
        task = store.add("Pay rent", date="2025-04-01", time="09:00", priority="high")

        store.remove(task.id)
        assert scheduler.pending() == []
        assert timers.active == []


class TestEdit:
    def test_edit_overwrites_fields_in_place(self, store, repository):
        task = store.add("Old", date="2025-04-01", time="09:00", priority="low")

        edited = store.edit(task.id, "  New  ", "", "", "high")

        assert edited is store.get(task.id)
        assert (edited.title, edited.date, edited.time) == ("New", None, None)
        assert edited.priority is Priority.HIGH
        assert edited.status is TaskStatus.PENDING
        assert repository.load()[0].title == "New"

    def test_edit_keeps_position_and_id(self, store):
        a = store.add("a", priority="low")
        b = store.add("b", priority="low")
        store.edit(a.id, "a2", None, None, "low")
        assert [t.id for t in store] == [a.id, b.id]

    def test_edit_rejects_blank_title(self, store):
        task = store.add("Keep me", priority="low")
        with pytest.raises(TaskValidationError):
            store.edit(task.id, "  ", None, None, "low")
        assert store.get(task.id).title == "Keep me"

    def test_edit_unknown_id(self, store):
        assert store.edit("missing", "x", None, None, "low") is None

    def test_edit_reschedules_reminder(self, repository, scheduler, timers):
        store = TaskStore(repository, scheduler=scheduler)
        task = store.add("Pay rent", date="2025-04-01", time="09:00", priority="high")
        old_timer = timers.active[0]

        store.edit(task.id, "Pay rent", "2025-04-01", "10:00", "high")

        assert old_timer.cancelled
        assert len(timers.active) == 1
        assert timers.active[0].delay == pytest.approx(105 * 60)

    def test_edit_clearing_time_cancels_reminder(self, repository, scheduler):
        store = TaskStore(repository, scheduler=scheduler)
        task = store.add("Pay rent", date="2025-04-01", time="09:00", priority="high")
        store.edit(task.id, "Pay rent", "2025-04-01", "", "high")
        assert scheduler.pending() == []


class TestLoad:
    def test_load_restores_and_schedules(self, repository, scheduler, make_task):
        repository.save(
            [
                make_task("a", date="2025-04-01", time="09:00"),
                make_task("b"),
            ]
        )
        store = TaskStore.load(repository, scheduler)
        assert [t.id for t in store] == ["a", "b"]
        assert scheduler.pending() == ["a"]

    def test_tasks_property_is_a_copy(self, store):
        store.add("x", priority="low")
        store.tasks.clear()
        assert len(store) == 1

    def test_unsubscribe(self, store):
        listener = MagicMock()
        unsubscribe = store.subscribe(listener)
        unsubscribe()
        store.add("x", priority="low")
        listener.assert_not_called()

    def test_save_failure_keeps_memory_state(self, store):
        with patch.object(store.repository.storage, "set_item", side_effect=OSError("full")):
            task = store.add("x", priority="low")
        assert store.get(task.id) is task

    def test_get_task_store_uses_configured_storage(self, tmp_config):
        store = get_task_store()
        store.add("Persisted", priority="low")
        assert [t.title for t in get_task_store()] == ["Persisted"]
