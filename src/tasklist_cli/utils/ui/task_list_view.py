"""Textual TUI for the task list.

The screen has three parts: the add form, the filter bar and the task list.
The list is rebuilt from scratch after every store mutation and every
filter change, so rows never hold state of their own.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.timer import Timer
from textual.widgets import Button, Footer, Header, Input, Select, Static

from tasklist_cli.exceptions import TaskValidationError
from tasklist_cli.models import PRIORITY_CHOICES, Task, TaskFilters
from tasklist_cli.services.config_service import get_config_service
from tasklist_cli.services.filter_service import filter_tasks
from tasklist_cli.services.notification_service import (
    NotificationPermission,
    PermissionCallback,
    load_permission,
    request_permission_once,
)
from tasklist_cli.services.reminder_service import ReminderScheduler, TimerHandle
from tasklist_cli.services.task_store import TaskStore, get_task_store
from tasklist_cli.utils.logger import get_logger
from tasklist_cli.utils.ui.edit_controller import EditController, EditDraft
from tasklist_cli.utils.ui.render import TaskRowView, render_task_list

PRIORITY_OPTIONS = [(p, p) for p in PRIORITY_CHOICES]
STATUS_OPTIONS = [("All", "all"), ("Pending", "pending"), ("Completed", "completed")]
DAY_OPTIONS = [
    ("Any day", "all"),
    ("Today", "today"),
    ("Tomorrow", "tomorrow"),
    ("This week", "week"),
]
PRIORITY_FILTER_OPTIONS = [("All priorities", "all"), *PRIORITY_OPTIONS]

FILTER_INPUTS = ("search-bar", "date-filter")
FILTER_SELECTS = ("status-filter", "day-filter", "priority-filter")


def _select_value(select: Select) -> str | None:
    """Return the selected value, None when nothing is picked."""
    if select.is_blank():
        return None
    return str(select.value)


class AlertScreen(ModalScreen[None]):
    """Blocking message box, dismissed with OK."""

    BINDINGS = [("escape", "dismiss_alert", "Dismiss")]

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="alert-dialog", classes="dialog"):
            yield Static(self.message, id="alert-message")
            yield Button("OK", variant="primary", id="alert-ok")

    def on_mount(self) -> None:
        self.query_one("#alert-ok", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(None)

    def action_dismiss_alert(self) -> None:
        self.dismiss(None)


class PermissionScreen(ModalScreen[bool]):
    """Asks whether reminders may be shown as notifications."""

    def compose(self) -> ComposeResult:
        with Vertical(id="permission-dialog", classes="dialog"):
            yield Static("Allow reminder notifications?")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Allow", variant="success", id="permission-allow")
                yield Button("Block", variant="error", id="permission-block")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "permission-allow")


class TextualNotifier:
    """Shows reminders inside a running Textual app.

    Notifications become toasts; alerts are modal and keep the rest of the
    screen blocked until dismissed.
    """

    def __init__(
        self,
        app: App,
        permission: NotificationPermission = NotificationPermission.DEFAULT,
    ):
        self.app = app
        self._permission = permission

    @property
    def permission(self) -> NotificationPermission:
        return self._permission

    @permission.setter
    def permission(self, value: NotificationPermission) -> None:
        self._permission = value

    def request_permission(self, callback: PermissionCallback | None = None) -> None:
        def decided(allowed: bool | None) -> None:
            self._permission = (
                NotificationPermission.GRANTED if allowed else NotificationPermission.DENIED
            )
            if callback is not None:
                callback(self._permission)

        self.app.push_screen(PermissionScreen(), decided)

    def notify(self, title: str, body: str) -> None:
        self.app.notify(body, title=title, timeout=10)

    def alert(self, body: str) -> None:
        self.app.push_screen(AlertScreen(body))


class _TextualTimer:
    def __init__(self, timer: Timer):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.stop()


class TaskRow(Vertical):
    """One task: display mode, or the inline edit form."""

    app: TaskListApp

    def __init__(self, task: Task, row: TaskRowView, draft: EditDraft | None = None):
        super().__init__(classes="task-row")
        self.task_model = task
        self.row = row
        self.draft = draft
        if row.completed:
            self.add_class("completed")

    def compose(self) -> ComposeResult:
        if self.draft is not None:
            yield from self._compose_editor(self.draft)
            return

        with Horizontal(classes="task-info"):
            with Vertical(classes="task-text"):
                yield Static(self.row.title, classes="task-title", markup=False)
                yield Static(self.row.subtitle, classes="task-subtitle", markup=False)
            with Horizontal(classes="task-actions"):
                yield Button(self.row.toggle_label, classes="toggle-btn", variant="success")
                yield Button("Edit", classes="edit-btn", variant="primary")
                yield Button("Delete", classes="delete-btn", variant="error")

    def _compose_editor(self, draft: EditDraft) -> ComposeResult:
        with Horizontal(classes="task-editor"):
            yield Input(draft.title, placeholder="Title", classes="edit-title")
            yield Input(draft.date, placeholder="YYYY-MM-DD", classes="edit-date")
            yield Input(draft.time, placeholder="HH:MM", classes="edit-time")
            yield Select(
                [(p, p) for p in draft.priority_options],
                value=draft.priority,
                allow_blank=False,
                classes="edit-priority",
            )
            yield Button("Save", classes="save-btn", variant="success")
            yield Button("Cancel", classes="cancel-btn", variant="error")

    def read_draft(self) -> EditDraft:
        """Collect the edit form values into a draft."""
        assert self.draft is not None
        return EditDraft(
            task_id=self.draft.task_id,
            title=self.query_one(".edit-title", Input).value,
            date=self.query_one(".edit-date", Input).value,
            time=self.query_one(".edit-time", Input).value,
            priority=_select_value(self.query_one(".edit-priority", Select)) or "",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        classes = event.button.classes
        if "toggle-btn" in classes:
            self.app.toggle_task(self.task_model.id)
        elif "edit-btn" in classes:
            self.app.begin_edit(self.task_model)
        elif "delete-btn" in classes:
            self.app.delete_task(self.task_model.id)
        elif "save-btn" in classes:
            self.app.save_edit(self.read_draft())
        elif "cancel-btn" in classes:
            self.app.cancel_edit()


class TaskListApp(App):
    """A Textual app for adding, filtering and editing tasks."""

    TITLE = "Tasklist"
    CSS = """
    #add-form, #filter-bar {
        height: auto;
        padding: 0 1;
    }

    #add-form Input, #filter-bar Input {
        width: 1fr;
    }

    #add-form Select, #filter-bar Select {
        width: 20;
    }

    #task-list {
        padding: 0 1;
    }

    .task-row {
        height: auto;
        border-bottom: solid $panel;
    }

    .task-info, .task-editor, .task-actions {
        height: auto;
    }

    .task-text {
        width: 1fr;
        height: auto;
    }

    .task-actions {
        width: auto;
    }

    .task-row.completed .task-title {
        text-style: strike;
        color: $text-muted;
    }

    .task-subtitle, .no-tasks {
        color: $text-muted;
    }

    .task-editor Input {
        width: 1fr;
    }

    AlertScreen, PermissionScreen {
        align: center middle;
    }

    .dialog {
        width: 50;
        height: auto;
        padding: 1 2;
        border: thick $primary;
        background: $surface;
    }

    .dialog-buttons {
        height: auto;
    }
    """
    BINDINGS = [
        ("ctrl+l", "clear_filters", "Clear filters"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        store: TaskStore | None = None,
        permission: NotificationPermission | None = None,
        today: Callable[[], date] | None = None,
    ):
        super().__init__()
        self.store = store
        self.filters = TaskFilters()
        self.notifier = TextualNotifier(self, permission or NotificationPermission.DEFAULT)
        self._load_permission = permission is None
        self._today = today or (lambda: datetime.now().date())
        self.edit_controller: EditController | None = None
        self.logger = get_logger("ui")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="add-form"):
            yield Input(placeholder="Task title", id="task-title")
            yield Input(placeholder="YYYY-MM-DD", id="task-date")
            yield Input(placeholder="HH:MM", id="task-time")
            yield Select(PRIORITY_OPTIONS, prompt="Priority", id="task-priority")
            yield Button("Add Task", variant="primary", id="add-task-btn")
        with Horizontal(id="filter-bar"):
            yield Input(placeholder="Search tasks...", id="search-bar")
            yield Select(STATUS_OPTIONS, value="all", allow_blank=False, id="status-filter")
            yield Input(placeholder="Date (YYYY-MM-DD)", id="date-filter")
            yield Select(DAY_OPTIONS, value="all", allow_blank=False, id="day-filter")
            yield Select(
                PRIORITY_FILTER_OPTIONS, value="all", allow_blank=False, id="priority-filter"
            )
            yield Button("Clear", id="clear-filters-btn")
        yield VerticalScroll(id="task-list")
        yield Footer()

    def on_mount(self) -> None:
        """Load tasks, arm reminders and ask for notification permission."""
        if self._load_permission:
            self.notifier.permission = load_permission()

        if self.store is None:
            reminders = get_config_service().config.reminders
            scheduler = ReminderScheduler(
                self.notifier,
                timer_factory=self.start_timer,
                lead=timedelta(minutes=reminders.lead_minutes),
                enabled=reminders.enabled,
            )
            self.store = get_task_store(scheduler)

        self.edit_controller = EditController(self.store, rerender=self.refresh_list)
        self.store.subscribe(self.handle_store_change)
        self.refresh_list()
        request_permission_once(self.notifier)

    def on_unmount(self) -> None:
        if self.store is not None and self.store.scheduler is not None:
            self.store.scheduler.cancel_all()

    def start_timer(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Timer factory for the reminder scheduler, run on the app's loop."""
        return _TextualTimer(self.set_timer(delay, callback))

    # -------------------- rendering --------------------

    @property
    def visible_tasks(self) -> list[Task]:
        assert self.store is not None
        return filter_tasks(self.store.tasks, self.filters, self._today())

    def handle_store_change(self) -> None:
        """Re-render after a store mutation, closing any open editor."""
        self.close_editor()
        self.refresh_list()

    def close_editor(self) -> None:
        """Drop an unsaved inline edit; the next render shows every row plainly."""
        if self.edit_controller is not None:
            self.edit_controller.discard()

    def refresh_list(self) -> None:
        """Rebuild the task list from the store and the current filters."""
        container = self.query_one("#task-list", VerticalScroll)
        container.remove_children()

        tasks = self.visible_tasks
        view = render_task_list(tasks)
        if view.empty:
            container.mount(Static(view.placeholder or "", classes="no-tasks"))
            return

        editing = self.edit_controller.draft if self.edit_controller else None
        container.mount_all(
            TaskRow(
                task,
                row,
                draft=editing if editing and editing.task_id == task.id else None,
            )
            for task, row in zip(tasks, view.rows)
        )

    def show_alert(self, message: str) -> None:
        self.push_screen(AlertScreen(message))

    # -------------------- add form --------------------

    def add_task(self) -> None:
        """Create a task from the add form, then clear the form."""
        assert self.store is not None
        title_input = self.query_one("#task-title", Input)
        date_input = self.query_one("#task-date", Input)
        time_input = self.query_one("#task-time", Input)
        priority_select = self.query_one("#task-priority", Select)

        try:
            self.store.add(
                title_input.value,
                date=date_input.value,
                time=time_input.value,
                priority=_select_value(priority_select),
            )
        except TaskValidationError as e:
            self.show_alert(str(e))
            return

        title_input.value = ""
        date_input.value = ""
        time_input.value = ""
        priority_select.clear()

    # -------------------- row actions --------------------

    def toggle_task(self, task_id: str) -> None:
        assert self.store is not None
        self.store.toggle_status(task_id)

    def delete_task(self, task_id: str) -> None:
        assert self.store is not None
        self.store.remove(task_id)

    def begin_edit(self, task: Task) -> None:
        assert self.edit_controller is not None
        self.edit_controller.begin(task)
        self.refresh_list()

    def save_edit(self, draft: EditDraft) -> None:
        assert self.edit_controller is not None
        try:
            self.edit_controller.save(draft)
        except TaskValidationError as e:
            self.show_alert(str(e))
            return
        self.refresh_list()

    def cancel_edit(self) -> None:
        assert self.edit_controller is not None
        if self.edit_controller.editing:
            self.edit_controller.cancel()

    # -------------------- filters --------------------

    def read_filters(self) -> TaskFilters:
        """Collect the filter bar values."""
        return TaskFilters(
            search=self.query_one("#search-bar", Input).value,
            status=_select_value(self.query_one("#status-filter", Select)),
            date=self.query_one("#date-filter", Input).value.strip(),
            day=_select_value(self.query_one("#day-filter", Select)) or "all",
            priority=_select_value(self.query_one("#priority-filter", Select)),
        )

    def apply_filters(self) -> None:
        if self.store is None:
            return
        self.close_editor()
        self.filters = self.read_filters()
        self.refresh_list()

    def action_clear_filters(self) -> None:
        """Reset every filter and show the whole list."""
        with self.prevent(Input.Changed, Select.Changed):
            self.query_one("#search-bar", Input).value = ""
            self.query_one("#status-filter", Select).value = "all"
            self.query_one("#date-filter", Input).value = ""
            self.query_one("#day-filter", Select).value = "all"
            self.query_one("#priority-filter", Select).value = "all"
        self.close_editor()
        self.filters = TaskFilters.cleared()
        self.refresh_list()

    # -------------------- events --------------------

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-task-btn":
            self.add_task()
        elif event.button.id == "clear-filters-btn":
            self.action_clear_filters()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id in ("task-title", "task-date", "task-time"):
            self.add_task()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id in FILTER_INPUTS:
            self.apply_filters()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id in FILTER_SELECTS:
            self.apply_filters()
