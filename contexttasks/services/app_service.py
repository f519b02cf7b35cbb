"""
App Service - application shell state and user actions.

Architecture Decision: Presentation-free controller
The UI only renders what this service exposes and forwards user intents to
it. View selection, overlays, the reminder banner and completion feedback
all live here so they can be tested without a display.

Every action writes through the repository and then re-reads the task
list; nothing is cached across actions except that list.
"""

import datetime
import logging
from collections import deque
from enum import Enum
from typing import Callable, Deque, Dict, List, Optional, Sequence

from contexttasks.domain.models import (
    Task, TaskDraft, TaskUpdate, TaskContext, ReminderSettings, ReminderWindow
)
from contexttasks.infra.repository import TaskRepository
from .reminder_service import ReminderService
from .stats_service import StatsService, DashboardSummary, completed_on

logger = logging.getLogger(__name__)

COMPLETION_FEEDBACK_MS = 2000

SORT_BY_DURATION = "duration"
SORT_BY_CREATED = "created"


class AppView(str, Enum):
    CONTEXT_PICKER = "context-picker"
    TASK_LIST = "task-list"
    CREATE_TASK = "create-task"
    DASHBOARD = "dashboard"


# (from view, action) -> to view. Clear-all is allowed from anywhere.
TRANSITIONS: Dict[tuple, AppView] = {
    (AppView.CONTEXT_PICKER, "select_context"): AppView.TASK_LIST,
    (AppView.CONTEXT_PICKER, "open_dashboard"): AppView.DASHBOARD,
    (AppView.TASK_LIST, "add"): AppView.CREATE_TASK,
    (AppView.TASK_LIST, "back"): AppView.CONTEXT_PICKER,
    (AppView.CREATE_TASK, "save"): AppView.TASK_LIST,
    (AppView.CREATE_TASK, "cancel"): AppView.TASK_LIST,
    (AppView.DASHBOARD, "close"): AppView.CONTEXT_PICKER,
}


class InvalidTransitionError(ValueError):
    """Raised when an action is not allowed from the current view"""

    def __init__(self, view: AppView, action: str):
        super().__init__(f"Action '{action}' is not allowed from view '{view.value}'")
        self.view = view
        self.action = action


def format_minutes(total_minutes: int) -> str:
    """65 -> '~1h 5m', 40 -> '~40m'"""
    hours, minutes = divmod(total_minutes, 60)
    if hours > 0:
        return f"~{hours}h {minutes}m"
    return f"~{minutes}m"


class AppService:
    """
    The application shell. Holds view state and dispatches user actions.

    Listeners registered with `subscribe` are called after every state
    change so the UI can re-render.
    """

    def __init__(self, repo: TaskRepository,
                 clock: Callable[[], datetime.datetime] = datetime.datetime.now,
                 default_sort: str = SORT_BY_DURATION,
                 default_duration: int = 15):
        self.repo = repo
        self.clock = clock
        self.reminders = ReminderService(repo)
        self.stats = StatsService(repo)
        self.default_duration = default_duration

        # View state
        self.view: AppView = AppView.CONTEXT_PICKER
        self.selected_context: Optional[str] = None
        self.sort_by = default_sort

        # Overlays, independent of the base view
        self.editing_task: Optional[Task] = None
        self.settings_open = False

        # Display state
        self.tasks: List[Task] = []
        self.show_reminder = False
        self.reminder_dismissed = False  # for this session
        self.completion_message = False

        self._deferred: Deque[Callable[[], None]] = deque()
        self._listeners: List[Callable[[], None]] = []

    # -- Lifecycle ---------------------------------------------------------

    def start(self) -> None:
        """Schedule the initial load. Call `run_deferred` after the first render."""
        self.defer(self._load_tasks)

    def defer(self, fn: Callable[[], None]) -> None:
        """Queue `fn` to run after the current update cycle"""
        self._deferred.append(fn)

    def run_deferred(self) -> None:
        """Run queued updates, including any they queue themselves"""
        while self._deferred:
            fn = self._deferred.popleft()
            fn()

    def has_deferred(self) -> bool:
        return bool(self._deferred)

    def subscribe(self, callback: Callable[[], None]) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self) -> None:
        for callback in self._listeners:
            callback()

    def _load_tasks(self) -> None:
        self.tasks = self.repo.get_tasks()
        self._changed()

    def _reload_tasks(self) -> None:
        self.tasks = self.repo.get_tasks()

    def _changed(self) -> None:
        """Tasks or view changed: re-check the reminder after this cycle"""
        self.defer(self.check_reminder)
        self._notify()

    def _transition(self, action: str) -> None:
        target = TRANSITIONS.get((self.view, action))
        if target is None:
            raise InvalidTransitionError(self.view, action)
        self.view = target

    # -- Navigation --------------------------------------------------------

    def select_context(self, context: str) -> None:
        context = TaskContext(context).value
        self._transition("select_context")
        self.selected_context = context
        self._changed()

    def back_to_contexts(self) -> None:
        self._transition("back")
        self._changed()

    def open_create(self) -> None:
        self._transition("add")
        self._changed()

    def cancel_create(self) -> None:
        self._transition("cancel")
        self._changed()

    def open_dashboard(self) -> None:
        self._transition("open_dashboard")
        self._changed()

    def close_dashboard(self) -> None:
        self._transition("close")
        self._changed()

    def set_sort(self, sort_by: str) -> None:
        if sort_by not in (SORT_BY_DURATION, SORT_BY_CREATED):
            raise ValueError(f"Unknown sort order: {sort_by}")
        self.sort_by = sort_by
        self._notify()

    # -- Tasks -------------------------------------------------------------

    def new_task_id(self, now: datetime.datetime) -> str:
        """Creation time in milliseconds, suffixed if already taken"""
        base = str(int(now.timestamp() * 1000))
        taken = {t.id for t in self.tasks} | {t.id for t in self.repo.get_tasks()}
        candidate = base
        suffix = 1
        while candidate in taken:
            candidate = f"{base}-{suffix}"
            suffix += 1
        return candidate

    def create_task(self, title: str, context: Optional[str] = None,
                    duration: Optional[int] = None, tags: Sequence[str] = (),
                    note: Optional[str] = None) -> Optional[Task]:
        """
        Save a new task from the create form.

        A blank title is rejected: nothing is stored and the form stays open.

        Returns:
            The stored task, or None if the title was blank
        """
        if not title or not title.strip():
            return None
        if self.view != AppView.CREATE_TASK:
            raise InvalidTransitionError(self.view, "save")

        draft = TaskDraft(
            title=title,
            context=context or self.selected_context or TaskContext.QUICK.value,
            duration=duration if duration is not None else self.default_duration,
            tags=list(tags),
            note=note
        )
        now = self.clock()
        task = Task(
            id=self.new_task_id(now),
            created_at=now,
            **draft.model_dump()
        )
        self.repo.add_task(task)
        self._reload_tasks()
        self._transition("save")
        self._changed()
        return task

    def complete_task(self, task_id: str) -> Optional[Task]:
        """Mark a task done and show the completion message"""
        task = self.repo.complete_task(task_id, self.clock())
        self._reload_tasks()
        if task is not None:
            self.completion_message = True
        self._changed()
        return task

    def hide_completion_message(self) -> None:
        self.completion_message = False
        self._notify()

    def start_editing(self, task_id: str) -> None:
        self.editing_task = self.repo.get_task(task_id)
        self._notify()

    def stop_editing(self) -> None:
        self.editing_task = None
        self._notify()

    def save_edit(self, task_id: str, title: str, context: str, duration: int,
                  tags: Sequence[str], note: Optional[str] = None) -> Optional[Task]:
        """
        Apply the edit form. A blank title leaves the task untouched and the
        editor open.
        """
        if not title or not title.strip():
            return None

        update = TaskUpdate(
            title=title,
            context=context,
            duration=duration,
            tags=list(tags),
            note=note
        )
        task = self.repo.update_task(task_id, update)
        self._reload_tasks()
        self.editing_task = None
        self._changed()
        return task

    def delete_task(self, task_id: str) -> None:
        self.repo.delete_task(task_id)
        self._reload_tasks()
        if self.editing_task is not None and self.editing_task.id == task_id:
            self.editing_task = None
        self._changed()

    # -- Derived views -----------------------------------------------------

    def task_counts(self) -> Dict[str, int]:
        """Open tasks per context"""
        counts = {context.value: 0 for context in TaskContext}
        for task in self.tasks:
            if not task.completed:
                counts[task.context] += 1
        return counts

    def open_task_count(self) -> int:
        return sum(1 for t in self.tasks if not t.completed)

    def active_tasks(self) -> List[Task]:
        """Open tasks of the selected context in the chosen order"""
        if self.selected_context is None:
            return []
        tasks = [t for t in self.tasks if not t.completed and t.context == self.selected_context]
        if self.sort_by == SORT_BY_CREATED:
            return sorted(tasks, key=lambda t: t.created_at, reverse=True)
        return sorted(tasks, key=lambda t: t.duration)

    def active_minutes(self) -> int:
        return sum(t.duration for t in self.active_tasks())

    def completed_today(self) -> List[Task]:
        return completed_on(self.tasks, self.clock().date())

    def dashboard_summary(self) -> DashboardSummary:
        return self.stats.summary(self.clock())

    # -- Reminders and settings -------------------------------------------

    def check_reminder(self) -> None:
        """Re-evaluate the reminder banner against stored data"""
        visible = not self.reminder_dismissed and self.reminders.is_due(self.view.value, self.clock())
        if visible != self.show_reminder:
            self.show_reminder = visible
            self._notify()

    def dismiss_reminder(self) -> None:
        self.show_reminder = False
        self.reminder_dismissed = True
        self.reminders.dismiss(self.clock())
        self._notify()

    @property
    def reminder_settings(self) -> ReminderSettings:
        return self.repo.get_reminder_settings()

    def open_settings(self) -> None:
        self.settings_open = True
        self._notify()

    def close_settings(self) -> None:
        self.settings_open = False
        self._notify()

    def save_reminder_settings(self, enabled: bool, window: str) -> ReminderSettings:
        """Store the settings form, keeping dismissal history"""
        settings = self.repo.get_reminder_settings().model_copy(
            update={"enabled": enabled, "window": ReminderWindow(window).value}
        )
        self.repo.save_reminder_settings(settings)
        self._changed()
        return settings

    def clear_all(self) -> None:
        """Delete every record and return to a fresh context picker"""
        self.repo.clear_all()
        self.tasks = []
        self.view = AppView.CONTEXT_PICKER
        self.selected_context = None
        self.editing_task = None
        self.settings_open = False
        self.show_reminder = False
        # The dismissal record is gone, so the banner may show again
        self.reminder_dismissed = False
        self.completion_message = False
        logger.info("Application state reset")
        self._notify()
