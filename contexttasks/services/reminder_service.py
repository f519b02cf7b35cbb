"""
Reminder Service - decides when to nudge the user about open tasks.

The decision itself is a pure function of time, settings, tasks and the
visible view, so it can be tested without a clock or a store.
"""

import datetime
from typing import Dict, Iterable, Optional, Tuple

from contexttasks.domain.models import ReminderSettings, ReminderWindow, Task
from contexttasks.domain.stats import to_local
from contexttasks.infra.repository import TaskRepository

# Hour ranges are [start, end)
WINDOW_HOURS: Dict[str, Tuple[int, int]] = {
    ReminderWindow.MORNING.value: (6, 12),
    ReminderWindow.AFTERNOON.value: (12, 18),
    ReminderWindow.EVENING.value: (18, 24),
    ReminderWindow.ANYTIME.value: (0, 24),
}

DISMISS_COOLDOWN = datetime.timedelta(hours=12)

# Reminders only appear on the top-level context picker
REMINDER_VIEW = "context-picker"


def window_contains_hour(window: str, hour: int) -> bool:
    """Check whether a local hour (0-23) falls inside a reminder window"""
    start, end = WINDOW_HOURS[window]
    return start <= hour < end


def cooldown_elapsed(last_dismissed: Optional[datetime.datetime],
                     now: datetime.datetime) -> bool:
    """True if the banner was never dismissed or the cooldown has passed"""
    if last_dismissed is None:
        return True
    return to_local(now) - to_local(last_dismissed) >= DISMISS_COOLDOWN


def should_show_reminder(now: datetime.datetime,
                         settings: ReminderSettings,
                         tasks: Iterable[Task],
                         view: str) -> bool:
    """
    Decide whether the reminder banner should be shown.

    All must hold:
    - reminders are enabled
    - the context picker is the visible view
    - at least one task is still open
    - the current local hour is inside the configured window
    - the banner was never dismissed, or at least 12 hours ago

    Args:
        now: Current wall-clock time
        settings: Reminder settings
        tasks: All tasks
        view: Active view name

    Returns:
        True if the reminder should be shown
    """
    if not settings.enabled or view != REMINDER_VIEW:
        return False

    if not any(not task.completed for task in tasks):
        return False

    if not window_contains_hour(settings.window, to_local(now).hour):
        return False

    return cooldown_elapsed(settings.last_dismissed, now)


class ReminderService:
    """
    Reads reminder state from the repository and records dismissals.
    """

    def __init__(self, repo: TaskRepository):
        self.repo = repo

    def is_due(self, view: str, now: datetime.datetime) -> bool:
        """Evaluate the reminder rule against the currently stored data"""
        return should_show_reminder(
            now,
            self.repo.get_reminder_settings(),
            self.repo.get_tasks(),
            view
        )

    def dismiss(self, now: datetime.datetime) -> ReminderSettings:
        """Remember the dismissal time. Enabled flag and window stay as they are."""
        settings = self.repo.get_reminder_settings()
        settings = settings.model_copy(update={"last_dismissed": now})
        self.repo.save_reminder_settings(settings)
        return settings
