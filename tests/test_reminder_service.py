"""
Tests for the reminder eligibility rule and dismissal.
"""

from datetime import datetime, timedelta

import pytest

from contexttasks.domain.models import ReminderSettings
from contexttasks.services.reminder_service import (
    ReminderService, should_show_reminder, window_contains_hour, cooldown_elapsed
)

PICKER = "context-picker"


@pytest.fixture
def open_tasks(make_task):
    return [make_task("open")]


def at_hour(hour: int) -> datetime:
    return datetime(2024, 1, 5, hour, 15)


class TestPredicate:

    def test_morning_window_at_eight(self, open_tasks):
        settings = ReminderSettings(enabled=True, window="morning")
        assert should_show_reminder(at_hour(8), settings, open_tasks, PICKER) is True

    def test_morning_window_at_two_pm(self, open_tasks):
        settings = ReminderSettings(enabled=True, window="morning")
        assert should_show_reminder(at_hour(14), settings, open_tasks, PICKER) is False

    def test_recent_dismissal_blocks_even_in_window(self, open_tasks):
        now = at_hour(8)
        settings = ReminderSettings(enabled=True, window="morning", last_dismissed=now - timedelta(hours=1))
        assert should_show_reminder(now, settings, open_tasks, PICKER) is False

    def test_dismissal_twelve_hours_ago_allows(self, open_tasks):
        now = at_hour(20)
        settings = ReminderSettings(window="anytime", last_dismissed=now - timedelta(hours=12))
        assert should_show_reminder(now, settings, open_tasks, PICKER) is True

    def test_disabled(self, open_tasks):
        settings = ReminderSettings(enabled=False)
        assert should_show_reminder(at_hour(10), settings, open_tasks, PICKER) is False

    @pytest.mark.parametrize("view", ["task-list", "create-task", "dashboard"])
    def test_only_on_context_picker(self, open_tasks, view):
        assert should_show_reminder(at_hour(10), ReminderSettings(), open_tasks, view) is False

    def test_needs_an_open_task(self, make_task):
        done = [make_task(completed=True, completed_at=at_hour(7))]
        assert should_show_reminder(at_hour(10), ReminderSettings(), done, PICKER) is False
        assert should_show_reminder(at_hour(10), ReminderSettings(), [], PICKER) is False


@pytest.mark.parametrize("window,hour,expected", [
    ("morning", 5, False),
    ("morning", 6, True),
    ("morning", 11, True),
    ("morning", 12, False),
    ("afternoon", 12, True),
    ("afternoon", 17, True),
    ("afternoon", 18, False),
    ("evening", 18, True),
    ("evening", 23, True),
    ("evening", 0, False),
    ("anytime", 0, True),
    ("anytime", 23, True),
])
def test_window_bounds(window, hour, expected):
    assert window_contains_hour(window, hour) is expected


def test_cooldown_elapsed():
    now = datetime(2024, 1, 5, 12, 0)
    assert cooldown_elapsed(None, now)
    assert not cooldown_elapsed(now - timedelta(hours=11, minutes=59), now)
    assert cooldown_elapsed(now - timedelta(hours=12), now)


class TestReminderService:

    def test_is_due_uses_stored_data(self, repo, make_task):
        service = ReminderService(repo)
        assert service.is_due(PICKER, at_hour(9)) is False
        repo.add_task(make_task())
        assert service.is_due(PICKER, at_hour(9)) is True

    def test_dismiss_keeps_enabled_and_window(self, repo, make_task):
        repo.add_task(make_task())
        repo.save_reminder_settings(ReminderSettings(enabled=True, window="morning"))
        service = ReminderService(repo)

        now = at_hour(8)
        service.dismiss(now)

        settings = repo.get_reminder_settings()
        assert settings.enabled is True
        assert settings.window == "morning"
        assert settings.last_dismissed == now
        assert service.is_due(PICKER, now + timedelta(hours=1)) is False
        assert service.is_due(PICKER, now + timedelta(days=1)) is True
