"""
Tests for the domain models.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from contexttasks.domain.models import (
    Task, TaskDraft, TaskUpdate, ReminderSettings, CompletionStats, UserPreferences
)


class TestTask:

    def test_defaults(self):
        task = Task(id="1", title="Call mum", context="low-energy")
        assert task.duration == 15
        assert task.tags == []
        assert task.completed is False
        assert task.completed_at is None

    def test_tags_are_unique_and_non_blank(self):
        task = Task(id="1", title="x", context="quick", tags=["a", " ", "b", "a", " b "])
        assert task.tags == ["a", "b"]

    def test_open_task_drops_completion_time(self):
        task = Task(id="1", title="x", context="quick", completed=False, completed_at=datetime(2024, 1, 5))
        assert task.completed_at is None

    def test_unknown_context_rejected(self):
        with pytest.raises(ValidationError):
            Task(id="1", title="x", context="sleepy")

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            Task(id="1", title="", context="quick")

    def test_context_stored_as_plain_string(self):
        task = Task(id="1", title="x", context="focused")
        assert task.model_dump()["context"] == "focused"


class TestTaskDraft:

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_blank_title_rejected(self, title):
        with pytest.raises(ValidationError):
            TaskDraft(title=title)

    def test_trims_input(self):
        draft = TaskDraft(title="  Write report ", note="   ")
        assert draft.title == "Write report"
        assert draft.note is None

    @pytest.mark.parametrize("duration", [5, 15, 60, 120])
    def test_valid_durations(self, duration):
        assert TaskDraft(title="x", duration=duration).duration == duration

    @pytest.mark.parametrize("duration", [0, 3, 7, 125, 180])
    def test_invalid_durations(self, duration):
        with pytest.raises(ValidationError):
            TaskDraft(title="x", duration=duration)


class TestTaskUpdate:

    def test_title_is_stripped(self):
        assert TaskUpdate(title="  New ").changes() == {"title": "New"}

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            TaskUpdate(title="   ")

    def test_changes_only_include_set_fields(self):
        assert TaskUpdate(title="New").changes() == {"title": "New"}

    def test_explicit_none_is_a_change(self):
        assert TaskUpdate(note=None).changes() == {"note": None}

    def test_completion_fields(self):
        now = datetime(2024, 1, 5, 9)
        assert TaskUpdate(completed=True, completed_at=now).changes() == {"completed": True, "completed_at": now}


def test_reminder_settings_defaults():
    settings = ReminderSettings()
    assert settings.enabled is True
    assert settings.window == "anytime"
    assert settings.last_dismissed is None
    assert settings.last_shown is None


def test_stats_fill_missing_contexts():
    stats = CompletionStats(total=1, by_context={"focused": 1})
    assert stats.by_context == {"quick": 0, "focused": 1, "low-energy": 0}


def test_stats_hour_keys_from_json():
    stats = CompletionStats.model_validate_json('{"total": 1, "by_hour": {"14": 1}}')
    assert stats.by_hour == {14: 1}


@pytest.mark.parametrize("duration", [200, 7])
def test_preferences_duration_must_be_a_form_value(duration):
    with pytest.raises(ValidationError):
        UserPreferences(default_duration=duration)
