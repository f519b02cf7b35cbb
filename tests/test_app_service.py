"""
Tests for the application shell: view transitions, actions and banners.
"""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from contexttasks.domain.models import ReminderSettings
from contexttasks.services.app_service import (
    AppService, AppView, InvalidTransitionError, format_minutes,
    SORT_BY_CREATED, SORT_BY_DURATION
)


@pytest.fixture
def service(repo, clock):
    service = AppService(repo, clock=clock)
    service.start()
    service.run_deferred()
    return service


def add_task(service, title, context="quick", duration=15, **kwargs):
    """Navigate to the create view for `context` and save a task"""
    if service.view == AppView.CONTEXT_PICKER:
        service.select_context(context)
    if service.view == AppView.TASK_LIST:
        service.open_create()
    task = service.create_task(title, context=context, duration=duration, **kwargs)
    service.run_deferred()
    return task


class TestNavigation:

    def test_initial_state(self, service):
        assert service.view == AppView.CONTEXT_PICKER
        assert service.selected_context is None
        assert service.editing_task is None
        assert service.settings_open is False

    def test_select_context_opens_list(self, service):
        service.select_context("focused")
        assert service.view == AppView.TASK_LIST
        assert service.selected_context == "focused"

    def test_list_add_and_cancel(self, service):
        service.select_context("quick")
        service.open_create()
        assert service.view == AppView.CREATE_TASK
        service.cancel_create()
        assert service.view == AppView.TASK_LIST

    def test_back_to_contexts(self, service):
        service.select_context("quick")
        service.back_to_contexts()
        assert service.view == AppView.CONTEXT_PICKER

    def test_dashboard_round_trip(self, service):
        service.open_dashboard()
        assert service.view == AppView.DASHBOARD
        service.close_dashboard()
        assert service.view == AppView.CONTEXT_PICKER

    def test_disallowed_transitions(self, service):
        with pytest.raises(InvalidTransitionError):
            service.open_create()
        service.open_dashboard()
        with pytest.raises(InvalidTransitionError):
            service.select_context("quick")

    def test_unknown_context_rejected(self, service):
        with pytest.raises(ValueError):
            service.select_context("sleepy")
        assert service.view == AppView.CONTEXT_PICKER

    def test_overlays_independent_of_view(self, service):
        service.select_context("quick")
        service.open_settings()
        assert service.settings_open is True
        assert service.view == AppView.TASK_LIST
        service.close_settings()
        assert service.settings_open is False


class TestTaskActions:

    def test_create_stores_task_and_returns_to_list(self, service, repo, clock):
        task = add_task(service, "  Email client ", duration=10, tags=["work", "work", " "], note="  ")

        assert service.view == AppView.TASK_LIST
        assert task.title == "Email client"
        assert task.tags == ["work"]
        assert task.note is None
        assert task.created_at == clock.now
        assert task.completed is False
        assert [t.id for t in repo.get_tasks()] == [task.id]
        assert service.tasks == repo.get_tasks()

    def test_blank_title_is_rejected(self, service, repo):
        service.select_context("quick")
        service.open_create()
        assert service.create_task("   ") is None
        assert service.view == AppView.CREATE_TASK
        assert repo.get_tasks() == []

    def test_invalid_duration_rejected(self, service):
        service.select_context("quick")
        service.open_create()
        with pytest.raises(ValidationError):
            service.create_task("Too long", duration=180)

    def test_context_defaults_to_selection(self, service):
        service.select_context("low-energy")
        service.open_create()
        task = service.create_task("Water plants")
        assert task.context == "low-energy"
        assert task.duration == 15

    def test_ids_are_unique_within_same_millisecond(self, service):
        first = add_task(service, "one")
        second = add_task(service, "two")
        assert first.id != second.id

    def test_complete_shows_feedback_and_updates_stats(self, service, repo, clock):
        task = add_task(service, "Email client", duration=10)
        clock.set(datetime(2024, 1, 5, 9, 0))
        service.complete_task(task.id)

        assert service.completion_message is True
        assert repo.get_task(task.id).completed is True
        assert repo.get_stats().by_hour == {9: 1}
        assert service.active_tasks() == []
        assert [t.title for t in service.completed_today()] == ["Email client"]

        service.hide_completion_message()
        assert service.completion_message is False

    def test_complete_unknown_task(self, service):
        assert service.complete_task("missing") is None
        assert service.completion_message is False

    def test_edit_flow(self, service, repo):
        task = add_task(service, "Draft")
        service.start_editing(task.id)
        assert service.editing_task.id == task.id

        edited = service.save_edit(task.id, "Final", "focused", 45, ["writing"], "by friday")
        assert edited.title == "Final"
        assert edited.context == "focused"
        assert service.editing_task is None
        assert repo.get_stats().total == 0

    def test_edit_with_blank_title_keeps_editor_open(self, service, repo):
        task = add_task(service, "Draft")
        service.start_editing(task.id)
        assert service.save_edit(task.id, " ", "quick", 15, []) is None
        assert service.editing_task is not None
        assert repo.get_task(task.id).title == "Draft"

    def test_delete(self, service, repo):
        task = add_task(service, "Throwaway")
        service.delete_task(task.id)
        assert repo.get_tasks() == []
        assert service.tasks == []


class TestDerivedViews:

    def test_counts_and_active_tasks(self, service, clock):
        add_task(service, "short", duration=5)
        clock.set(clock.now + timedelta(minutes=1))
        add_task(service, "long", duration=60)
        service.back_to_contexts()
        service.select_context("focused")
        service.open_create()
        service.create_task("deep", duration=90)

        assert service.task_counts() == {"quick": 2, "focused": 1, "low-energy": 0}
        assert service.open_task_count() == 3

        service.back_to_contexts()
        service.select_context("quick")
        assert [t.title for t in service.active_tasks()] == ["short", "long"]
        assert service.active_minutes() == 65

        service.set_sort(SORT_BY_CREATED)
        assert [t.title for t in service.active_tasks()] == ["long", "short"]
        service.set_sort(SORT_BY_DURATION)
        with pytest.raises(ValueError):
            service.set_sort("alphabetical")

    def test_no_selection_means_no_active_tasks(self, service):
        assert service.active_tasks() == []

    @pytest.mark.parametrize("minutes,text", [(0, "~0m"), (40, "~40m"), (60, "~1h 0m"), (65, "~1h 5m")])
    def test_format_minutes(self, minutes, text):
        assert format_minutes(minutes) == text


class TestReminderBanner:

    def test_banner_appears_on_picker_after_deferred_check(self, service, clock):
        add_task(service, "open task")
        service.back_to_contexts()
        assert service.show_reminder is False  # not yet evaluated
        service.run_deferred()
        assert service.show_reminder is True

    def test_banner_hidden_outside_picker(self, service):
        add_task(service, "open task")
        assert service.view == AppView.TASK_LIST
        assert service.show_reminder is False

    def test_dismiss_hides_for_session(self, service, repo, clock):
        add_task(service, "open task")
        service.back_to_contexts()
        service.run_deferred()

        service.dismiss_reminder()
        assert service.show_reminder is False
        assert repo.get_reminder_settings().last_dismissed == clock.now

        # Even once the cooldown has passed, this session stays quiet
        clock.set(clock.now + timedelta(hours=13))
        service.open_dashboard()
        service.close_dashboard()
        service.run_deferred()
        assert service.show_reminder is False

    def test_window_outside_hours(self, service, clock):
        service.save_reminder_settings(True, "evening")
        add_task(service, "open task")
        service.back_to_contexts()
        service.run_deferred()
        assert service.show_reminder is False

    def test_save_settings_keeps_dismissal(self, service, repo, clock):
        repo.save_reminder_settings(ReminderSettings(last_dismissed=clock.now))
        settings = service.save_reminder_settings(False, "morning")
        assert settings.enabled is False
        assert settings.window == "morning"
        assert repo.get_reminder_settings().last_dismissed == clock.now

    def test_startup_defers_load(self, repo, clock, make_task):
        repo.add_task(make_task("existing"))
        service = AppService(repo, clock=clock)
        notified = []
        service.subscribe(lambda: notified.append(service.tasks))
        service.start()

        assert service.tasks == []
        assert service.has_deferred()
        service.run_deferred()
        assert [t.title for t in service.tasks] == ["existing"]
        assert service.show_reminder is True
        assert notified


def test_clear_all_resets_everything(service, repo, clock):
    task = add_task(service, "done soon")
    service.complete_task(task.id)
    add_task(service, "open")
    service.start_editing(task.id)
    service.open_settings()
    service.save_reminder_settings(False, "evening")

    service.clear_all()

    assert service.view == AppView.CONTEXT_PICKER
    assert service.selected_context is None
    assert service.editing_task is None
    assert service.settings_open is False
    assert service.show_reminder is False
    assert service.tasks == []
    assert repo.get_tasks() == []
    assert repo.get_stats().total == 0
    assert repo.get_reminder_settings() == ReminderSettings()
    assert service.completion_message is False
    assert service.reminder_dismissed is False


def test_reminder_returns_after_clear_all(service, repo):
    add_task(service, "open task")
    service.back_to_contexts()
    service.run_deferred()
    service.dismiss_reminder()

    service.clear_all()
    assert repo.get_reminder_settings().last_dismissed is None

    add_task(service, "new task")
    service.back_to_contexts()
    service.run_deferred()
    assert service.show_reminder is True
