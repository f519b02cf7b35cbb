"""
Tests for the completion ledger arithmetic and the dashboard summary.
"""

import datetime

import pytest

from contexttasks.domain.models import CompletionStats
from contexttasks.domain.stats import apply_completion, day_key, hour_key
from contexttasks.services.stats_service import (
    StatsService, format_hour, context_shares, last_days, peak_hours, completed_on
)


class TestApplyCompletion:

    def test_increments_every_counter(self, make_task):
        task = make_task(context="focused", completed=True,
                         completed_at=datetime.datetime(2024, 3, 2, 14, 45))
        stats = apply_completion(CompletionStats(), task)

        assert stats.total == 1
        assert stats.by_context == {"quick": 0, "focused": 1, "low-energy": 0}
        assert stats.by_day == {"2024-03-02": 1}
        assert stats.by_hour == {14: 1}

    def test_does_not_mutate_input(self, make_task):
        original = CompletionStats()
        task = make_task(completed=True, completed_at=datetime.datetime(2024, 3, 2, 14, 0))
        apply_completion(original, task)
        assert original == CompletionStats()

    def test_adds_to_existing_entries(self, make_task):
        stats = CompletionStats(total=3, by_context={"quick": 3}, by_day={"2024-03-02": 3}, by_hour={14: 3})
        task = make_task(completed=True, completed_at=datetime.datetime(2024, 3, 2, 14, 10))
        stats = apply_completion(stats, task)
        assert stats.total == 4
        assert stats.by_day["2024-03-02"] == 4
        assert stats.by_hour[14] == 4

    def test_requires_completion_time(self, make_task):
        with pytest.raises(ValueError):
            apply_completion(CompletionStats(), make_task(completed=True))

    def test_aware_timestamps_bucket_in_local_time(self):
        aware = datetime.datetime(2024, 1, 5, 23, 30, tzinfo=datetime.timezone.utc)
        local = aware.astimezone()
        assert day_key(aware) == local.date().isoformat()
        assert hour_key(aware) == local.hour


class TestDashboardFigures:

    @pytest.mark.parametrize("hour,label", [(0, "12AM"), (9, "9AM"), (12, "12PM"), (18, "6PM"), (23, "11PM")])
    def test_format_hour(self, hour, label):
        assert format_hour(hour) == label

    def test_context_shares_with_no_completions(self):
        shares = context_shares(CompletionStats())
        assert [s.context for s in shares] == ["quick", "focused", "low-energy"]
        assert all(s.percentage == 0 for s in shares)

    def test_context_shares_percentages(self):
        stats = CompletionStats(total=4, by_context={"quick": 1, "focused": 3, "low-energy": 0})
        shares = {s.context: s.percentage for s in context_shares(stats)}
        assert shares == {"quick": 25.0, "focused": 75.0, "low-energy": 0.0}

    def test_last_days_oldest_first_with_gaps(self):
        stats = CompletionStats(by_day={"2024-01-05": 4, "2024-01-03": 2, "2023-12-01": 9})
        days = last_days(stats, datetime.date(2024, 1, 5))

        assert len(days) == 7
        assert days[0].day == datetime.date(2023, 12, 30)
        assert days[-1].day == datetime.date(2024, 1, 5)
        assert [d.count for d in days] == [0, 0, 0, 0, 2, 0, 4]
        assert days[-1].intensity == 1.0
        assert days[4].intensity == 0.5

    def test_last_days_empty_has_zero_intensity(self):
        days = last_days(CompletionStats(), datetime.date(2024, 1, 5))
        assert all(d.intensity == 0 for d in days)

    def test_peak_hours_top_three(self):
        stats = CompletionStats(by_hour={8: 2, 9: 5, 14: 2, 20: 3, 6: 1})
        peaks = peak_hours(stats)
        assert [(p.hour, p.count) for p in peaks] == [(9, 5), (20, 3), (8, 2)]
        assert peaks[0].label == "9AM"

    def test_completed_on_filters_by_local_day(self, make_task):
        today = datetime.date(2024, 1, 5)
        tasks = [
            make_task("done today", completed=True, completed_at=datetime.datetime(2024, 1, 5, 9)),
            make_task("done yesterday", completed=True, completed_at=datetime.datetime(2024, 1, 4, 22)),
            make_task("open"),
        ]
        assert [t.title for t in completed_on(tasks, today)] == ["done today"]


def test_summary_reads_repository(repo, make_task):
    task = make_task("Email client")
    repo.add_task(task)
    repo.add_task(make_task("Still open"))
    repo.complete_task(task.id, datetime.datetime(2024, 1, 5, 9, 0))

    summary = StatsService(repo).summary(datetime.datetime(2024, 1, 5, 18, 0))

    assert summary.total == 1
    assert summary.by_context[0].count == 1
    assert summary.last_days[-1].count == 1
    assert [p.hour for p in summary.peak_hours] == [9]
    assert [t.title for t in summary.completed_today] == ["Email client"]
