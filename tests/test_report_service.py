"""
Tests for the Jinja2 dashboard report.
"""

import datetime

import pytest

from contexttasks.domain.models import CompletionStats
from contexttasks.services.report_service import ReportService
from contexttasks.services.stats_service import StatsService, DashboardSummary, context_shares, last_days

GENERATED = datetime.datetime(2024, 1, 5, 18, 30)


@pytest.fixture
def report_service():
    return ReportService()


def test_templates_are_discovered(report_service):
    assert "dashboard_report.md" in report_service.list_templates()


def test_empty_summary(report_service):
    stats = CompletionStats()
    summary = DashboardSummary(
        total=0,
        by_context=context_shares(stats),
        last_days=last_days(stats, GENERATED.date())
    )
    text = report_service.render(summary, generated_at=GENERATED)

    assert "Generated: 2024-01-05 18:30" in text
    assert "Total tasks completed: 0" in text
    assert "- quick: 0 (0%)" in text
    assert "No completions yet." in text
    assert "Nothing yet today." in text


def test_summary_with_completions(report_service, repo, make_task):
    first, second = make_task("Email client"), make_task("Deep work", context="focused")
    repo.add_task(first)
    repo.add_task(second)
    repo.complete_task(first.id, datetime.datetime(2024, 1, 5, 9, 0))
    repo.complete_task(second.id, datetime.datetime(2024, 1, 5, 14, 0))

    text = report_service.render(StatsService(repo).summary(GENERATED), generated_at=GENERATED)

    assert "Total tasks completed: 2" in text
    assert "- focused: 1 (50%)" in text
    assert "- 9AM: 1" in text
    assert "- 2PM: 1" in text
    assert "Fri 2024-01-05  ##########  2" in text
    assert "- Email client (quick, ~15 min)" in text


def test_write_creates_file(report_service, repo, tmp_path):
    output = tmp_path / "reports" / "dashboard.md"
    written = report_service.write(StatsService(repo).summary(GENERATED), output)

    assert written == output
    assert output.read_text(encoding="utf-8").startswith("# Completion Report")


def test_custom_template_dir(tmp_path):
    (tmp_path / "short.txt").write_text("{{ summary.total }} done", encoding="utf-8")
    service = ReportService(template_dir=tmp_path)
    assert service.list_templates() == ["short.txt"]
    assert service.render(DashboardSummary(total=4), "short.txt") == "4 done"
