"""
Stats Service - turns the completion ledger into dashboard figures.

The ledger itself is maintained by the repository on every completion;
this service only reads it.
"""

import datetime
from dataclasses import dataclass, field
from typing import Iterable, List

from contexttasks.domain.models import CompletionStats, Task, TaskContext
from contexttasks.domain.stats import to_local
from contexttasks.infra.repository import TaskRepository


@dataclass
class ContextShare:
    context: str
    count: int
    percentage: float


@dataclass
class DayCount:
    day: datetime.date
    count: int
    intensity: float  # count relative to the busiest of the shown days


@dataclass
class PeakHour:
    hour: int
    count: int

    @property
    def label(self) -> str:
        return format_hour(self.hour)


@dataclass
class DashboardSummary:
    total: int
    by_context: List[ContextShare] = field(default_factory=list)
    last_days: List[DayCount] = field(default_factory=list)
    peak_hours: List[PeakHour] = field(default_factory=list)
    completed_today: List[Task] = field(default_factory=list)


def format_hour(hour: int) -> str:
    """0 -> '12AM', 9 -> '9AM', 12 -> '12PM', 18 -> '6PM'"""
    suffix = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12}{suffix}"


def context_shares(stats: CompletionStats) -> List[ContextShare]:
    """Completions per context with their share of the total"""
    shares = []
    for context in TaskContext:
        count = stats.by_context.get(context.value, 0)
        percentage = count / stats.total * 100 if stats.total > 0 else 0.0
        shares.append(ContextShare(context=context.value, count=count, percentage=percentage))
    return shares


def last_days(stats: CompletionStats, today: datetime.date, days: int = 7) -> List[DayCount]:
    """Daily counts for the `days` days ending today, oldest first"""
    dates = [today - datetime.timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    counts = [stats.by_day.get(d.isoformat(), 0) for d in dates]
    busiest = max(counts + [1])
    return [DayCount(day=d, count=c, intensity=c / busiest) for d, c in zip(dates, counts)]


def peak_hours(stats: CompletionStats, limit: int = 3) -> List[PeakHour]:
    """Busiest hours of the day, most completions first, earlier hour on ties"""
    ranked = sorted(stats.by_hour.items(), key=lambda item: (-item[1], item[0]))
    return [PeakHour(hour=hour, count=count) for hour, count in ranked[:limit]]


def completed_on(tasks: Iterable[Task], day: datetime.date) -> List[Task]:
    """Tasks whose completion falls on the given local date"""
    return [
        t for t in tasks
        if t.completed and t.completed_at is not None and to_local(t.completed_at).date() == day
    ]


class StatsService:
    """Builds the dashboard summary from stored data"""

    def __init__(self, repo: TaskRepository):
        self.repo = repo

    def summary(self, now: datetime.datetime) -> DashboardSummary:
        stats = self.repo.get_stats()
        today = to_local(now).date()
        return DashboardSummary(
            total=stats.total,
            by_context=context_shares(stats),
            last_days=last_days(stats, today),
            peak_hours=peak_hours(stats),
            completed_today=completed_on(self.repo.get_tasks(), today)
        )
