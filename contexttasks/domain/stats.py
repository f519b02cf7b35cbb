"""
Completion ledger arithmetic.

Pure functions over `CompletionStats`: no storage, no clock. The repository
folds each completion in through `apply_completion` and persists the result.
"""

from datetime import datetime

from .models import CompletionStats, Task


def to_local(timestamp: datetime) -> datetime:
    """Naive timestamps are already local; aware ones are converted"""
    if timestamp.tzinfo is not None:
        return timestamp.astimezone().replace(tzinfo=None)
    return timestamp


def day_key(timestamp: datetime) -> str:
    """Local calendar date as YYYY-MM-DD"""
    return to_local(timestamp).date().isoformat()


def hour_key(timestamp: datetime) -> int:
    """Local hour of day, 0-23"""
    return to_local(timestamp).hour


def apply_completion(stats: CompletionStats, task: Task) -> CompletionStats:
    """
    Return a new ledger with one completion of `task` added.

    Every call counts, including a second call for the same task: the ledger
    records completion events, not the current state of tasks.

    Args:
        stats: Current ledger (left untouched)
        task: Task carrying `completed_at`

    Returns:
        Updated copy of the ledger
    """
    if task.completed_at is None:
        raise ValueError(f"Task {task.id} has no completion timestamp")

    updated = stats.model_copy(deep=True)
    updated.total += 1
    updated.by_context[task.context] = updated.by_context.get(task.context, 0) + 1

    day = day_key(task.completed_at)
    hour = hour_key(task.completed_at)
    updated.by_day[day] = updated.by_day.get(day, 0) + 1
    updated.by_hour[hour] = updated.by_hour.get(hour, 0) + 1
    return updated
