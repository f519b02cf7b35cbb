"""
Repository Pattern Implementation.

Architecture Decision: Why Repository Pattern?
Separates data access logic from business logic. Makes it easy to:
- Swap the storage backend (SQLite table, in-memory dict)
- Mock data for testing
- Keep the "missing or broken record means default" rule in one place

All state lives in three named records. Nothing is cached here: every read
goes back to the store, so callers always see the last write.
"""

from datetime import datetime
from typing import Callable, List, Optional, TypeVar
import logging

from pydantic import TypeAdapter, ValidationError

from contexttasks.domain.models import Task, TaskUpdate, ReminderSettings, CompletionStats
from contexttasks.domain.stats import apply_completion
from contexttasks.infra.store import KeyValueStore

logger = logging.getLogger(__name__)

TASKS_KEY = "contexttasks_tasks"
REMINDER_KEY = "contexttasks_reminder_settings"
STATS_KEY = "contexttasks_stats"

T = TypeVar("T")

_tasks_adapter = TypeAdapter(List[Task])
_reminder_adapter = TypeAdapter(ReminderSettings)
_stats_adapter = TypeAdapter(CompletionStats)


def decode_record(raw: Optional[str], adapter: TypeAdapter, default_factory: Callable[[], T]) -> T:
    """
    Parse a stored record, falling back to its default.

    Absent and malformed records are treated the same way: the caller gets
    the default and never sees an error. A malformed record stays in the
    store until the next write replaces it.

    Args:
        raw: Stored JSON text, or None if the key is missing
        adapter: Pydantic adapter for the record type
        default_factory: Builds the default value

    Returns:
        The decoded record or the default
    """
    if raw is None:
        return default_factory()
    try:
        return adapter.validate_json(raw)
    except (ValidationError, ValueError) as e:
        logger.warning(f"Discarding malformed record: {e.__class__.__name__}: {e}")
        return default_factory()


class TaskRepository:
    """
    Persistence gateway for tasks, reminder settings and completion stats.

    Reads are total. Updates and deletes of unknown ids are silent no-ops.
    Writes are read-modify-write without locking: one user, one process.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    # Tasks

    def get_tasks(self) -> List[Task]:
        """All tasks in insertion order"""
        return decode_record(self.store.get(TASKS_KEY), _tasks_adapter, list)

    def save_tasks(self, tasks: List[Task]) -> None:
        """Replace the whole collection in a single write"""
        self.store.set(TASKS_KEY, _tasks_adapter.dump_json(tasks).decode("utf-8"))

    def add_task(self, task: Task) -> None:
        """Append a task. Id uniqueness is the caller's job."""
        tasks = self.get_tasks()
        tasks.append(task)
        self.save_tasks(tasks)

    def get_task(self, id: str) -> Optional[Task]:
        for task in self.get_tasks():
            if task.id == id:
                return task
        return None

    def update_task(self, id: str, update: TaskUpdate) -> Optional[Task]:
        """
        Shallow-merge `update` into the task with this id.

        When the update itself marks the task completed and carries a
        completion time, the completion is also recorded in the stats
        ledger. Completing an already completed task counts again.

        Returns:
            The merged task, or None if no task has this id or the merged
            record would be invalid (nothing is written then)
        """
        tasks = self.get_tasks()
        for index, task in enumerate(tasks):
            if task.id == id:
                break
        else:
            logger.debug(f"update_task: no task with id {id}")
            return None

        changes = update.changes()
        try:
            merged = Task.model_validate({**task.model_dump(), **changes})
        except ValidationError as e:
            logger.warning(f"update_task: rejected changes for {id}: {e}")
            return None
        tasks[index] = merged

        if changes.get("completed") and changes.get("completed_at") is not None:
            self.record_completion(merged)

        self.save_tasks(tasks)
        return merged

    def complete_task(self, id: str, now: datetime) -> Optional[Task]:
        """Mark a task completed at `now`"""
        return self.update_task(id, TaskUpdate(completed=True, completed_at=now))

    def delete_task(self, id: str) -> None:
        """Remove a task. The stats ledger is not touched."""
        tasks = self.get_tasks()
        remaining = [t for t in tasks if t.id != id]
        if len(remaining) == len(tasks):
            logger.debug(f"delete_task: no task with id {id}")
            return
        self.save_tasks(remaining)

    # Reminder settings

    def get_reminder_settings(self) -> ReminderSettings:
        return decode_record(self.store.get(REMINDER_KEY), _reminder_adapter, ReminderSettings)

    def save_reminder_settings(self, settings: ReminderSettings) -> None:
        self.store.set(REMINDER_KEY, settings.model_dump_json())

    # Stats

    def get_stats(self) -> CompletionStats:
        return decode_record(self.store.get(STATS_KEY), _stats_adapter, CompletionStats)

    def record_completion(self, task: Task) -> CompletionStats:
        """Fold one completion into the persisted ledger"""
        stats = apply_completion(self.get_stats(), task)
        self.store.set(STATS_KEY, stats.model_dump_json())
        return stats

    # Everything

    def clear_all(self) -> None:
        """Remove all three records. Getters return defaults afterwards."""
        for key in (TASKS_KEY, REMINDER_KEY, STATS_KEY):
            self.store.remove(key)
        logger.info("All data cleared")


def open_repository(db_url: str) -> TaskRepository:
    """Repository over the SQLite record table at `db_url`"""
    from contexttasks.infra.db import init_db
    from contexttasks.infra.store import SqlKeyValueStore

    return TaskRepository(SqlKeyValueStore(init_db(db_url)))
