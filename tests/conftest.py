"""
Pytest configuration and fixtures.
"""

import sys
from datetime import datetime
from pathlib import Path
import pytest

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from contexttasks.domain.models import Task
from contexttasks.infra.db import init_db
from contexttasks.infra.repository import TaskRepository
from contexttasks.infra.store import InMemoryKeyValueStore, SqlKeyValueStore


class FakeClock:
    """Settable clock for code that takes a `clock` callable"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def set(self, now: datetime):
        self.now = now


@pytest.fixture
def store():
    """Empty in-memory key-value store"""
    return InMemoryKeyValueStore()


@pytest.fixture
def repo(store):
    return TaskRepository(store)


@pytest.fixture
def sql_store(tmp_path):
    """Key-value store on a temporary SQLite file"""
    engine = init_db(f"sqlite:///{tmp_path / 'test.db'}")
    yield SqlKeyValueStore(engine)
    engine.dispose()


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 5, 9, 0))


@pytest.fixture
def make_task():
    """Factory for tasks with sensible defaults"""
    counter = {"n": 0}

    def _make(title: str = "Task", context: str = "quick", duration: int = 15, **kwargs) -> Task:
        counter["n"] += 1
        kwargs.setdefault("id", f"t{counter['n']}")
        kwargs.setdefault("created_at", datetime(2024, 1, 5, 8, 0))
        return Task(title=title, context=context, duration=duration, **kwargs)

    return _make
