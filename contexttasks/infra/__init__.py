"""Infrastructure layer - Database and persistence"""

from .db import DatabaseEngine, init_db
from .store import KeyValueStore, InMemoryKeyValueStore, SqlKeyValueStore
from .repository import TaskRepository, decode_record, open_repository

__all__ = [
    "DatabaseEngine", "init_db",
    "KeyValueStore", "InMemoryKeyValueStore", "SqlKeyValueStore",
    "TaskRepository", "decode_record", "open_repository"
]
