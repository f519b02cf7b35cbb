"""
Key-value storage port and its adapters.

The rest of the app only ever sees `get`, `set` and `remove` on string
values under fixed names. Which adapter is plugged in decides where data
lives: a SQLite table for the real app, a dict for tests.
"""

from typing import Dict, Optional, Protocol

from sqlalchemy import delete, select

from contexttasks.infra.db import DatabaseEngine, RecordModel


class KeyValueStore(Protocol):
    """Synchronous string-based get/set-by-name storage"""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class InMemoryKeyValueStore:
    """Dict-backed store. Nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class SqlKeyValueStore:
    """
    Store backed by the `records` table.

    Each call runs in its own session and commits before returning, so a
    `set` is a single atomic write from the caller's point of view.
    """

    def __init__(self, engine: DatabaseEngine):
        self.engine = engine

    def get(self, key: str) -> Optional[str]:
        with self.engine.get_session() as session:
            return session.execute(
                select(RecordModel.value).where(RecordModel.key == key)
            ).scalar_one_or_none()

    def set(self, key: str, value: str) -> None:
        with self.engine.get_session() as session:
            model = session.get(RecordModel, key)
            if model is None:
                session.add(RecordModel(key=key, value=value))
            else:
                model.value = value
            session.commit()

    def remove(self, key: str) -> None:
        with self.engine.get_session() as session:
            session.execute(delete(RecordModel).where(RecordModel.key == key))
            session.commit()
