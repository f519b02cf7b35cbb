"""
SQLAlchemy database models and configuration.

Architecture Decision: Why SQLAlchemy?
- The app only needs a handful of named records, but SQLite gives us a
  durable, single-file store that survives crashes mid-write
- The ORM keeps the key-value table definition in one place
- Easy to point at a different database URL for tests or backups
"""

from datetime import datetime
import logging

from sqlalchemy import create_engine, String, Text, DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker, Session

logger = logging.getLogger(__name__)


# Base class for all models
class Base(DeclarativeBase):
    pass


class RecordModel(Base):
    """One named record: a JSON document stored under a fixed key"""
    __tablename__ = "records"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, onupdate=datetime.now, nullable=False
    )


class DatabaseEngine:
    """
    Manages database connection and session lifecycle.

    Everything is synchronous: each operation opens a short session,
    commits and closes before returning.
    """

    def __init__(self, db_url: str):
        self.db_url = db_url
        self.engine = create_engine(self.db_url, echo=False)
        self.session_factory = sessionmaker(self.engine, expire_on_commit=False)

    def create_tables(self) -> None:
        """Create all tables in the database"""
        Base.metadata.create_all(self.engine)
        logger.debug(f"Database initialised: {self.db_url}")

    def get_session(self) -> Session:
        """Get a new database session"""
        return self.session_factory()

    def dispose(self) -> None:
        self.engine.dispose()


def init_db(db_url: str) -> DatabaseEngine:
    """Create an engine and make sure the record table exists"""
    engine = DatabaseEngine(db_url)
    engine.create_tables()
    return engine
