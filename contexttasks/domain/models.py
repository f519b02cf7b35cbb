"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Records are persisted as JSON strings in a key-value store. Pydantic gives us
validation when reading them back (malformed data is detected, not trusted)
and JSON serialization for writing them.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator


class TaskContext(str, Enum):
    """Energy context a task requires"""
    QUICK = "quick"
    FOCUSED = "focused"
    LOW_ENERGY = "low-energy"


class ReminderWindow(str, Enum):
    """Preferred time of day for in-app reminders"""
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    ANYTIME = "anytime"


def _clean_tags(tags: List[str]) -> List[str]:
    """Drop blank tags and duplicates, keeping first occurrence order"""
    cleaned: List[str] = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in cleaned:
            cleaned.append(tag)
    return cleaned


def _clean_note(note: Optional[str]) -> Optional[str]:
    if note is None:
        return None
    note = note.strip()
    return note or None


class Task(BaseModel):
    """
    A single user-created unit of work.

    Completed tasks stay in the same collection as open ones; views filter
    on the `completed` flag.
    """
    model_config = ConfigDict(use_enum_values=True)

    id: str
    title: str = Field(..., min_length=1)
    context: TaskContext
    duration: int = 15  # minutes, advisory only
    tags: List[str] = Field(default_factory=list)
    note: Optional[str] = None
    completed: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, tags: List[str]) -> List[str]:
        return _clean_tags(tags)

    @model_validator(mode="after")
    def _completed_at_requires_completed(self) -> "Task":
        # completed_at only exists on completed tasks
        if not self.completed and self.completed_at is not None:
            self.completed_at = None
        return self


class TaskDraft(BaseModel):
    """
    User input for a new task (create form).

    Duration limits are enforced here, at the input boundary, not on
    persisted records.
    """
    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., min_length=1, max_length=200)
    context: TaskContext = TaskContext.QUICK
    duration: int = Field(default=15, ge=5, le=120, multiple_of=5)
    tags: List[str] = Field(default_factory=list)
    note: Optional[str] = None

    # Strip before the length check so whitespace-only titles are rejected
    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, title):
        return title.strip() if isinstance(title, str) else title

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, tags: List[str]) -> List[str]:
        return _clean_tags(tags)

    @field_validator("note")
    @classmethod
    def _strip_note(cls, note: Optional[str]) -> Optional[str]:
        return _clean_note(note)


class TaskUpdate(BaseModel):
    """
    Partial update for an existing task.

    Only fields explicitly set are merged (see `model_dump(exclude_unset=True)`).
    """
    model_config = ConfigDict(use_enum_values=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    context: Optional[TaskContext] = None
    duration: Optional[int] = Field(default=None, ge=5, le=120, multiple_of=5)
    tags: Optional[List[str]] = None
    note: Optional[str] = None
    completed: Optional[bool] = None
    completed_at: Optional[datetime] = None

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, title):
        return title.strip() if isinstance(title, str) else title

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, tags: Optional[List[str]]) -> Optional[List[str]]:
        return _clean_tags(tags) if tags is not None else None

    @field_validator("note")
    @classmethod
    def _strip_note(cls, note: Optional[str]) -> Optional[str]:
        return _clean_note(note)

    def changes(self) -> Dict[str, object]:
        """Fields the caller actually set, ready for a shallow merge"""
        return self.model_dump(exclude_unset=True)


class ReminderSettings(BaseModel):
    """
    Reminder configuration. One record per store.

    `last_shown` is kept in the record layout but nothing reads it yet.
    """
    model_config = ConfigDict(use_enum_values=True)

    enabled: bool = True
    window: ReminderWindow = ReminderWindow.ANYTIME
    last_dismissed: Optional[datetime] = None
    last_shown: Optional[datetime] = None


def _zero_by_context() -> Dict[str, int]:
    return {context.value: 0 for context in TaskContext}


class CompletionStats(BaseModel):
    """
    Historical completion ledger.

    Counters only ever grow: deleting a completed task does not take its
    completion back out of the ledger.
    """
    total: int = 0
    by_context: Dict[str, int] = Field(default_factory=_zero_by_context)
    by_day: Dict[str, int] = Field(default_factory=dict)  # "YYYY-MM-DD" -> count
    by_hour: Dict[int, int] = Field(default_factory=dict)  # 0..23 -> count

    @field_validator("by_context")
    @classmethod
    def _all_contexts_present(cls, by_context: Dict[str, int]) -> Dict[str, int]:
        merged = _zero_by_context()
        merged.update(by_context)
        return merged


class UserPreferences(BaseModel):
    """
    User configuration and preferences.

    This allows users to customize behavior without touching code.
    """
    language: str = Field(default="auto", description="UI language: 'en', 'de', or 'auto' (detect from system)")
    theme: str = Field(default="auto", description="Theme: 'light', 'dark', or 'auto' (follows system)")
    default_duration: int = Field(default=15, ge=5, le=120, multiple_of=5, description="Preselected duration for new tasks")
    default_sort: str = Field(default="duration", description="Task list order: 'duration' or 'created'")
