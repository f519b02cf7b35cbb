"""Domain layer - Pure business entities and logic"""

from .models import (
    Task, TaskDraft, TaskUpdate, TaskContext,
    ReminderSettings, ReminderWindow, CompletionStats, UserPreferences
)

__all__ = [
    "Task", "TaskDraft", "TaskUpdate", "TaskContext",
    "ReminderSettings", "ReminderWindow", "CompletionStats", "UserPreferences"
]
