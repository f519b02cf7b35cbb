"""Services layer - Business logic"""

from .reminder_service import ReminderService, should_show_reminder
from .stats_service import StatsService, DashboardSummary
from .report_service import ReportService
from .app_service import AppService, AppView, InvalidTransitionError

__all__ = [
    "ReminderService", "should_show_reminder",
    "StatsService", "DashboardSummary",
    "ReportService",
    "AppService", "AppView", "InvalidTransitionError"
]
