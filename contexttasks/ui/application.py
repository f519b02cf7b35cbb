"""
Application bootstrap - wires settings, storage, services and the window.

Architecture Decision: Presentation Layer
This layer only handles UI logic. Business logic is delegated to Services.
"""

import sys
import logging
from typing import Optional

from PySide6.QtWidgets import QApplication, QStyleFactory
from PySide6.QtGui import QPalette, QColor
from PySide6.QtCore import QTimer, QLocale

from contexttasks.domain.models import UserPreferences
from contexttasks.infra.config import get_settings, Settings
from contexttasks.infra.repository import open_repository
from contexttasks.services import AppService, ReportService
from contexttasks.i18n import set_language, get_language, tr
from .main_window import MainWindow

logger = logging.getLogger(__name__)


def _dark_palette() -> QPalette:
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor(45, 45, 45))
    palette.setColor(QPalette.WindowText, QColor(224, 224, 224))
    palette.setColor(QPalette.Base, QColor(30, 30, 30))
    palette.setColor(QPalette.AlternateBase, QColor(45, 45, 45))
    palette.setColor(QPalette.Text, QColor(224, 224, 224))
    palette.setColor(QPalette.Button, QColor(55, 55, 55))
    palette.setColor(QPalette.ButtonText, QColor(224, 224, 224))
    palette.setColor(QPalette.Highlight, QColor(144, 202, 249))
    palette.setColor(QPalette.HighlightedText, QColor(20, 20, 20))
    palette.setColor(QPalette.ToolTipBase, QColor(66, 66, 66))
    palette.setColor(QPalette.ToolTipText, QColor(255, 255, 255))
    return palette


class ContextTasksApp:
    """
    Main application class: owns the QApplication and the main window.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.app = QApplication(sys.argv)
        self.app.setApplicationName("ContextTasks")

        self.settings = settings or get_settings()
        self.prefs = self.settings.preferences

        self._apply_language(self.prefs.language)
        self._apply_theme(self.prefs.theme)

        # Storage and services
        self.repo = open_repository(self.settings.get_db_url())
        self.service = AppService(
            self.repo,
            default_sort=self.prefs.default_sort,
            default_duration=self.prefs.default_duration
        )
        self.report_service = ReportService()

        self.main_window = MainWindow(self.service, self.prefs, self.report_service)
        self.main_window.preferences_changed.connect(self._on_preferences_changed)

        # Load after the first render pass
        self.service.start()
        QTimer.singleShot(0, self.service.run_deferred)

    def _apply_language(self, language: str):
        set_language(language)
        if get_language() == 'de':
            QLocale.setDefault(QLocale(QLocale.German))
        else:
            QLocale.setDefault(QLocale(QLocale.English))

    def _apply_theme(self, theme: str):
        """Apply 'light', 'dark' or 'auto' (keep the platform palette)"""
        self.app.setStyle(QStyleFactory.create("Fusion"))
        if theme == "dark":
            self.app.setPalette(_dark_palette())
        elif theme == "light":
            self.app.setPalette(self.app.style().standardPalette())

    def _on_preferences_changed(self, prefs: UserPreferences):
        self.prefs = prefs
        self.settings.preferences = prefs
        try:
            self.settings.save_preferences()
        except OSError as e:
            logger.warning(f"Could not save preferences: {e}")
        self._apply_theme(prefs.theme)

    def run(self) -> int:
        self.main_window.show()
        logger.info(f"{tr('app.name')} started")
        return self.app.exec()
