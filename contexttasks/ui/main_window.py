"""
Main Window - hosts the four pages and the overlays.

Architecture Decision: Thin presentation layer
All state lives in AppService. This window forwards user intents to it and
re-renders whenever the service reports a change.
"""

from pathlib import Path

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QStackedWidget, QMessageBox,
    QFileDialog, QDialog
)
from PySide6.QtCore import Signal, QTimer

from contexttasks.domain.models import UserPreferences
from contexttasks.services.app_service import AppService, AppView, COMPLETION_FEEDBACK_MS
from contexttasks.services.report_service import ReportService
from contexttasks.i18n import tr
from .dialogs import ReminderBanner, CompletionToast
from .task_dialogs import CreateTaskView, EditTaskDialog
from .settings_dialog import SettingsDialog
from .views import ContextPickerView, TaskListView, DashboardView


class MainWindow(QMainWindow):
    """
    Single window with a page stack:
    context picker, task list, create task and dashboard.
    """

    # Emitted with new preferences after the settings dialog saved them
    preferences_changed = Signal(object)

    def __init__(self, service: AppService, prefs: UserPreferences,
                 report_service: ReportService, parent=None):
        super().__init__(parent)
        self.service = service
        self.prefs = prefs
        self.report_service = report_service

        self.setWindowTitle(tr("app.name"))
        self.resize(560, 720)

        self._setup_ui()
        self._connect_signals()

        self.service.subscribe(self._on_service_changed)

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)

        self.reminder_banner = ReminderBanner()
        self.reminder_banner.hide()
        layout.addWidget(self.reminder_banner)

        self.stack = QStackedWidget()
        self.picker_view = ContextPickerView()
        self.list_view = TaskListView()
        self.create_view = CreateTaskView()
        self.dashboard_view = DashboardView()
        self.pages = {
            AppView.CONTEXT_PICKER: self.picker_view,
            AppView.TASK_LIST: self.list_view,
            AppView.CREATE_TASK: self.create_view,
            AppView.DASHBOARD: self.dashboard_view,
        }
        for page in self.pages.values():
            self.stack.addWidget(page)
        layout.addWidget(self.stack, stretch=1)

        # Toast floats over the central widget
        self.toast = CompletionToast(COMPLETION_FEEDBACK_MS, central)

    def _connect_signals(self):
        self.reminder_banner.dismissed.connect(lambda: self._run(self.service.dismiss_reminder))
        self.toast.expired.connect(self.service.hide_completion_message)

        self.picker_view.context_selected.connect(lambda c: self._run(self.service.select_context, c))
        self.picker_view.dashboard_requested.connect(lambda: self._run(self.service.open_dashboard))
        self.picker_view.settings_requested.connect(self._open_settings)

        self.list_view.back_requested.connect(lambda: self._run(self.service.back_to_contexts))
        self.list_view.add_requested.connect(self._open_create)
        self.list_view.sort_changed.connect(lambda s: self._run(self.service.set_sort, s))
        self.list_view.complete_requested.connect(self._complete_task)
        self.list_view.edit_requested.connect(self._edit_task)
        self.list_view.delete_requested.connect(self._delete_task)

        self.create_view.save_requested.connect(self._save_new_task)
        self.create_view.cancelled.connect(lambda: self._run(self.service.cancel_create))

        self.dashboard_view.close_requested.connect(lambda: self._run(self.service.close_dashboard))
        self.dashboard_view.export_requested.connect(self._export_report)

    # -- Rendering ---------------------------------------------------------

    def _on_service_changed(self):
        self.render()
        if self.service.has_deferred():
            # Apply queued updates once this render pass is done
            QTimer.singleShot(0, lambda: self._run(self.service.run_deferred))

    def render(self):
        service = self.service
        self.stack.setCurrentWidget(self.pages[service.view])

        banner_visible = service.show_reminder and service.view == AppView.CONTEXT_PICKER
        if banner_visible:
            self.reminder_banner.set_task_count(service.open_task_count())
        self.reminder_banner.setVisible(banner_visible)

        if service.view == AppView.CONTEXT_PICKER:
            self.picker_view.set_counts(service.task_counts())
        elif service.view == AppView.TASK_LIST and service.selected_context:
            self.list_view.render(
                service.selected_context,
                service.active_tasks(),
                service.active_minutes(),
                service.sort_by,
                service.completed_today()
            )
        elif service.view == AppView.DASHBOARD:
            self.dashboard_view.render(service.dashboard_summary())

        if not service.completion_message:
            self.toast.hide()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._center_toast()

    def _center_toast(self):
        self.toast.adjustSize()
        parent = self.toast.parentWidget()
        x = (parent.width() - self.toast.width()) // 2
        y = (parent.height() - self.toast.height()) // 2
        self.toast.move(x, y)

    # -- Actions -----------------------------------------------------------

    def _run(self, action, *args):
        """Call a service action, reporting unexpected errors"""
        try:
            return action(*args)
        except Exception as e:
            QMessageBox.critical(self, tr("error"), tr("error.unexpected", error=e))
            return None

    def _open_create(self):
        self.create_view.prepare(
            self.service.selected_context or "quick",
            self.prefs.default_duration
        )
        self._run(self.service.open_create)

    def _save_new_task(self, title: str, context: str, duration: int, tags: list, note: str):
        self._run(self.service.create_task, title, context, duration, tags, note)

    def _complete_task(self, task_id: str):
        self._run(self.service.complete_task, task_id)
        if self.service.completion_message:
            self._center_toast()
            self.toast.flash()

    def _edit_task(self, task_id: str):
        self._run(self.service.start_editing, task_id)
        task = self.service.editing_task
        if task is None:
            return

        dialog = EditTaskDialog(task, self)
        if dialog.exec() == QDialog.Accepted:
            form = dialog.form
            self._run(
                self.service.save_edit, task.id, form.title(), form.context(),
                form.duration(), list(form.tags), form.note()
            )
        else:
            self.service.stop_editing()

    def _delete_task(self, task_id: str):
        reply = QMessageBox.question(
            self, tr("list.confirm_delete_title"),
            tr("list.confirm_delete_msg"),
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No
        )
        if reply == QMessageBox.Yes:
            self._run(self.service.delete_task, task_id)

    def _open_settings(self):
        self.service.open_settings()
        dialog = SettingsDialog(self.service.reminder_settings, self.prefs, self)
        dialog.reminders_saved.connect(
            lambda enabled, window: self._run(self.service.save_reminder_settings, enabled, window)
        )
        dialog.preferences_saved.connect(self._on_preferences_saved)
        dialog.clear_requested.connect(lambda: self._run(self.service.clear_all))
        dialog.exec()
        self.service.close_settings()

    def _on_preferences_saved(self, prefs: UserPreferences):
        self.prefs = prefs
        self.preferences_changed.emit(prefs)

    def _export_report(self):
        path, _ = QFileDialog.getSaveFileName(
            self, tr("dashboard.export"),
            str(Path.home() / "contexttasks_report.md"),
            "Markdown (*.md);;Text (*.txt)"
        )
        if not path:
            return
        written = self._run(self.report_service.write, self.service.dashboard_summary(), Path(path))
        if written:
            QMessageBox.information(self, tr("dashboard.export"), tr("dashboard.export_done", path=written))

    def closeEvent(self, event):
        self.service.unsubscribe(self._on_service_changed)
        super().closeEvent(event)
