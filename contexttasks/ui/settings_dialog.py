from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QCheckBox, QDialogButtonBox,
    QLabel, QGroupBox, QHBoxLayout, QPushButton, QRadioButton,
    QButtonGroup, QComboBox, QMessageBox
)
from PySide6.QtCore import Signal

from contexttasks.domain.models import ReminderSettings, ReminderWindow, UserPreferences
from contexttasks.i18n import tr, get_available_languages


class SettingsDialog(QDialog):
    """
    Reminder settings, appearance and the clear-all action.
    """

    # Emitted with (enabled, window) when the user saves
    reminders_saved = Signal(bool, str)
    # Emitted with the edited preferences when the user saves
    preferences_saved = Signal(object)
    # Emitted after the user confirmed clearing everything
    clear_requested = Signal()

    def __init__(self, settings: ReminderSettings, prefs: UserPreferences, parent=None):
        super().__init__(parent)
        self.setWindowTitle(tr("settings.title"))
        self.resize(460, 480)
        self.prefs = prefs

        self._setup_ui()
        self._load(settings)

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        # Reminders
        reminder_box = QGroupBox(tr("settings.reminders"))
        reminder_layout = QVBoxLayout(reminder_box)

        self.check_enabled = QCheckBox(tr("settings.reminders"))
        self.check_enabled.toggled.connect(self._on_enabled_toggled)
        reminder_layout.addWidget(self.check_enabled)

        hint = QLabel(tr("settings.reminders_hint"))
        hint.setStyleSheet("color: gray; font-size: 11px;")
        hint.setWordWrap(True)
        reminder_layout.addWidget(hint)

        self.window_box = QGroupBox(tr("settings.window"))
        window_layout = QVBoxLayout(self.window_box)
        self.window_group = QButtonGroup(self)
        self.window_buttons = {}
        for window in ReminderWindow:
            radio = QRadioButton(tr(f"settings.window.{window.value}"))
            self.window_group.addButton(radio)
            self.window_buttons[window.value] = radio
            window_layout.addWidget(radio)
        reminder_layout.addWidget(self.window_box)
        layout.addWidget(reminder_box)

        # Appearance
        appearance_box = QGroupBox(tr("settings.appearance"))
        appearance_layout = QFormLayout(appearance_box)

        self.combo_theme = QComboBox()
        self.combo_theme.addItem(tr("settings.theme_auto"), "auto")
        self.combo_theme.addItem(tr("settings.theme_light"), "light")
        self.combo_theme.addItem(tr("settings.theme_dark"), "dark")
        appearance_layout.addRow(tr("settings.theme"), self.combo_theme)

        self.combo_language = QComboBox()
        self.combo_language.addItem(f"{tr('settings.theme_auto')} (System)", "auto")
        for code, name in get_available_languages():
            self.combo_language.addItem(name, code)
        appearance_layout.addRow(tr("settings.language"), self.combo_language)

        restart_hint = QLabel(tr("settings.restart_hint"))
        restart_hint.setStyleSheet("color: gray; font-size: 11px;")
        appearance_layout.addRow(restart_hint)
        layout.addWidget(appearance_box)

        # Danger zone
        clear_box = QGroupBox(tr("settings.clear_title"))
        clear_layout = QVBoxLayout(clear_box)
        clear_hint = QLabel(tr("settings.clear_hint"))
        clear_hint.setWordWrap(True)
        clear_layout.addWidget(clear_hint)
        clear_btn_layout = QHBoxLayout()
        self.clear_btn = QPushButton(tr("settings.clear_title"))
        self.clear_btn.setStyleSheet("color: #c62828;")
        self.clear_btn.clicked.connect(self._confirm_clear)
        clear_btn_layout.addWidget(self.clear_btn)
        clear_btn_layout.addStretch()
        clear_layout.addLayout(clear_btn_layout)
        layout.addWidget(clear_box)

        layout.addStretch()

        self.btns = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        self.btns.accepted.connect(self._save)
        self.btns.rejected.connect(self.reject)
        layout.addWidget(self.btns)

    def _load(self, settings: ReminderSettings):
        self.check_enabled.setChecked(settings.enabled)
        self.window_buttons[settings.window].setChecked(True)
        self._on_enabled_toggled(settings.enabled)

        idx = self.combo_theme.findData(self.prefs.theme)
        self.combo_theme.setCurrentIndex(max(idx, 0))
        idx = self.combo_language.findData(self.prefs.language)
        self.combo_language.setCurrentIndex(max(idx, 0))

    def _on_enabled_toggled(self, enabled: bool):
        # Window choice only matters while reminders are on
        self.window_box.setVisible(enabled)

    def _selected_window(self) -> str:
        for value, radio in self.window_buttons.items():
            if radio.isChecked():
                return value
        return ReminderWindow.ANYTIME.value

    def _save(self):
        self.reminders_saved.emit(self.check_enabled.isChecked(), self._selected_window())

        prefs = self.prefs.model_copy(update={
            "theme": self.combo_theme.currentData(),
            "language": self.combo_language.currentData(),
        })
        if prefs != self.prefs:
            self.preferences_saved.emit(prefs)
        self.accept()

    def _confirm_clear(self):
        box = QMessageBox(QMessageBox.Warning, tr("settings.clear_title"),
                          tr("settings.clear_hint"), parent=self)
        confirm = box.addButton(tr("settings.clear_confirm"), QMessageBox.DestructiveRole)
        box.addButton(QMessageBox.Cancel)
        box.setDefaultButton(QMessageBox.Cancel)
        box.exec()
        if box.clickedButton() is confirm:
            self.clear_requested.emit()
            self.accept()
