"""
Task entry widgets: the shared form, the create view and the edit dialog.
"""

from typing import List, Optional

from PySide6.QtWidgets import (
    QDialog, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel,
    QLineEdit, QTextEdit, QPushButton, QSlider, QButtonGroup, QListWidget,
    QListWidgetItem, QDialogButtonBox, QMessageBox
)
from PySide6.QtCore import Qt, Signal

from contexttasks.domain.models import Task, TaskContext
from contexttasks.i18n import tr

CONTEXT_ICONS = {
    TaskContext.QUICK.value: "⚡",
    TaskContext.FOCUSED.value: "🎯",
    TaskContext.LOW_ENERGY.value: "🌙",
}


class TaskForm(QWidget):
    """
    Title, context, duration, tags and note inputs.

    Tag handling mirrors the model: blank and duplicate tags are ignored.
    """

    def __init__(self, context: str = TaskContext.QUICK.value, duration: int = 15, parent=None):
        super().__init__(parent)
        self.tags: List[str] = []
        self._setup_ui()
        self.set_context(context)
        self.duration_slider.setValue(duration)

    def _setup_ui(self):
        layout = QFormLayout(self)

        # Title
        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText(tr("form.title_placeholder"))
        layout.addRow(tr("form.title"), self.title_input)

        # Context (exclusive buttons)
        context_layout = QHBoxLayout()
        self.context_group = QButtonGroup(self)
        self.context_group.setExclusive(True)
        self.context_buttons = {}
        for context in TaskContext:
            btn = QPushButton(f"{CONTEXT_ICONS[context.value]} {tr('context.' + context.value)}")
            btn.setCheckable(True)
            btn.setCursor(Qt.PointingHandCursor)
            self.context_group.addButton(btn)
            self.context_buttons[context.value] = btn
            context_layout.addWidget(btn)
        layout.addRow(tr("form.context"), context_layout)

        # Duration: 5..120 in steps of 5
        duration_layout = QHBoxLayout()
        self.duration_slider = QSlider(Qt.Horizontal)
        self.duration_slider.setRange(5, 120)
        self.duration_slider.setSingleStep(5)
        self.duration_slider.setPageStep(5)
        self.duration_slider.setTickInterval(5)
        self.duration_label = QLabel()
        self.duration_slider.valueChanged.connect(self._on_duration_changed)
        duration_layout.addWidget(self.duration_slider, stretch=1)
        duration_layout.addWidget(self.duration_label)
        layout.addRow(duration_layout)

        # Tags
        tag_input_layout = QHBoxLayout()
        self.tag_input = QLineEdit()
        self.tag_input.setPlaceholderText(tr("form.tag_placeholder"))
        self.tag_input.returnPressed.connect(self._add_tag)
        add_tag_btn = QPushButton(tr("form.add_tag"))
        add_tag_btn.clicked.connect(self._add_tag)
        tag_input_layout.addWidget(self.tag_input, stretch=1)
        tag_input_layout.addWidget(add_tag_btn)
        layout.addRow(tr("form.tags"), tag_input_layout)

        self.tag_list = QListWidget()
        self.tag_list.setFlow(QListWidget.LeftToRight)
        self.tag_list.setMaximumHeight(36)
        self.tag_list.setToolTip("Double-click a tag to remove it")
        self.tag_list.itemDoubleClicked.connect(self._remove_tag)
        layout.addRow(self.tag_list)

        # Note
        self.note_input = QTextEdit()
        self.note_input.setMaximumHeight(70)
        layout.addRow(tr("form.note"), self.note_input)

    def _on_duration_changed(self, value: int):
        # Snap to multiples of 5
        snapped = max(5, min(120, round(value / 5) * 5))
        if snapped != value:
            self.duration_slider.setValue(snapped)
            return
        self.duration_label.setText(tr("form.duration", minutes=value))

    def _add_tag(self):
        tag = self.tag_input.text().strip()
        if tag and tag not in self.tags:
            self.tags.append(tag)
            self.tag_list.addItem(QListWidgetItem(f"#{tag}"))
        self.tag_input.clear()

    def _remove_tag(self, item: QListWidgetItem):
        tag = item.text().lstrip("#")
        if tag in self.tags:
            self.tags.remove(tag)
        self.tag_list.takeItem(self.tag_list.row(item))

    def set_context(self, context: str):
        self.context_buttons[context].setChecked(True)

    def context(self) -> str:
        for value, btn in self.context_buttons.items():
            if btn.isChecked():
                return value
        return TaskContext.QUICK.value

    def title(self) -> str:
        return self.title_input.text()

    def duration(self) -> int:
        return self.duration_slider.value()

    def note(self) -> Optional[str]:
        return self.note_input.toPlainText()

    def load(self, task: Task):
        """Fill the form from an existing task"""
        self.title_input.setText(task.title)
        self.set_context(task.context)
        self.duration_slider.setValue(task.duration)
        self.tags = []
        self.tag_list.clear()
        for tag in task.tags:
            self.tags.append(tag)
            self.tag_list.addItem(QListWidgetItem(f"#{tag}"))
        self.note_input.setPlainText(task.note or "")

    def reset(self, context: str, duration: int):
        self.title_input.clear()
        self.set_context(context)
        self.duration_slider.setValue(duration)
        self.tags = []
        self.tag_list.clear()
        self.tag_input.clear()
        self.note_input.clear()
        self.title_input.setFocus()


class CreateTaskView(QWidget):
    """
    Full-page create form. Emits `save_requested` with the form values.
    """

    save_requested = Signal(str, str, int, list, str)  # title, context, duration, tags, note
    cancelled = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        back_btn = QPushButton(tr("form.back"))
        back_btn.setFlat(True)
        back_btn.clicked.connect(self.cancelled.emit)
        layout.addWidget(back_btn, alignment=Qt.AlignLeft)

        self.form = TaskForm()
        self.form.title_input.returnPressed.connect(self._save)
        layout.addWidget(self.form)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()
        cancel_btn = QPushButton(tr("form.cancel"))
        cancel_btn.clicked.connect(self.cancelled.emit)
        save_btn = QPushButton(tr("form.save"))
        save_btn.setDefault(True)
        save_btn.clicked.connect(self._save)
        btn_layout.addWidget(cancel_btn)
        btn_layout.addWidget(save_btn)
        layout.addLayout(btn_layout)
        layout.addStretch()

    def prepare(self, context: str, duration: int):
        self.form.reset(context, duration)

    def _save(self):
        if not self.form.title().strip():
            self.form.title_input.setFocus()
            return
        self.save_requested.emit(
            self.form.title(),
            self.form.context(),
            self.form.duration(),
            list(self.form.tags),
            self.form.note() or ""
        )


class EditTaskDialog(QDialog):
    """
    Modal editor for an existing task.
    """

    def __init__(self, task: Task, parent=None):
        super().__init__(parent)
        self.setWindowTitle(tr("form.edit_title"))
        self.setModal(True)
        self.setMinimumWidth(460)
        self.task = task

        layout = QVBoxLayout(self)
        self.form = TaskForm()
        self.form.load(task)
        layout.addWidget(self.form)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _accept(self):
        if not self.form.title().strip():
            QMessageBox.warning(self, tr("form.edit_title"), tr("form.title_required"))
            return
        self.accept()
