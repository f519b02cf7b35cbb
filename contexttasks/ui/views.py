"""
Page widgets shown in the main window's stack.

Each view renders data handed to it and emits signals for user intents;
none of them talks to the repository.
"""

from typing import Dict, List

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
    QScrollArea, QProgressBar, QGridLayout, QToolButton, QMenu
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Signal

from contexttasks.domain.models import Task, TaskContext
from contexttasks.services.app_service import format_minutes, SORT_BY_CREATED, SORT_BY_DURATION
from contexttasks.services.stats_service import DashboardSummary
from contexttasks.i18n import tr, tr_count
from .task_dialogs import CONTEXT_ICONS

CONTEXT_COLORS = {
    TaskContext.QUICK.value: "#ff9800",
    TaskContext.FOCUSED.value: "#2196f3",
    TaskContext.LOW_ENERGY.value: "#9c27b0",
}


def _heading(text: str, size: int = 18) -> QLabel:
    label = QLabel(text)
    font = QFont()
    font.setPointSize(size)
    font.setBold(True)
    label.setFont(font)
    return label


def _clear_layout(layout):
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.deleteLater()


class ContextPickerView(QWidget):
    """Top-level screen: pick an energy context"""

    context_selected = Signal(str)
    dashboard_requested = Signal()
    settings_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        titles = QVBoxLayout()
        titles.addWidget(_heading(tr("picker.title"), 20))
        subtitle = QLabel(tr("picker.subtitle"))
        subtitle.setStyleSheet("color: gray;")
        titles.addWidget(subtitle)
        header.addLayout(titles, stretch=1)

        dashboard_btn = QPushButton("📊")
        dashboard_btn.setFixedSize(36, 36)
        dashboard_btn.setToolTip(tr("picker.dashboard"))
        dashboard_btn.clicked.connect(self.dashboard_requested.emit)
        header.addWidget(dashboard_btn)

        settings_btn = QPushButton("⚙")
        settings_btn.setFixedSize(36, 36)
        settings_btn.setToolTip(tr("picker.settings"))
        settings_btn.clicked.connect(self.settings_requested.emit)
        header.addWidget(settings_btn)
        layout.addLayout(header)

        self.context_buttons: Dict[str, QPushButton] = {}
        for context in TaskContext:
            btn = QPushButton()
            btn.setMinimumHeight(80)
            btn.setCursor(Qt.PointingHandCursor)
            btn.setStyleSheet(f"""
                QPushButton {{
                    text-align: left;
                    padding: 12px;
                    border: 2px solid {CONTEXT_COLORS[context.value]};
                    border-radius: 14px;
                    font-size: 15px;
                }}
            """)
            btn.clicked.connect(lambda checked=False, c=context.value: self.context_selected.emit(c))
            self.context_buttons[context.value] = btn
            layout.addWidget(btn)

        layout.addStretch()

    def set_counts(self, counts: Dict[str, int]):
        for context, btn in self.context_buttons.items():
            text = f"{CONTEXT_ICONS[context]}  {tr('context.' + context)}\n{tr('context.' + context + '.hint')}"
            count = counts.get(context, 0)
            if count > 0:
                text += f"   ·   {tr_count('picker.count', count)}"
            btn.setText(text)


class TaskCard(QFrame):
    """One open task with its actions"""

    complete_clicked = Signal(str)
    edit_clicked = Signal(str)
    delete_clicked = Signal(str)

    def __init__(self, task: Task, parent=None):
        super().__init__(parent)
        self.task_id = task.id
        self.setFrameShape(QFrame.StyledPanel)

        layout = QHBoxLayout(self)

        done_btn = QPushButton("✓")
        done_btn.setFixedSize(32, 32)
        done_btn.setToolTip(tr("list.complete"))
        done_btn.clicked.connect(lambda: self.complete_clicked.emit(self.task_id))
        layout.addWidget(done_btn)

        body = QVBoxLayout()
        title = QLabel(task.title)
        title.setStyleSheet("font-weight: bold; font-size: 14px;")
        title.setWordWrap(True)
        body.addWidget(title)

        meta = [f"<span style='color:{CONTEXT_COLORS[task.context]}'>{tr('context.' + task.context)}</span>",
                tr("list.duration", minutes=task.duration)]
        meta.extend(f"#{tag}" for tag in task.tags)
        meta_label = QLabel("  ".join(meta))
        meta_label.setStyleSheet("color: gray;")
        body.addWidget(meta_label)

        if task.note:
            note = QLabel(task.note)
            note.setWordWrap(True)
            note.setStyleSheet("color: gray; font-style: italic;")
            body.addWidget(note)
        layout.addLayout(body, stretch=1)

        menu_btn = QToolButton()
        menu_btn.setText("⋮")
        menu_btn.setPopupMode(QToolButton.InstantPopup)
        menu = QMenu(menu_btn)
        edit_action = QAction(tr("list.edit"), menu)
        edit_action.triggered.connect(lambda: self.edit_clicked.emit(self.task_id))
        delete_action = QAction(tr("list.delete"), menu)
        delete_action.triggered.connect(lambda: self.delete_clicked.emit(self.task_id))
        menu.addAction(edit_action)
        menu.addAction(delete_action)
        menu_btn.setMenu(menu)
        layout.addWidget(menu_btn, alignment=Qt.AlignTop)


class TaskListView(QWidget):
    """Open tasks of the selected context"""

    back_requested = Signal()
    add_requested = Signal()
    sort_changed = Signal(str)
    complete_requested = Signal(str)
    edit_requested = Signal(str)
    delete_requested = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        nav = QHBoxLayout()
        back_btn = QPushButton(tr("list.back"))
        back_btn.setFlat(True)
        back_btn.clicked.connect(self.back_requested.emit)
        nav.addWidget(back_btn)
        nav.addStretch()
        new_btn = QPushButton(tr("list.new"))
        new_btn.clicked.connect(self.add_requested.emit)
        nav.addWidget(new_btn)
        layout.addLayout(nav)

        self.title_label = _heading("")
        layout.addWidget(self.title_label)
        self.summary_label = QLabel("")
        self.summary_label.setStyleSheet("color: gray;")
        layout.addWidget(self.summary_label)

        sort_layout = QHBoxLayout()
        self.sort_duration_btn = QPushButton(tr("list.sort_duration"))
        self.sort_created_btn = QPushButton(tr("list.sort_created"))
        for btn, value in ((self.sort_duration_btn, SORT_BY_DURATION),
                           (self.sort_created_btn, SORT_BY_CREATED)):
            btn.setCheckable(True)
            btn.clicked.connect(lambda checked=False, v=value: self.sort_changed.emit(v))
            sort_layout.addWidget(btn)
        sort_layout.addStretch()
        layout.addLayout(sort_layout)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        container = QWidget()
        self.cards_layout = QVBoxLayout(container)
        self.cards_layout.setAlignment(Qt.AlignTop)
        scroll.setWidget(container)
        layout.addWidget(scroll, stretch=1)

        self.completed_label = QLabel("")
        self.completed_label.setStyleSheet("color: gray;")
        self.completed_label.setWordWrap(True)
        layout.addWidget(self.completed_label)

    def render(self, context: str, tasks: List[Task], total_minutes: int,
               sort_by: str, completed_today: List[Task]):
        self.title_label.setText(f"{CONTEXT_ICONS[context]} {tr('context.' + context + '.list')}")

        summary = tr_count("list.count", len(tasks))
        if total_minutes > 0:
            summary += " • " + tr("list.total", time=format_minutes(total_minutes))
        self.summary_label.setText(summary)

        self.sort_duration_btn.setChecked(sort_by == SORT_BY_DURATION)
        self.sort_created_btn.setChecked(sort_by == SORT_BY_CREATED)
        self.sort_duration_btn.setVisible(len(tasks) > 1)
        self.sort_created_btn.setVisible(len(tasks) > 1)

        _clear_layout(self.cards_layout)
        if not tasks:
            empty = QLabel(
                f"<b>{tr('list.empty_title', label=tr('context.' + context + '.list').lower())}</b><br>"
                f"{tr('list.empty_hint')}"
            )
            empty.setAlignment(Qt.AlignCenter)
            empty.setWordWrap(True)
            self.cards_layout.addWidget(empty)
        for task in tasks:
            card = TaskCard(task)
            card.complete_clicked.connect(self.complete_requested.emit)
            card.edit_clicked.connect(self.edit_requested.emit)
            card.delete_clicked.connect(self.delete_requested.emit)
            self.cards_layout.addWidget(card)

        if completed_today:
            titles = ", ".join(t.title for t in completed_today)
            self.completed_label.setText(f"<b>{tr('list.completed_today')}:</b> {titles}")
            self.completed_label.show()
        else:
            self.completed_label.hide()


class DashboardView(QWidget):
    """Completion statistics"""

    close_requested = Signal()
    export_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        header.addWidget(_heading(tr("dashboard.title")), stretch=1)
        export_btn = QPushButton(tr("dashboard.export"))
        export_btn.clicked.connect(self.export_requested.emit)
        header.addWidget(export_btn)
        close_btn = QPushButton(tr("dashboard.close"))
        close_btn.clicked.connect(self.close_requested.emit)
        header.addWidget(close_btn)
        layout.addLayout(header)

        self.total_label = _heading("0", 32)
        layout.addWidget(self.total_label, alignment=Qt.AlignHCenter)
        total_caption = QLabel(tr("dashboard.total"))
        total_caption.setStyleSheet("color: gray;")
        layout.addWidget(total_caption, alignment=Qt.AlignHCenter)

        layout.addWidget(_heading(tr("dashboard.by_context"), 13))
        self.context_grid = QGridLayout()
        self.context_bars: Dict[str, QProgressBar] = {}
        self.context_counts: Dict[str, QLabel] = {}
        for row, context in enumerate(TaskContext):
            self.context_grid.addWidget(QLabel(tr("context." + context.value)), row, 0)
            bar = QProgressBar()
            bar.setRange(0, 100)
            bar.setTextVisible(False)
            bar.setStyleSheet(f"QProgressBar::chunk {{ background-color: {CONTEXT_COLORS[context.value]}; }}")
            self.context_grid.addWidget(bar, row, 1)
            count_label = QLabel("")
            self.context_grid.addWidget(count_label, row, 2)
            self.context_bars[context.value] = bar
            self.context_counts[context.value] = count_label
        layout.addLayout(self.context_grid)

        layout.addWidget(_heading(tr("dashboard.last_days"), 13))
        self.days_layout = QHBoxLayout()
        layout.addLayout(self.days_layout)

        self.peak_title = _heading(tr("dashboard.peak_hours"), 13)
        layout.addWidget(self.peak_title)
        self.peak_label = QLabel("")
        layout.addWidget(self.peak_label)
        layout.addStretch()

    @staticmethod
    def _day_style(count: int, intensity: float) -> str:
        if count == 0:
            return "background-color: #f1f5f9; color: #94a3b8;"
        if intensity > 0.7:
            return "background-color: #16a34a; color: white;"
        if intensity > 0.4:
            return "background-color: #4ade80; color: white;"
        return "background-color: #bbf7d0; color: #166534;"

    def render(self, summary: DashboardSummary):
        self.total_label.setText(str(summary.total))

        for share in summary.by_context:
            self.context_bars[share.context].setValue(round(share.percentage))
            self.context_counts[share.context].setText(
                tr("dashboard.context_share", count=share.count, percentage=share.percentage)
            )

        _clear_layout(self.days_layout)
        for day in summary.last_days:
            cell = QLabel(f"{day.day.strftime('%a')}\n{day.count}")
            cell.setAlignment(Qt.AlignCenter)
            cell.setMinimumSize(44, 44)
            cell.setStyleSheet(f"border-radius: 8px; {self._day_style(day.count, day.intensity)}")
            cell.setToolTip(tr("dashboard.day_tooltip", count=day.count, day=day.day.isoformat()))
            self.days_layout.addWidget(cell)

        has_peaks = bool(summary.peak_hours)
        self.peak_title.setVisible(has_peaks)
        self.peak_label.setVisible(has_peaks)
        self.peak_label.setText("   ".join(f"{p.label}: {p.count}" for p in summary.peak_hours))
