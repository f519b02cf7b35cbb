"""
Small overlay widgets: the reminder banner and the completion toast.
"""

from PySide6.QtWidgets import QFrame, QHBoxLayout, QVBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, Signal, QTimer

from contexttasks.i18n import tr, tr_count


class ReminderBanner(QFrame):
    """
    Banner shown above the context picker when open tasks are waiting.
    """

    dismissed = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("reminderBanner")
        self.setStyleSheet("""
            QFrame#reminderBanner {
                background-color: #e3f2fd;
                border: 1px solid #90caf9;
                border-radius: 10px;
            }
            QLabel { color: #0d47a1; }
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)

        text_layout = QVBoxLayout()
        self.title_label = QLabel(tr("reminder.title"))
        self.title_label.setStyleSheet("font-weight: bold;")
        self.body_label = QLabel("")
        self.body_label.setWordWrap(True)
        text_layout.addWidget(self.title_label)
        text_layout.addWidget(self.body_label)
        layout.addLayout(text_layout, stretch=1)

        self.dismiss_btn = QPushButton(tr("reminder.dismiss"))
        self.dismiss_btn.setCursor(Qt.PointingHandCursor)
        self.dismiss_btn.clicked.connect(self.dismissed.emit)
        layout.addWidget(self.dismiss_btn)

    def set_task_count(self, count: int):
        self.body_label.setText(tr_count("reminder.body", count))


class CompletionToast(QLabel):
    """
    Short "task completed" message that hides itself after a delay.
    """

    expired = Signal()

    def __init__(self, duration_ms: int, parent=None):
        super().__init__(tr("feedback.completed"), parent)
        self.setAlignment(Qt.AlignCenter)
        self.setStyleSheet("""
            QLabel {
                background-color: white;
                color: #1b5e20;
                border: 2px solid #a5d6a7;
                border-radius: 14px;
                padding: 14px 24px;
                font-size: 16px;
                font-weight: bold;
            }
        """)
        self.timer = QTimer(self)
        self.timer.setSingleShot(True)
        self.timer.setInterval(duration_ms)
        self.timer.timeout.connect(self.expired.emit)
        self.hide()

    def flash(self):
        """Show the toast and restart the hide countdown"""
        self.show()
        self.raise_()
        self.timer.start()
