"""UI layer - PySide6 GUI components"""

from .application import ContextTasksApp
from .main_window import MainWindow

__all__ = ["ContextTasksApp", "MainWindow"]
