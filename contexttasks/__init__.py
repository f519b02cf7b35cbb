"""ContextTasks - energy-aware personal task tracker"""

__version__ = "0.1.0"
