#!/usr/bin/env python

"""
ContextTasks - Main Entry Point

A small personal task tracker: tasks are grouped by the energy they need
(quick / focused / low-energy), completions feed a local statistics
dashboard, and an in-app banner reminds you of open tasks.

Usage:
    python main.py

Requirements:
    - Python 3.10+
    - See pyproject.toml for dependencies
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from contexttasks.infra.config import get_settings, configure_logging


def main():
    """Main entry point"""
    configure_logging(get_settings())

    from contexttasks.ui import ContextTasksApp
    app = ContextTasksApp()
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
