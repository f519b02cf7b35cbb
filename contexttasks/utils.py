import sys
from pathlib import Path


def get_resource_path(relative_path: str) -> Path:
    """
    Get absolute path to a bundled resource, works for dev and for PyInstaller.

    Args:
        relative_path: Relative path from project root (e.g., "contexttasks/resources/templates")

    Returns:
        Absolute Path object
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller unpacks bundled data into _MEIPASS
        base_path = Path(sys._MEIPASS)
    else:
        # contexttasks/utils.py -> project root is one level above the package
        base_path = Path(__file__).parent.parent.absolute()

    return base_path / relative_path
