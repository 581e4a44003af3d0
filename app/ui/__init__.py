"""UI layer - PySide6 GUI components"""

from .application import WorkTimeApp
from .dialogs import TimeEntryDialog, AboutDialog
from .main_window import MainWindow

__all__ = ["WorkTimeApp", "TimeEntryDialog", "AboutDialog", "MainWindow"]
