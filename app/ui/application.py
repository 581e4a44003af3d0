"""
WorkTime Application - Main UI entry point.

Architecture Decision: Presentation Layer
This layer only handles UI logic. Business logic is delegated to Services.
"""

import sys
import asyncio
import logging
from PySide6.QtWidgets import QApplication, QMessageBox, QStyleFactory
from PySide6.QtGui import QColor, QPalette

from app.i18n import set_language, get_language
from app.infra.config import get_settings
from app.infra.db import init_db
from app.services import WorkTimeService
from .main_window import MainWindow

logger = logging.getLogger(__name__)


def _dark_palette() -> QPalette:
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor(33, 33, 33))
    palette.setColor(QPalette.WindowText, QColor(224, 224, 224))
    palette.setColor(QPalette.Base, QColor(45, 45, 45))
    palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    palette.setColor(QPalette.Text, QColor(224, 224, 224))
    palette.setColor(QPalette.Button, QColor(33, 150, 243))
    palette.setColor(QPalette.ButtonText, QColor(255, 255, 255))
    palette.setColor(QPalette.Highlight, QColor(33, 150, 243))
    palette.setColor(QPalette.HighlightedText, QColor(255, 255, 255))
    palette.setColor(QPalette.ToolTipBase, QColor(66, 66, 66))
    palette.setColor(QPalette.ToolTipText, QColor(255, 255, 255))
    return palette


class WorkTimeApp:
    """
    Main application class: owns the Qt application, the asyncio loop used
    for persistence and the WorkTimeService controller.
    """

    def __init__(self):
        self.app = QApplication(sys.argv)

        # Settings
        self.settings = get_settings()
        set_language(self.settings.preferences.language)
        self._apply_theme(self.settings.preferences.theme)

        # Event loop for async operations
        self.loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self.loop)

        # Services
        self.service = WorkTimeService()
        self.main_window = None

        self._init()

    def _apply_theme(self, theme: str):
        """Apply the window palette ('dark' or 'light')"""
        self.app.setStyle(QStyleFactory.create("Fusion"))
        if theme == "dark":
            self.app.setPalette(_dark_palette())
        else:
            self.app.setPalette(self.app.style().standardPalette())

    def _init(self):
        """Open the database and restore the saved state"""
        try:
            self.loop.run_until_complete(init_db())
            self.loop.run_until_complete(self.service.load())
        except Exception as e:
            logger.exception("Initialization failed")
            QMessageBox.critical(None, "Initialization Error",
                                 f"Failed to initialize application:\n{e}")
            raise

        self.service.set_export_language(get_language())
        self._show_main_window()

    def _show_main_window(self):
        self.main_window = MainWindow(
            self.service,
            self.settings.get_export_dir(),
            show_seconds=self.settings.preferences.show_seconds,
            loop=self.loop,
        )
        self.main_window.language_selected.connect(self._change_language)
        self.main_window.export_dir_chosen.connect(self.settings.remember_export_dir)
        self.main_window.quit_requested.connect(self._quit_application)
        self.main_window.show()

    def _change_language(self, lang: str):
        """Switch UI and export language and remember the choice"""
        # Open windows retranslate themselves through the language callbacks
        set_language(lang)
        self.service.set_export_language(get_language())
        self.settings.preferences.language = get_language()
        self.settings.save_preferences()

    def _quit_application(self):
        """Quit the application (a running session stays saved)"""
        self.loop.close()
        self.app.quit()

    def run(self):
        """Run the application"""
        return self.app.exec()
