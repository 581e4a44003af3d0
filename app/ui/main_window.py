"""
Main Window - clock, work controls and the entry list.

Architecture Decision: Presentation only
Every action is forwarded to WorkTimeService; the window re-renders from the
service's state afterwards and never keeps its own copy of entries.
"""

import asyncio
import datetime
import logging
from pathlib import Path
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QTreeWidget, QTreeWidgetItem, QMenu, QMessageBox, QFileDialog
)
from PySide6.QtCore import Qt, QTimer, QLocale, Signal
from PySide6.QtGui import QAction, QActionGroup, QFont

from app.domain.calculations import (
    format_clock, format_worked_time, group_by_calendar_day, sort_for_display,
    total_worked_hours, worked_minutes
)
from app.domain.models import TimeEntry
from app.i18n import (
    tr, get_language, get_available_languages, on_language_changed, remove_language_callback
)
from app.services import WorkTimeService
from .dialogs import TimeEntryDialog, AboutDialog

logger = logging.getLogger(__name__)

ENTRY_ID_ROLE = Qt.UserRole


class MainWindow(QMainWindow):
    """
    Single window of the application.

    Features:
    - Live clock and date
    - Start work / break / stop work buttons with the running work time
    - Entries grouped by day, newest first, with edit and delete
    - CSV/PDF export, language switch and about box in the menu
    """

    # Signals
    language_selected = Signal(str)
    export_dir_chosen = Signal(str)
    quit_requested = Signal()

    def __init__(self, service: WorkTimeService, export_dir, show_seconds: bool = True,
                 loop=None, parent=None):
        super().__init__(parent)
        self.service = service
        self.export_dir = Path(export_dir)
        self.show_seconds = show_seconds
        self.loop = loop

        self.setMinimumSize(480, 640)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self.retranslate_ui()

        # Wall clock, independent of the work session
        self.clock_timer = QTimer(self)
        self.clock_timer.timeout.connect(self._update_clock)
        self.clock_timer.start(1000)

        # Register for language changes
        on_language_changed(self._on_language_change)

        self.refresh()

    @property
    def time_format(self) -> str:
        return "%H:%M:%S" if self.show_seconds else "%H:%M"

    def _setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(16, 16, 16, 16)

        self.clock_label = QLabel()
        clock_font = QFont("monospace")
        clock_font.setPointSize(36)
        clock_font.setBold(True)
        self.clock_label.setFont(clock_font)
        self.clock_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.clock_label)

        self.date_label = QLabel()
        self.date_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.date_label)

        self.status_label = QLabel()
        self.status_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.status_label)

        self.started_label = QLabel()
        self.started_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.started_label)

        buttons = QHBoxLayout()
        self.start_btn = QPushButton()
        self.start_btn.setMinimumHeight(40)
        self.start_btn.clicked.connect(self._start_work)
        buttons.addWidget(self.start_btn)

        self.break_btn = QPushButton()
        self.break_btn.setMinimumHeight(40)
        self.break_btn.clicked.connect(self._toggle_break)
        buttons.addWidget(self.break_btn)

        self.stop_btn = QPushButton()
        self.stop_btn.setMinimumHeight(40)
        self.stop_btn.setStyleSheet("QPushButton { background-color: #d32f2f; color: white; }")
        self.stop_btn.clicked.connect(self._stop_work)
        buttons.addWidget(self.stop_btn)
        layout.addLayout(buttons)

        self.entries_title = QLabel()
        title_font = QFont()
        title_font.setPointSize(13)
        title_font.setBold(True)
        self.entries_title.setFont(title_font)
        layout.addWidget(self.entries_title)

        self.total_label = QLabel()
        self.total_label.setStyleSheet("color: #2196f3;")
        layout.addWidget(self.total_label)

        self.entry_tree = QTreeWidget()
        self.entry_tree.setHeaderHidden(True)
        self.entry_tree.setContextMenuPolicy(Qt.CustomContextMenu)
        self.entry_tree.customContextMenuRequested.connect(self._show_entry_menu)
        self.entry_tree.itemDoubleClicked.connect(self._on_item_double_clicked)
        layout.addWidget(self.entry_tree, stretch=1)

    def _setup_menu(self):
        self.file_menu = self.menuBar().addMenu("")

        self.new_action = QAction(self)
        self.new_action.triggered.connect(self._new_entry)
        self.file_menu.addAction(self.new_action)

        self.file_menu.addSeparator()

        self.csv_action = QAction(self)
        self.csv_action.triggered.connect(self._export_csv)
        self.file_menu.addAction(self.csv_action)

        self.pdf_action = QAction(self)
        self.pdf_action.triggered.connect(self._export_pdf)
        self.file_menu.addAction(self.pdf_action)

        self.file_menu.addSeparator()

        self.language_menu = self.file_menu.addMenu("")
        group = QActionGroup(self)
        for code, name in get_available_languages():
            action = QAction(name, self, checkable=True)
            action.setChecked(code == get_language())
            action.triggered.connect(lambda checked, c=code: self.language_selected.emit(c))
            group.addAction(action)
            self.language_menu.addAction(action)

        self.about_action = QAction(self)
        self.about_action.triggered.connect(self._show_about)
        self.file_menu.addAction(self.about_action)

        self.file_menu.addSeparator()

        self.quit_action = QAction(self)
        self.quit_action.triggered.connect(self.quit_requested.emit)
        self.file_menu.addAction(self.quit_action)

    def _connect_signals(self):
        # Bound methods only: Qt drops them together with the window
        timer = self.service.timer
        timer.tick.connect(self._on_tick)
        timer.work_started.connect(self.refresh)
        timer.work_stopped.connect(self._on_work_stopped)
        timer.break_started.connect(self._update_session_labels)
        timer.break_ended.connect(self._on_break_ended)

    def _on_language_change(self, lang):
        self.retranslate_ui()
        self.refresh()

    def retranslate_ui(self):
        """Update UI strings on language change"""
        self.setWindowTitle(tr("app.name"))
        self.start_btn.setText(tr("main.start_work"))
        self.stop_btn.setText(tr("main.stop_work"))
        self.entries_title.setText(tr("list.title"))

        self.file_menu.setTitle(tr("menu.file"))
        self.new_action.setText(tr("menu.new_entry"))
        self.csv_action.setText(tr("menu.export_csv"))
        self.pdf_action.setText(tr("menu.export_pdf"))
        self.language_menu.setTitle(tr("menu.language"))
        self.about_action.setText(tr("menu.about"))
        self.quit_action.setText(tr("menu.quit"))

    def closeEvent(self, event):
        remove_language_callback(self._on_language_change)
        super().closeEvent(event)

    # --- Rendering ---

    def refresh(self):
        """Re-render controls and the entry list from the service"""
        self._update_clock()
        self._update_session_labels()
        self._render_entries()

    def _update_clock(self):
        now = datetime.datetime.now()
        self.clock_label.setText(now.strftime(self.time_format))
        self.date_label.setText(QLocale().toString(now.date(), "dddd, dd. MMMM yyyy"))

    def _on_tick(self, formatted: str, seconds: int):
        if not self.service.timer.is_on_break():
            self.status_label.setText(
                tr("main.working_time", time=format_clock(seconds, self.show_seconds)))

    def _on_work_stopped(self, entry: TimeEntry):
        self.refresh()

    def _on_break_ended(self, minutes: int):
        self._update_session_labels()

    def _update_session_labels(self):
        timer = self.service.timer
        session = timer.session
        working = timer.is_working()

        self.start_btn.setVisible(not working)
        self.break_btn.setVisible(working)
        self.stop_btn.setVisible(working)
        self.status_label.setVisible(working)
        self.started_label.setVisible(working)
        if not working:
            return

        if session.on_break:
            self.break_btn.setText(tr("main.end_break"))
            self.status_label.setText(
                tr("main.paused_since", time=session.break_start.strftime(self.time_format)))
        else:
            self.break_btn.setText(tr("main.start_break"))
            seconds = timer.elapsed_worked_seconds()
            self._on_tick(format_clock(seconds), seconds)

        started = tr("main.started_at", time=session.start_time.strftime(self.time_format))
        if session.total_break_time > 0:
            started += tr("main.break_minutes", minutes=session.total_break_time)
        self.started_label.setText(started)

    def _render_entries(self):
        entries = self.service.entries
        self.entry_tree.clear()
        self.total_label.setText(tr("list.total", hours=f"{total_worked_hours(entries):.2f}"))

        if not entries:
            placeholder = QTreeWidgetItem([tr("list.empty")])
            placeholder.setFlags(Qt.NoItemFlags)
            self.entry_tree.addTopLevelItem(placeholder)
            return

        locale = QLocale()
        for day, day_entries in group_by_calendar_day(sort_for_display(entries)).items():
            day_item = QTreeWidgetItem([locale.toString(day, "dddd, dd. MMMM yyyy")])
            font = day_item.font(0)
            font.setBold(True)
            day_item.setFont(0, font)
            day_item.setFlags(Qt.ItemIsEnabled)
            for entry in day_entries:
                day_item.addChild(self._entry_item(entry))
            self.entry_tree.addTopLevelItem(day_item)
            day_item.setExpanded(True)

    @staticmethod
    def _entry_item(entry: TimeEntry) -> QTreeWidgetItem:
        end = entry.end_time.strftime("%H:%M") if entry.end_time else tr("list.running")
        title = f"{entry.start_time:%H:%M} - {end}"
        if entry.project:
            title += f"  ({entry.project})"

        details = ""
        if entry.break_duration > 0:
            details += tr("list.break", minutes=entry.break_duration)
        worked = format_worked_time(worked_minutes(entry)) if entry.end_time else "-"
        details += tr("list.worked", time=worked)
        if entry.notes:
            details += f"\n{entry.notes}"

        item = QTreeWidgetItem([f"{title}\n{details}"])
        item.setData(0, ENTRY_ID_ROLE, entry.id)
        return item

    # --- Actions ---

    def _run(self, coro):
        """Run a service coroutine to completion, reporting failures"""
        try:
            loop = self.loop or asyncio.get_event_loop()
            return loop.run_until_complete(coro)
        except Exception as e:
            logger.exception("Action failed")
            QMessageBox.warning(self, tr("error.title"), str(e))
            return None

    def _start_work(self):
        self._run(self.service.start_work())
        self.refresh()

    def _toggle_break(self):
        self._run(self.service.toggle_break())
        self._update_session_labels()

    def _stop_work(self):
        self._run(self.service.stop_work())
        self.refresh()

    def _new_entry(self):
        self._edit_entry(None)

    def _show_about(self):
        AboutDialog(self).exec()

    def _entry_for_item(self, item):
        if item is None:
            return None
        entry_id = item.data(0, ENTRY_ID_ROLE)
        return self.service.store.get(entry_id) if entry_id else None

    def _on_item_double_clicked(self, item, column):
        entry = self._entry_for_item(item)
        if entry:
            self._edit_entry(entry)

    def _show_entry_menu(self, pos):
        entry = self._entry_for_item(self.entry_tree.itemAt(pos))
        if entry is None:
            return
        menu = QMenu(self)
        edit_action = menu.addAction(tr("list.edit"))
        delete_action = menu.addAction(tr("list.delete"))
        chosen = menu.exec(self.entry_tree.viewport().mapToGlobal(pos))
        if chosen == edit_action:
            self._edit_entry(entry)
        elif chosen == delete_action:
            self._delete_entry(entry)

    def _edit_entry(self, entry):
        dialog = TimeEntryDialog(entry, self)
        if dialog.exec():
            self._run(self.service.save_entry(dialog.get_data()))
            self.refresh()

    def _delete_entry(self, entry: TimeEntry):
        answer = QMessageBox.question(
            self, tr("list.delete"),
            tr("list.confirm_delete", date=entry.date.strftime("%d.%m.%Y"))
        )
        if answer == QMessageBox.Yes:
            self._run(self.service.delete_entry(entry.id))
            self.refresh()

    def _export(self, export, title_key: str):
        if not self.service.entries:
            self.statusBar().showMessage(tr("export.nothing"), 3000)
            return
        directory = QFileDialog.getExistingDirectory(self, tr(title_key), str(self.export_dir))
        if not directory:
            return
        self.export_dir = Path(directory)
        self.export_dir_chosen.emit(directory)
        try:
            path = export(directory)
        except OSError as e:
            logger.exception("Export failed")
            QMessageBox.warning(self, tr("error.title"), tr("export.failed", error=e))
            return
        if path:
            self.statusBar().showMessage(tr("export.saved", path=path), 5000)

    def _export_csv(self):
        self._export(self.service.export_csv, "menu.export_csv")

    def _export_pdf(self):
        self._export(self.service.export_pdf, "menu.export_pdf")
