"""
Dialogs for editing entries and the about box.
"""

from typing import Optional
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QDateEdit, QTimeEdit, QTextEdit, QFormLayout,
    QDialogButtonBox, QLineEdit, QSpinBox, QCheckBox
)
from PySide6.QtCore import QDate, QTime

from app.domain.calculations import format_worked_time
from app.domain.editing import EntryDraft, EntryValidationError
from app.domain.models import TimeEntry
from app.i18n import tr


class TimeEntryDialog(QDialog):
    """
    Dialog for creating a new entry or editing an existing one.

    The result is an EntryDraft; validation errors are shown next to the
    offending field and keep the dialog open.
    """

    def __init__(self, entry: Optional[TimeEntry] = None, parent=None):
        super().__init__(parent)
        self.draft = EntryDraft.from_entry(entry) if entry else EntryDraft.blank()
        self.setWindowTitle(tr("dialog.edit") if entry else tr("dialog.new"))
        self.setModal(True)
        self.setMinimumWidth(400)

        self._setup_ui()
        self._fill_form()
        self._update_preview()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.date_edit = QDateEdit()
        self.date_edit.setCalendarPopup(True)
        self.date_error = self._error_label()
        form.addRow(tr("dialog.date"), self.date_edit)
        form.addRow("", self.date_error)

        self.start_edit = QTimeEdit()
        self.start_edit.setDisplayFormat("HH:mm")
        self.start_error = self._error_label()
        form.addRow(tr("dialog.start_time"), self.start_edit)
        form.addRow("", self.start_error)

        self.end_edit = QTimeEdit()
        self.end_edit.setDisplayFormat("HH:mm")
        form.addRow(tr("dialog.end_time"), self.end_edit)

        self.open_check = QCheckBox(tr("dialog.no_end_time"))
        self.open_check.toggled.connect(self._on_open_toggled)
        form.addRow("", self.open_check)

        self.break_spin = QSpinBox()
        self.break_spin.setRange(0, 24 * 60)
        self.break_spin.setSuffix(" min")
        self.break_error = self._error_label()
        form.addRow(tr("dialog.break_duration"), self.break_spin)
        form.addRow("", self.break_error)

        self.project_edit = QLineEdit()
        form.addRow(tr("dialog.project"), self.project_edit)

        self.notes_edit = QTextEdit()
        self.notes_edit.setMaximumHeight(80)
        form.addRow(tr("dialog.notes"), self.notes_edit)

        layout.addLayout(form)

        # Live worked-time preview
        self.preview_label = QLabel()
        layout.addWidget(self.preview_label)

        for widget in (self.date_edit, self.start_edit, self.end_edit):
            widget.editingFinished.connect(self._update_preview)
        self.start_edit.timeChanged.connect(self._update_preview)
        self.end_edit.timeChanged.connect(self._update_preview)
        self.break_spin.valueChanged.connect(self._update_preview)

        button_box = QDialogButtonBox()
        button_box.addButton(tr("dialog.save"), QDialogButtonBox.AcceptRole)
        button_box.addButton(tr("dialog.cancel"), QDialogButtonBox.RejectRole)
        button_box.accepted.connect(self._validate_and_accept)
        button_box.rejected.connect(self.reject)
        layout.addWidget(button_box)

    @staticmethod
    def _error_label() -> QLabel:
        label = QLabel()
        label.setStyleSheet("color: #f44336;")
        label.hide()
        return label

    def _fill_form(self):
        draft = self.draft
        self.date_edit.setDate(QDate(draft.date) if draft.date else QDate.currentDate())
        self.start_edit.setTime(QTime(draft.start_time) if draft.start_time else QTime.currentTime())
        end = draft.end_time or draft.start_time
        self.end_edit.setTime(QTime(end) if end else QTime.currentTime())
        # An edited entry without an end time stays open unless the user sets one
        self.open_check.setChecked(not draft.is_new and draft.end_time is None)
        self.break_spin.setValue(draft.break_duration)
        self.project_edit.setText(draft.project)
        self.notes_edit.setPlainText(draft.notes)

    def _read_form(self) -> EntryDraft:
        return self.draft.model_copy(update={
            "date": self.date_edit.date().toPython(),
            "start_time": self.start_edit.time().toPython(),
            "end_time": None if self.open_check.isChecked() else self.end_edit.time().toPython(),
            "break_duration": self.break_spin.value(),
            "project": self.project_edit.text(),
            "notes": self.notes_edit.toPlainText(),
        })

    def _on_open_toggled(self, checked: bool):
        self.end_edit.setEnabled(not checked)
        self._update_preview()

    def _update_preview(self):
        minutes = self._read_form().preview_minutes()
        self.preview_label.setText(f"{tr('dialog.working_time')} {format_worked_time(minutes)}")

    def _show_errors(self, errors: dict):
        fields = {
            "date": (self.date_error, "dialog.date"),
            "start_time": (self.start_error, "dialog.start_time"),
            "break_duration": (self.break_error, "dialog.break_duration"),
        }
        for name, (label, title_key) in fields.items():
            code = errors.get(name)
            label.setVisible(code is not None)
            if code:
                label.setText(f"{tr(title_key)} {tr('dialog.' + code)}")

    def _validate_and_accept(self):
        """Validate input before accepting"""
        draft = self._read_form()
        try:
            draft.to_entry()
        except EntryValidationError as e:
            self._show_errors(e.errors)
            return
        self.draft = draft
        self.accept()

    def get_data(self) -> EntryDraft:
        """Return the entered data"""
        return self.draft


class AboutDialog(QDialog):
    """Short description of the application"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(tr("about.title"))
        layout = QVBoxLayout(self)

        text = QLabel(tr("about.text"))
        text.setWordWrap(True)
        layout.addWidget(text)

        version = QLabel("Version 1.0.0")
        version.setStyleSheet("color: gray;")
        layout.addWidget(version)

        buttons = QDialogButtonBox()
        buttons.addButton(tr("about.close"), QDialogButtonBox.RejectRole)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
        self.setMinimumWidth(380)
