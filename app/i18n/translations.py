# -*- coding: utf-8 -*-
"""
Translation dictionaries for German and English.

This module contains all translatable strings for the WorkTime application,
including the column labels used by the CSV and PDF exports.
"""

TRANSLATIONS = {
    "en": {
        # Application
        "app.name": "WorkTime",

        # Main window
        "main.start_work": "Start work",
        "main.stop_work": "Stop work",
        "main.start_break": "Start break",
        "main.end_break": "End break",
        "main.working_time": "Working time: {time}",
        "main.paused_since": "On break since {time}",
        "main.started_at": "Started: {time}",
        "main.break_minutes": " ({minutes} min. break)",

        # Menu
        "menu.file": "Menu",
        "menu.new_entry": "New entry...",
        "menu.export_csv": "CSV export",
        "menu.export_pdf": "PDF export",
        "menu.language": "Language",
        "menu.about": "About this app",
        "menu.quit": "Quit",

        # Entry list
        "list.title": "Entries",
        "list.empty": "No entries yet",
        "list.total": "Total working time: {hours} hours",
        "list.running": "running",
        "list.break": "Break: {minutes} min. | ",
        "list.worked": "Working time: {time}",
        "list.edit": "Edit",
        "list.delete": "Delete",
        "list.confirm_delete": "Delete the entry from {date}?",

        # Entry dialog
        "dialog.edit": "Edit entry",
        "dialog.new": "New entry",
        "dialog.date": "Date",
        "dialog.start_time": "Start time",
        "dialog.end_time": "End time",
        "dialog.no_end_time": "No end time (still open)",
        "dialog.break_duration": "Break (minutes)",
        "dialog.project": "Project",
        "dialog.notes": "Notes",
        "dialog.working_time": "Working time:",
        "dialog.cancel": "Cancel",
        "dialog.save": "Save",
        "dialog.required": "is required",
        "dialog.negative": "must not be negative",

        # Export
        "export.csv_prefix": "Work_Hours",
        "export.pdf_prefix": "Timesheet",
        "export.pdf_title": "Timesheet",
        "export.exported_on": "Exported on: {date}",
        "export.col_date": "Date",
        "export.col_start": "Start",
        "export.col_end": "End",
        "export.col_break_csv": "Breaks (min)",
        "export.col_break_pdf": "Break (min)",
        "export.col_project": "Project",
        "export.col_notes": "Notes",
        "export.col_worked_csv": "Working time (h)",
        "export.col_worked_pdf": "Working time",
        "export.total": "Total:",
        "export.saved": "Exported to {path}",
        "export.nothing": "There are no entries to export.",
        "export.failed": "Export failed:\n{error}",

        # About
        "about.title": "About WorkTime",
        "about.text": (
            "WorkTime records your working hours without having to write them down "
            "somewhere else every time. Keeping your own record of the hours you "
            "worked protects you if they are ever disputed."
        ),
        "about.close": "Close",

        # Errors
        "error.title": "Error",
    },
    "de": {
        # Application
        "app.name": "WorkTime",

        # Main window
        "main.start_work": "Arbeitsbeginn",
        "main.stop_work": "Arbeitsende",
        "main.start_break": "Pause starten",
        "main.end_break": "Pause beenden",
        "main.working_time": "Arbeitszeit: {time}",
        "main.paused_since": "Pausiert seit {time}",
        "main.started_at": "Beginn: {time}",
        "main.break_minutes": " ({minutes} Min. Pause)",

        # Menu
        "menu.file": "Menü",
        "menu.new_entry": "Neuer Eintrag...",
        "menu.export_csv": "CSV Export",
        "menu.export_pdf": "PDF Export",
        "menu.language": "Sprache",
        "menu.about": "Über diese App",
        "menu.quit": "Beenden",

        # Entry list
        "list.title": "Einträge",
        "list.empty": "Keine Einträge vorhanden",
        "list.total": "Gesamtarbeitszeit: {hours} Stunden",
        "list.running": "läuft",
        "list.break": "Pause: {minutes} Min. | ",
        "list.worked": "Arbeitszeit: {time}",
        "list.edit": "Bearbeiten",
        "list.delete": "Löschen",
        "list.confirm_delete": "Eintrag vom {date} löschen?",

        # Entry dialog
        "dialog.edit": "Eintrag bearbeiten",
        "dialog.new": "Neuer Eintrag",
        "dialog.date": "Datum",
        "dialog.start_time": "Startzeit",
        "dialog.end_time": "Endzeit",
        "dialog.no_end_time": "Keine Endzeit (noch offen)",
        "dialog.break_duration": "Pause (Minuten)",
        "dialog.project": "Projekt",
        "dialog.notes": "Notizen",
        "dialog.working_time": "Arbeitszeit:",
        "dialog.cancel": "Abbrechen",
        "dialog.save": "Speichern",
        "dialog.required": "ist erforderlich",
        "dialog.negative": "darf nicht negativ sein",

        # Export
        "export.csv_prefix": "Arbeitszeiten",
        "export.pdf_prefix": "Arbeitszeitnachweis",
        "export.pdf_title": "Arbeitszeitnachweis",
        "export.exported_on": "Export vom: {date}",
        "export.col_date": "Datum",
        "export.col_start": "Start",
        "export.col_end": "Ende",
        "export.col_break_csv": "Pausen (Min)",
        "export.col_break_pdf": "Pause (Min)",
        "export.col_project": "Projekt",
        "export.col_notes": "Notizen",
        "export.col_worked_csv": "Arbeitszeit (Std)",
        "export.col_worked_pdf": "Arbeitszeit",
        "export.total": "Gesamtzeit:",
        "export.saved": "Exportiert nach {path}",
        "export.nothing": "Es gibt keine Einträge zum Exportieren.",
        "export.failed": "Export fehlgeschlagen:\n{error}",

        # About
        "about.title": "Über WorkTime",
        "about.text": (
            "WorkTime hält deine Arbeitszeit fest, ohne dass du jedes Mal extra "
            "woanders mitschreiben musst. Eine eigene Aufzeichnung deiner Stunden "
            "schützt dich, falls sie einmal bestritten werden."
        ),
        "about.close": "Schließen",

        # Errors
        "error.title": "Fehler",
    },
}
