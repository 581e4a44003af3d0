"""
Tests for CSV and PDF exports.
"""

from datetime import date, datetime

import pytest

from app.services.export_service import ExportLabels, ExportService
from conftest import make_entry

NOW = datetime(2026, 3, 31, 18, 0)


@pytest.fixture
def entries():
    return [
        make_entry(date(2026, 3, 2), "09:00", "17:00", break_minutes=30,
                   project="Website", notes='Call with "ACME", follow-up'),
        make_entry(date(2026, 3, 3), "08:00", "12:15"),
    ]


@pytest.fixture
def english():
    return ExportService(ExportLabels.for_language("en"))


@pytest.fixture
def german():
    return ExportService(ExportLabels.for_language("de"))


class TestCsv:

    def test_rows(self, english, entries):
        lines = english.to_csv(entries).split("\n")

        assert lines[0] == "Date,Start,End,Breaks (min),Project,Notes,Working time (h)"
        assert lines[1] == '02.03.2026,09:00,17:00,30,"Website","Call with ""ACME"", follow-up",7.50'
        assert lines[2] == '03.03.2026,08:00,12:15,0,"","",4.25'
        assert lines[3] == ""
        assert len(lines) == 4

    def test_german_header(self, german, entries):
        header = german.to_csv(entries).split("\n")[0]
        assert header == "Datum,Start,Ende,Pausen (Min),Projekt,Notizen,Arbeitszeit (Std)"

    def test_empty_list_gives_none(self, english):
        assert english.to_csv([]) is None

    def test_header_labels_are_escaped(self, entries):
        labels = ExportLabels.for_language("en").model_copy(update={
            "csv_columns": ["Date", "Start", "End", "Breaks, min", 'Project "code"', "Notes", "Hours"],
        })
        header = ExportService(labels).to_csv(entries).split("\n")[0]

        assert header == 'Date,Start,End,"Breaks, min","Project ""code""",Notes,Hours'

    def test_open_entry_has_empty_end(self, english):
        csv = english.to_csv([make_entry(date(2026, 3, 4), "10:00")])
        assert csv.split("\n")[1] == '04.03.2026,10:00,,0,"","",0.00'

    def test_break_exceeding_period_exports_zero(self, english):
        csv = english.to_csv([make_entry(date(2026, 3, 4), "10:00", "10:30", break_minutes=45)])
        assert csv.split("\n")[1].endswith(",0.00")

    def test_export_writes_file(self, english, entries, tmp_path):
        path = english.export_csv(entries, tmp_path, NOW)

        assert path == tmp_path / "Work_Hours_2026-03-31.csv"
        assert path.read_text(encoding="utf-8") == english.to_csv(entries)

    def test_export_nothing_writes_no_file(self, german, tmp_path):
        assert german.export_csv([], tmp_path, NOW) is None
        assert list(tmp_path.iterdir()) == []


class TestPdf:

    def test_table_rows_and_total(self, english, entries):
        rows = english.pdf_table(entries)

        assert rows[0] == ["Date", "Start", "End", "Break (min)", "Project", "Notes", "Working time"]
        assert rows[1][-1] == "7.50 h"
        assert rows[2] == ["03.03.2026", "08:00", "12:15", "0", "", "", "4.25 h"]
        assert rows[-1] == ["", "", "", "", "", "Total:", "11.75 h"]
        assert len(rows) == len(entries) + 2

    def test_german_footer(self, german, entries):
        assert german.pdf_table(entries)[-1][5] == "Gesamtzeit:"

    def test_renders_pdf_bytes(self, english, entries):
        content = english.to_pdf(entries, NOW)
        assert content.startswith(b"%PDF")

    def test_empty_list_gives_none(self, english):
        assert english.to_pdf([]) is None

    def test_export_filename(self, german, entries, tmp_path):
        path = german.export_pdf(entries, tmp_path, NOW)

        assert path.name == "Arbeitszeitnachweis_2026-03-31.pdf"
        assert path.read_bytes().startswith(b"%PDF")

    def test_export_nothing_writes_no_file(self, english, tmp_path):
        assert english.export_pdf([], tmp_path, NOW) is None
        assert list(tmp_path.iterdir()) == []


def test_export_does_not_modify_entries(english, entries):
    before = [e.model_copy() for e in entries]
    english.to_csv(entries)
    english.to_pdf(entries, NOW)
    assert entries == before


def test_labels_per_language():
    en = ExportLabels.for_language("en")
    de = ExportLabels.for_language("de")

    assert (en.csv_prefix, en.pdf_prefix) == ("Work_Hours", "Timesheet")
    assert (de.csv_prefix, de.pdf_prefix) == ("Arbeitszeiten", "Arbeitszeitnachweis")
    assert de.exported_on.format(date="31.03.2026") == "Export vom: 31.03.2026"
