"""
Export Service - CSV and PDF timesheets.

Both formats show the same seven columns per entry: date, start, end, break
minutes, project, notes and worked hours. The PDF adds a title, the export
date and a footer row with the total. Exporting an empty entry list does
nothing and produces no file.
"""

import csv
import datetime
import io
import logging
from pathlib import Path
from typing import List, Optional, Sequence
from xml.sax.saxutils import escape

from pydantic import BaseModel, Field
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.domain.calculations import total_worked_hours, worked_hours
from app.domain.models import TimeEntry
from app.i18n import get_language, translate

logger = logging.getLogger(__name__)

HEADER_BACKGROUND = colors.HexColor("#424242")
FOOTER_BACKGROUND = colors.HexColor("#DCDCDC")
PDF_COLUMN_WIDTHS = [22 * mm, 14 * mm, 14 * mm, 18 * mm, 30 * mm, 56 * mm, 28 * mm]


class ExportLabels(BaseModel):
    """Locale-dependent texts of an export"""
    csv_prefix: str
    pdf_prefix: str
    pdf_title: str
    exported_on: str = Field(..., description="Template with a {date} placeholder")
    csv_columns: List[str] = Field(..., min_length=7, max_length=7)
    pdf_columns: List[str] = Field(..., min_length=7, max_length=7)
    total: str

    @classmethod
    def for_language(cls, lang: str) -> "ExportLabels":
        """Build the label bundle for 'de' or 'en'"""
        def t(key: str) -> str:
            return translate(lang, key)

        shared = [t("export.col_date"), t("export.col_start"), t("export.col_end")]
        return cls(
            csv_prefix=t("export.csv_prefix"),
            pdf_prefix=t("export.pdf_prefix"),
            pdf_title=t("export.pdf_title"),
            exported_on=t("export.exported_on"),
            csv_columns=shared + [
                t("export.col_break_csv"), t("export.col_project"),
                t("export.col_notes"), t("export.col_worked_csv"),
            ],
            pdf_columns=shared + [
                t("export.col_break_pdf"), t("export.col_project"),
                t("export.col_notes"), t("export.col_worked_pdf"),
            ],
            total=t("export.total"),
        )


def _quote(text: str) -> str:
    """Quote a free-text CSV field, doubling embedded quotes"""
    return '"' + text.replace('"', '""') + '"'


def _end_time(entry: TimeEntry) -> str:
    return entry.end_time.strftime("%H:%M") if entry.end_time else ""


class ExportService:
    """
    Renders entry lists as CSV text or PDF documents.

    Never modifies the entries it is given.
    """

    def __init__(self, labels: Optional[ExportLabels] = None):
        self.labels = labels or ExportLabels.for_language(get_language())

    def to_csv(self, entries: Sequence[TimeEntry]) -> Optional[str]:
        """
        Render entries as CSV.

        Returns:
            The CSV text, or None if there are no entries
        """
        if not entries:
            return None

        output = io.StringIO()
        # Labels are quoted only where needed; free text is always quoted
        csv.writer(output, lineterminator='\n').writerow(self.labels.csv_columns)
        for entry in entries:
            output.write(",".join([
                entry.date.strftime("%d.%m.%Y"),
                entry.start_time.strftime("%H:%M"),
                _end_time(entry),
                str(entry.break_duration),
                _quote(entry.project),
                _quote(entry.notes),
                f"{worked_hours(entry):.2f}",
            ]) + "\n")
        return output.getvalue()

    def pdf_table(self, entries: Sequence[TimeEntry]) -> List[List[str]]:
        """Header row, one row per entry and the total footer row"""
        rows = [list(self.labels.pdf_columns)]
        for entry in entries:
            rows.append([
                entry.date.strftime("%d.%m.%Y"),
                entry.start_time.strftime("%H:%M"),
                _end_time(entry),
                str(entry.break_duration),
                entry.project,
                entry.notes,
                f"{worked_hours(entry):.2f} h",
            ])
        rows.append(["", "", "", "", "", self.labels.total, f"{total_worked_hours(entries):.2f} h"])
        return rows

    def to_pdf(self, entries: Sequence[TimeEntry],
               now: Optional[datetime.datetime] = None) -> Optional[bytes]:
        """
        Render entries as a PDF timesheet.

        Args:
            entries: Entries to list
            now: Export timestamp shown below the title

        Returns:
            The PDF document, or None if there are no entries
        """
        if not entries:
            return None
        now = now or datetime.datetime.now()

        styles = getSampleStyleSheet()
        title_style = ParagraphStyle("TimesheetTitle", parent=styles["Title"], fontSize=18,
                                     leading=22, alignment=0)
        cell_style = ParagraphStyle("TimesheetCell", parent=styles["BodyText"], fontSize=8,
                                    leading=10)

        data = self.pdf_table(entries)
        # Free text wraps inside its cell
        for row in data[1:-1]:
            row[4] = Paragraph(escape(row[4]), cell_style)
            row[5] = Paragraph(escape(row[5]), cell_style)

        table = Table(data, colWidths=PDF_COLUMN_WIDTHS, repeatRows=1)
        table.setStyle(TableStyle([
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("FONTSIZE", (0, 0), (-1, -1), 8),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("BACKGROUND", (0, 0), (-1, 0), HEADER_BACKGROUND),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("BACKGROUND", (0, -1), (-1, -1), FOOTER_BACKGROUND),
            ("TEXTCOLOR", (0, -1), (-1, -1), colors.black),
            ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ]))

        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer, pagesize=A4, title=self.labels.pdf_title,
            leftMargin=14 * mm, rightMargin=14 * mm, topMargin=14 * mm, bottomMargin=14 * mm,
        )
        doc.build([
            Paragraph(escape(self.labels.pdf_title), title_style),
            Paragraph(escape(self.labels.exported_on.format(date=now.strftime("%d.%m.%Y"))),
                      styles["Normal"]),
            Spacer(1, 6 * mm),
            table,
        ])
        return buffer.getvalue()

    @staticmethod
    def output_path(directory: Path, prefix: str, extension: str,
                    now: Optional[datetime.datetime] = None) -> Path:
        """<directory>/<prefix>_<yyyy-MM-dd>.<extension>"""
        now = now or datetime.datetime.now()
        return Path(directory) / f"{prefix}_{now:%Y-%m-%d}.{extension}"

    def export_csv(self, entries: Sequence[TimeEntry], directory: Path,
                   now: Optional[datetime.datetime] = None) -> Optional[Path]:
        """Write the CSV export file. Returns None (no file) for no entries."""
        content = self.to_csv(entries)
        if content is None:
            logger.info("No entries, CSV export skipped")
            return None

        output_file = self.output_path(directory, self.labels.csv_prefix, "csv", now)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, 'w', encoding='utf-8', newline='') as f:
            f.write(content)

        logger.info(f"CSV export written: {output_file}")
        return output_file

    def export_pdf(self, entries: Sequence[TimeEntry], directory: Path,
                   now: Optional[datetime.datetime] = None) -> Optional[Path]:
        """Write the PDF export file. Returns None (no file) for no entries."""
        content = self.to_pdf(entries, now)
        if content is None:
            logger.info("No entries, PDF export skipped")
            return None

        output_file = self.output_path(directory, self.labels.pdf_prefix, "pdf", now)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, 'wb') as f:
            f.write(content)

        logger.info(f"PDF export written: {output_file}")
        return output_file
