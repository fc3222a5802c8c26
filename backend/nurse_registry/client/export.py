"""Export — CSV and XLSX documents from the currently visible nurse sequence.

Invariants:
    - Column order fixed: Name, License Number, Date of Birth, Age
    - Rows emitted in the order given (caller passes the sorted+filtered sequence)
    - Date of Birth written as the raw ISO string; Age as an integer
    - Filename derived from the collection name and export date: nurses_<YYYY-MM-DD>.<ext>

Design Decisions:
    - csv module handles quoting; openpyxl writes the workbook (sheet "Nurses")
"""

import csv
import io
from datetime import date
from pathlib import Path
from typing import Iterable

from openpyxl import Workbook

from nurse_registry.core.domain_types import EXPORT_COLUMNS, ExportFormat
from nurse_registry.core.nurse_record import NurseRecord

COLLECTION_NAME = "nurses"
SHEET_TITLE = "Nurses"


def export_rows(records: Iterable[NurseRecord]) -> list[list]:
    return [[r.name, r.license_number, r.dob, r.age] for r in records]


def render_csv(records: Iterable[NurseRecord]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_COLUMNS)
    writer.writerows(export_rows(records))
    return buffer.getvalue()


def render_xlsx(records: Iterable[NurseRecord]) -> bytes:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    sheet.append(list(EXPORT_COLUMNS))
    for row in export_rows(records):
        sheet.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def export_filename(fmt: ExportFormat, today: date | None = None) -> str:
    today = today or date.today()
    return f"{COLLECTION_NAME}_{today.isoformat()}.{ExportFormat(fmt).value}"


def write_export(
    records: Iterable[NurseRecord],
    fmt: ExportFormat,
    directory: Path | str = ".",
    today: date | None = None,
) -> Path:
    """Write the export document into directory and return its path."""
    fmt = ExportFormat(fmt)
    path = Path(directory) / export_filename(fmt, today)
    path.parent.mkdir(parents=True, exist_ok=True)
    if fmt is ExportFormat.CSV:
        path.write_text(render_csv(records), encoding="utf-8")
    else:
        path.write_bytes(render_xlsx(records))
    return path
