"""Export — fixed column order, visible-row order, filenames, XLSX content."""

import csv
import io
from datetime import date

from openpyxl import load_workbook

from nurse_registry.client.export import (
    export_filename, render_csv, render_xlsx, write_export,
)
from nurse_registry.core.domain_types import EXPORT_COLUMNS, ExportFormat
from nurse_registry.core.nurse_record import NurseRecord

ROWS = [
    NurseRecord(2, "Lee, Ann", "RN-2", "1990-01-01", 34),
    NurseRecord(1, "Bob", "RN-1", "1985-03-15", 39),
]


def test_csv_header_and_row_order():
    parsed = list(csv.reader(io.StringIO(render_csv(ROWS))))
    assert parsed[0] == list(EXPORT_COLUMNS)
    assert parsed[1] == ["Lee, Ann", "RN-2", "1990-01-01", "34"]
    assert parsed[2] == ["Bob", "RN-1", "1985-03-15", "39"]


def test_csv_quotes_embedded_commas():
    assert '"Lee, Ann"' in render_csv(ROWS)


def test_xlsx_sheet_contents():
    workbook = load_workbook(io.BytesIO(render_xlsx(ROWS)))
    sheet = workbook["Nurses"]
    values = [list(row) for row in sheet.iter_rows(values_only=True)]
    assert values[0] == list(EXPORT_COLUMNS)
    assert values[1] == ["Lee, Ann", "RN-2", "1990-01-01", 34]
    assert len(values) == 3


def test_filename_uses_collection_and_date():
    assert export_filename(ExportFormat.CSV, date(2024, 5, 6)) == "nurses_2024-05-06.csv"
    assert export_filename("xlsx", date(2024, 5, 6)) == "nurses_2024-05-06.xlsx"


def test_write_export_creates_file(tmp_path):
    path = write_export(ROWS, ExportFormat.XLSX, tmp_path / "out", date(2024, 5, 6))
    assert path == tmp_path / "out" / "nurses_2024-05-06.xlsx"
    assert path.read_bytes()[:2] == b"PK"
