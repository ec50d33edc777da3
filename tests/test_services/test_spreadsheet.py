"""Tests for SpreadsheetExporter."""

from openpyxl import load_workbook

from app.schemas.hotel import HotelRecord
from app.services.spreadsheet import (
    COLUMNS,
    SpreadsheetExporter,
    export_filename,
    safe_filename,
)


def _record(n: int, email: str = "null") -> HotelRecord:
    return HotelRecord(
        name=f"Hotel {n}",
        address=f"{n} Rue de Rivoli, Paris",
        website_url=f"https://hotel{n}.fr",
        rating=4.0 + n / 10,
        place_id=f"p{n}",
        photo_url="",
        email=email,
    )


def test_filenames():
    assert export_filename("Paris") == "Paris_hotels.xlsx"
    assert safe_filename("Saint-Étienne") == "Saint-_tienne_hotels.xlsx"
    assert safe_filename("../etc") == "___etc_hotels.xlsx"


def test_write_creates_file_with_header_and_rows(tmp_path):
    exporter = SpreadsheetExporter(tmp_path)
    records = [_record(1, "info@hotel1.fr"), _record(2)]

    path = exporter.write("Paris", records)

    assert path == tmp_path / "Paris_hotels.xlsx"
    sheet = load_workbook(path).active
    rows = list(sheet.iter_rows(values_only=True))
    assert sheet.title == "Hotels"
    assert rows[0] == (
        "Name", "Address", "Website URL", "Rating", "Place ID", "Photo URL", "Email",
    )
    assert len(rows) == 3
    assert rows[1][0] == "Hotel 1"
    assert rows[1][6] == "info@hotel1.fr"
    assert rows[2][4] == "p2"
    assert rows[2][6] == "null"


def test_column_widths(tmp_path):
    sheet = SpreadsheetExporter(tmp_path).build_workbook([]).active
    widths = [sheet.column_dimensions[letter].width for letter in "ABCDEFG"]
    assert widths == [width for _, _, width in COLUMNS]


def test_empty_records_writes_header_only(tmp_path):
    path = SpreadsheetExporter(tmp_path).write("Lyon", [])
    rows = list(load_workbook(path).active.iter_rows(values_only=True))
    assert len(rows) == 1


def test_remove_deletes_file(tmp_path):
    exporter = SpreadsheetExporter(tmp_path)
    path = exporter.write("Nice", [_record(1)])

    exporter.remove(path)

    assert not path.exists()


def test_remove_missing_file_is_noop(tmp_path):
    SpreadsheetExporter(tmp_path).remove(tmp_path / "gone.xlsx")
