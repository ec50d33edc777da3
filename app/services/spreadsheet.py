import logging
import re
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from app.schemas.hotel import HotelRecord

logger = logging.getLogger(__name__)

SHEET_TITLE = "Hotels"

# (header, record field, column width)
COLUMNS = (
    ("Name", "name", 30),
    ("Address", "address", 50),
    ("Website URL", "website_url", 50),
    ("Rating", "rating", 10),
    ("Place ID", "place_id", 20),
    ("Photo URL", "photo_url", 50),
    ("Email", "email", 30),
)

_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_-]")


def export_filename(city: str) -> str:
    return f"{city}_hotels.xlsx"


def safe_filename(city: str) -> str:
    return export_filename(_UNSAFE_RE.sub("_", city))


class SpreadsheetExporter:
    def __init__(self, export_dir: str | Path = "."):
        self._export_dir = Path(export_dir)

    def build_workbook(self, records: list[HotelRecord]) -> Workbook:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = SHEET_TITLE

        sheet.append([header for header, _, _ in COLUMNS])
        for cell in sheet[1]:
            cell.font = Font(bold=True)

        for idx, (_, _, width) in enumerate(COLUMNS, start=1):
            sheet.column_dimensions[get_column_letter(idx)].width = width

        for record in records:
            sheet.append([getattr(record, field) for _, field, _ in COLUMNS])

        return workbook

    def write(self, city: str, records: list[HotelRecord]) -> Path:
        self._export_dir.mkdir(parents=True, exist_ok=True)
        path = self._export_dir / safe_filename(city)
        self.build_workbook(records).save(path)
        logger.info("Excel file created: %s (%d rows)", path, len(records))
        return path

    def remove(self, path: Path) -> None:
        path.unlink(missing_ok=True)
        logger.info("Excel file deleted: %s", path)
