"""Spreadsheet Export — turn filtered register rows into XLSX or CSV bytes.

Invariants:
    - Output = one header row + one row per record, in list order
    - Enum values are written as their stored value; formatters run before writing
    - Timestamps reach openpyxl already formatted (Excel cannot store tz-aware datetimes)
    - CSV is UTF-8 with BOM so Excel opens rupee signs and non-ASCII names correctly

Design Decisions:
    - openpyxl Workbook + BytesIO, the same approach as the poultry report views
    - Column specs declared next to each route, not derived from the ORM:
      export headers are business-facing labels, not column names
"""

import csv
import datetime
import io
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from herdbook.core.domain_types import ExportFormat
from herdbook.core.errors import ExportFormatError

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"

_MAX_COLUMN_WIDTH = 50


@dataclass(frozen=True)
class ExportColumn:
    header: str
    attr: str
    formatter: Callable[[Any], Any] | None = None

    def value_for(self, row: Any) -> Any:
        value = getattr(row, self.attr)
        if self.formatter is not None:
            return self.formatter(value)
        if isinstance(value, Enum):
            return value.value
        return value


def parse_export_format(fmt: str) -> ExportFormat:
    try:
        return ExportFormat(fmt.strip().lower())
    except ValueError:
        raise ExportFormatError(fmt)


def _table(columns: Sequence[ExportColumn], rows: Iterable[Any]) -> list[list[Any]]:
    table = [[c.header for c in columns]]
    table.extend([c.value_for(row) for c in columns] for row in rows)
    return table


def build_xlsx(sheet_title: str, columns: Sequence[ExportColumn], rows: Iterable[Any]) -> bytes:
    table = _table(columns, rows)
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title[:31]  # Excel sheet-name limit
    for r in table:
        ws.append(r)
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for index in range(len(columns)):
        longest = max(len(str(r[index])) for r in table if r[index] is not None)
        ws.column_dimensions[get_column_letter(index + 1)].width = min(longest + 2, _MAX_COLUMN_WIDTH)
    ws.freeze_panes = "A2"
    buff = io.BytesIO()
    wb.save(buff)
    logger.info(
        f"Built XLSX export '{sheet_title}'",
        extra={"export_format": "xlsx", "row_count": len(table) - 1},
    )
    return buff.getvalue()


def build_csv(columns: Sequence[ExportColumn], rows: Iterable[Any]) -> bytes:
    table = _table(columns, rows)
    buff = io.StringIO()
    writer = csv.writer(buff)
    for r in table:
        writer.writerow("" if v is None else v for v in r)
    logger.info(
        "Built CSV export",
        extra={"export_format": "csv", "row_count": len(table) - 1},
    )
    return buff.getvalue().encode("utf-8-sig")


def export_filename(stem: str, fmt: ExportFormat, today: datetime.date) -> str:
    return f"{stem}_{today.isoformat()}.{fmt.value}"


def render_export(
    fmt: ExportFormat, sheet_title: str,
    columns: Sequence[ExportColumn], rows: Iterable[Any],
) -> tuple[bytes, str]:
    """Return (content, media_type) for the requested format."""
    if fmt == ExportFormat.CSV:
        return build_csv(columns, rows), CSV_MEDIA_TYPE
    return build_xlsx(sheet_title, columns, rows), XLSX_MEDIA_TYPE
