"""Shared Route Dependencies — list filters, clock, and export download responses.

Invariants:
    - Every register list and export parses the same query parameters
    - limit is capped at settings.list_max_limit; lists are never unbounded
    - Export downloads always carry Content-Disposition: attachment

Design Decisions:
    - get_today as a dependency: tests override it instead of patching datetime
"""

import datetime
import logging
from collections.abc import Iterable, Sequence
from typing import Any

from fastapi import Query
from fastapi.responses import Response

from herdbook.config import get_settings
from herdbook.services.export import (
    ExportColumn, export_filename, parse_export_format, render_export,
)
from herdbook.services.record_store import ListFilters

logger = logging.getLogger(__name__)


def list_filters(
    search: str | None = Query(None, max_length=200),
    start_date: datetime.date | None = Query(None),
    end_date: datetime.date | None = Query(None),
    supervisor_id: str | None = Query(None, max_length=64),
    all_supervisors: bool = Query(False),
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
) -> ListFilters:
    max_limit = get_settings().list_max_limit
    return ListFilters(
        search=search,
        start_date=start_date,
        end_date=end_date,
        supervisor_id=supervisor_id,
        all_supervisors=all_supervisors,
        limit=min(limit or max_limit, max_limit),
        offset=offset,
    )


def export_filters(
    search: str | None = Query(None, max_length=200),
    start_date: datetime.date | None = Query(None),
    end_date: datetime.date | None = Query(None),
    supervisor_id: str | None = Query(None, max_length=64),
    all_supervisors: bool = Query(False),
) -> ListFilters:
    """Same filters as list_filters, without pagination: exports take every match."""
    return ListFilters(
        search=search,
        start_date=start_date,
        end_date=end_date,
        supervisor_id=supervisor_id,
        all_supervisors=all_supervisors,
    )


def export_format(format: str | None = Query(None, max_length=10)) -> str:
    return format or get_settings().export_default_format


def get_today() -> datetime.date:
    return datetime.date.today()


def spreadsheet_response(
    fmt: str,
    stem: str,
    sheet_title: str,
    columns: Sequence[ExportColumn],
    rows: Iterable[Any],
    today: datetime.date,
) -> Response:
    """Render rows and wrap them in a download response."""
    parsed = parse_export_format(fmt)
    content, media_type = render_export(parsed, sheet_title, columns, rows)
    filename = export_filename(stem, parsed, today)
    logger.info(f"Export ready: {filename}", extra={"export_format": parsed.value})
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
