"""Formatting — display strings shared by exports and summary endpoints.

Invariants:
    - Indian digit grouping: last three digits, then groups of two (12,34,567)
    - Missing numeric values render as "N/A", missing dates as "-"
    - Currency sign goes after the rupee symbol (₹-1,234.50)
"""

import math
from datetime import date, datetime

from herdbook.core.domain_types import ApprovalStatus, YesNo

RUPEE = "₹"

_APPROVAL_LABELS = {
    ApprovalStatus.PENDING: "Pending",
    ApprovalStatus.APPROVED: "Approved",
    ApprovalStatus.REJECTED: "Rejected",
}


def _group_indian(integer_part: str) -> str:
    if len(integer_part) <= 3:
        return integer_part
    head, last_three = integer_part[:-3], integer_part[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [last_three])


def format_indian_number(value: float | int | None, decimals: int = 0) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "N/A"
    sign = "-" if value < 0 else ""
    integer_part, _, fraction = f"{abs(value):.{decimals}f}".partition(".")
    grouped = _group_indian(integer_part)
    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"


def format_inr(value: float | int | None) -> str:
    """Rupee amount with two decimals, e.g. ₹1,00,000.00."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "N/A"
    sign = "-" if value < 0 else ""
    return f"{RUPEE}{sign}{format_indian_number(abs(value), 2)}"


def format_display_date(value: date | datetime | None) -> str:
    if value is None:
        return "-"
    return value.strftime("%d/%m/%Y")


def format_created_at(value: datetime | None) -> str:
    """DD/MM/YYYY at h:MM AM — the register's timestamp style."""
    if value is None:
        return "-"
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{format_display_date(value)} at {hour}:{value.minute:02d} {meridiem}"


def approval_status_label(code: ApprovalStatus | str) -> str:
    try:
        return _APPROVAL_LABELS[ApprovalStatus(code)]
    except ValueError:
        return str(code)


def yes_no_label(flag: YesNo | str | bool | None) -> str:
    if flag is None:
        return "-"
    if isinstance(flag, bool):
        return "Yes" if flag else "No"
    return "Yes" if YesNo(flag) == YesNo.YES else "No"
