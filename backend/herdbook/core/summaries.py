"""Summaries — pure aggregation of already-filtered rows for the summary cards.

Invariants:
    - Inputs are the same rows the list endpoint returns (no IO, no DB)
    - Every known status appears in the counts, zero when absent
    - Missing numeric values count as 0, never raise
"""

from collections.abc import Iterable
from datetime import date

from herdbook.core.derived_fields import classify_vaccination
from herdbook.core.domain_types import ApprovalStatus, VaccinationStatus
from herdbook.core.formatting import format_inr, format_indian_number


def summarize_yield(rows: Iterable) -> dict:
    """Totals for the weekly milk-yield screen."""
    count = 0
    litres = 0.0
    cost = 0.0
    for row in rows:
        count += 1
        litres += row.total_yield or 0.0
        cost += row.total_cost or 0.0
    litres = round(litres, 2)
    cost = round(cost, 2)
    average = round(litres / count, 2) if count else 0.0
    return {
        "total_records": count,
        "total_yield": litres,
        "total_cost": cost,
        "average_yield": average,
        "total_yield_display": format_indian_number(litres, 2),
        "total_cost_display": format_inr(cost),
    }


def summarize_approvals(rows: Iterable) -> dict:
    counts = {s.value: 0 for s in ApprovalStatus}
    for row in rows:
        counts[row.approval_status] = counts.get(row.approval_status, 0) + 1
    return {
        "total_records": sum(counts.values()),
        "pending": counts[ApprovalStatus.PENDING.value],
        "approved": counts[ApprovalStatus.APPROVED.value],
        "rejected": counts[ApprovalStatus.REJECTED.value],
    }


def summarize_vaccinations(rows: Iterable, today: date, due_soon_days: int) -> dict:
    counts = {s.value: 0 for s in VaccinationStatus}
    for row in rows:
        status = classify_vaccination(row.next_due_date, today, due_soon_days)
        counts[status.value] += 1
    return {"total_records": sum(counts.values()), "by_status": counts}
