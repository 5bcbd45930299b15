"""Summaries — aggregation over already-filtered rows."""

from datetime import date
from types import SimpleNamespace

from herdbook.core.summaries import (
    summarize_approvals, summarize_vaccinations, summarize_yield,
)

TODAY = date(2026, 10, 18)


def _yield_row(total, cost=None):
    return SimpleNamespace(total_yield=total, total_cost=cost)


def test_yield_summary_totals_and_average():
    rows = [_yield_row(10.5, 420.0), _yield_row(12.0, 480.0), _yield_row(7.5)]
    summary = summarize_yield(rows)
    assert summary["total_records"] == 3
    assert summary["total_yield"] == 30.0
    assert summary["total_cost"] == 900.0
    assert summary["average_yield"] == 10.0
    assert summary["total_cost_display"] == "₹900.00"


def test_yield_summary_empty():
    summary = summarize_yield([])
    assert summary["total_records"] == 0
    assert summary["average_yield"] == 0.0
    assert summary["total_yield_display"] == "0.00"


def test_yield_summary_display_uses_indian_grouping():
    summary = summarize_yield([_yield_row(1000.0, 150000.0)])
    assert summary["total_yield_display"] == "1,000.00"
    assert summary["total_cost_display"] == "₹1,50,000.00"


def test_approval_summary_counts_every_status():
    rows = [SimpleNamespace(approval_status=s) for s in ("P", "P", "A", "R", "P")]
    assert summarize_approvals(rows) == {
        "total_records": 5, "pending": 3, "approved": 1, "rejected": 1,
    }


def test_approval_summary_zero_counts_present():
    assert summarize_approvals([]) == {
        "total_records": 0, "pending": 0, "approved": 0, "rejected": 0,
    }


def test_vaccination_summary_by_status():
    rows = [
        SimpleNamespace(next_due_date=date(2026, 10, 1)),
        SimpleNamespace(next_due_date=date(2026, 10, 20)),
        SimpleNamespace(next_due_date=date(2026, 12, 1)),
        SimpleNamespace(next_due_date=None),
    ]
    summary = summarize_vaccinations(rows, TODAY, 7)
    assert summary["total_records"] == 4
    assert summary["by_status"] == {"Scheduled": 2, "Due Soon": 1, "Overdue": 1}
