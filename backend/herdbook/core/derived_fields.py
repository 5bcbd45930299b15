"""Derived Fields — values the service recomputes instead of trusting the client.

Invariants:
    - total_yield == round(morning + evening, 2), always
    - total_cost == round(cost_per_litre * total_yield, 2), or None without a rate
    - Vaccination status is a function of (next_due_date, today, window) only
    - Conditional fields are cleared when their guard flag says they do not apply

Design Decisions:
    - Pure functions called from routes on every create AND update: a stale total
      sent back by an edit form can never reach the database
    - Window is inclusive: a dose due exactly `due_soon_days` from today is Due Soon
"""

from datetime import date, timedelta

from herdbook.core.domain_types import VaccinationStatus, YesNo


def compute_yield_totals(
    morning_yield: float,
    evening_yield: float,
    cost_per_litre: float | None = None,
) -> tuple[float, float | None]:
    """Return (total_yield, total_cost) for one day's milking."""
    total_yield = round(morning_yield + evening_yield, 2)
    if cost_per_litre is None:
        return total_yield, None
    return total_yield, round(cost_per_litre * total_yield, 2)


def classify_vaccination(
    next_due_date: date | None, today: date, due_soon_days: int = 7,
) -> VaccinationStatus:
    if next_due_date is None:
        return VaccinationStatus.SCHEDULED
    if next_due_date < today:
        return VaccinationStatus.OVERDUE
    if next_due_date <= today + timedelta(days=due_soon_days):
        return VaccinationStatus.DUE_SOON
    return VaccinationStatus.SCHEDULED


def normalize_unfit_quantity(
    fit_for_use: YesNo | str, unfit_quantity_kg: float | None,
) -> float | None:
    """Unfit quantity is only meaningful for feed marked unfit."""
    if YesNo(fit_for_use) == YesNo.YES:
        return None
    return unfit_quantity_kg


def normalize_completed_on(
    repair_needed: YesNo | str, completed_on: date | None,
) -> date | None:
    """Completion date is only kept for areas that needed a repair."""
    if YesNo(repair_needed) == YesNo.NO:
        return None
    return completed_on
