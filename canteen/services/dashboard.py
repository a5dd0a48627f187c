"""
Dashboard aggregation - rolls stored selections into per-day and overall demand
"""
from typing import Dict, Iterable, Optional
from datetime import date

from canteen.models.dashboard import DashboardSnapshot, DayTotals, MealTotals, SlotDemand
from canteen.models.selection import MealSelection

MEAL_SLOTS = ("breakfast", "lunch", "dinner")


def _top_slot(totals: MealTotals) -> Optional[SlotDemand]:
    """Busiest meal slot; earlier slots win ties, None when nothing is booked"""
    best = None
    for slot in MEAL_SLOTS:
        count = getattr(totals, slot)
        if count > 0 and (best is None or count > best.count):
            best = SlotDemand(slot=slot, count=count)
    return best


def build_dashboard(selections: Iterable[MealSelection]) -> DashboardSnapshot:
    """
    Aggregate selections into a DashboardSnapshot.

    Pure and total: an empty input gives zero totals, no days and no
    last_updated. Days are always returned in ascending date order.
    """
    totals = MealTotals()
    by_date: Dict[date, DayTotals] = {}
    last_updated = None
    entries = 0

    for selection in selections:
        entries += 1
        day = by_date.get(selection.date)
        if day is None:
            day = by_date[selection.date] = DayTotals(date=selection.date)

        for slot in MEAL_SLOTS:
            if getattr(selection.meals, slot):
                setattr(totals, slot, getattr(totals, slot) + 1)
                setattr(day, slot, getattr(day, slot) + 1)

        if last_updated is None or selection.submitted_at > last_updated:
            last_updated = selection.submitted_at

    return DashboardSnapshot(
        totals=totals,
        days=[by_date[d] for d in sorted(by_date)],
        last_updated=last_updated,
        total_entries=entries,
        total_meals=totals.total(),
        top_slot=_top_slot(totals),
    )
