"""
Dashboard snapshot models - derived demand view, never stored
"""
from datetime import date, datetime
from typing import List, Optional

from canteen.models.selection import CamelModel


class MealTotals(CamelModel):
    breakfast: int = 0
    lunch: int = 0
    dinner: int = 0

    def total(self) -> int:
        return self.breakfast + self.lunch + self.dinner


class DayTotals(MealTotals):
    date: date


class SlotDemand(CamelModel):
    slot: str
    count: int


class DashboardSnapshot(CamelModel):
    totals: MealTotals
    days: List[DayTotals]
    last_updated: Optional[datetime] = None
    total_entries: int = 0
    total_meals: int = 0
    top_slot: Optional[SlotDemand] = None
