from canteen.models.selection import Shift, MealSlot, SelectionInput, MealSelection
from canteen.models.dashboard import MealTotals, DayTotals, SlotDemand, DashboardSnapshot
from canteen.models.menu import DishCategory, DailyMenu

__all__ = [
    "Shift",
    "MealSlot",
    "SelectionInput",
    "MealSelection",
    "MealTotals",
    "DayTotals",
    "SlotDemand",
    "DashboardSnapshot",
    "DishCategory",
    "DailyMenu",
]
