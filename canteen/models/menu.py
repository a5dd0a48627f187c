"""
Menu reference models (chef's special, theme, calories, dish highlights)
"""
from datetime import date
from typing import List, Optional

from canteen.models.selection import CamelModel


class DishCategory(CamelModel):
    category: str
    items: List[str]


class DailyMenu(CamelModel):
    date: date
    theme: str
    chef_special: str
    calories: int
    notes: Optional[str] = None
    dishes: List[DishCategory] = []
