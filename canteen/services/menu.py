"""
Menu lookup - fixed weekly rotation projected onto the planning window
"""
from datetime import date
from typing import List, Optional

from canteen.config import get_settings
from canteen.models.menu import DailyMenu, DishCategory
from canteen.utils.helpers import planning_window

# Keyed by date.weekday(): 0 = Monday
WEEKLY_ROTATION = {
    0: {
        "theme": "Fresh Start Monday",
        "chef_special": "Grilled paneer tikka bowl",
        "calories": 620,
        "notes": "Millet upma available at breakfast on request.",
        "dishes": [
            ("Breakfast", ["Vegetable poha", "Boiled eggs", "Seasonal fruit bowl"]),
            ("Lunch", ["Paneer tikka", "Jeera rice", "Dal tadka", "Cucumber raita"]),
            ("Dinner", ["Chapati", "Mixed vegetable curry", "Moong dal khichdi"]),
        ],
    },
    1: {
        "theme": "South Indian Tuesday",
        "chef_special": "Ghee roast masala dosa",
        "calories": 580,
        "notes": None,
        "dishes": [
            ("Breakfast", ["Idli", "Coconut chutney", "Filter coffee"]),
            ("Lunch", ["Masala dosa", "Sambar", "Lemon rice", "Curd rice"]),
            ("Dinner", ["Appam", "Vegetable stew", "Rasam"]),
        ],
    },
    2: {
        "theme": "Protein Wednesday",
        "chef_special": "Herb grilled chicken with quinoa",
        "calories": 710,
        "notes": "Tofu swap available for the vegetarian line.",
        "dishes": [
            ("Breakfast", ["Masala omelette", "Multigrain toast", "Sprouts salad"]),
            ("Lunch", ["Grilled chicken", "Quinoa pilaf", "Rajma", "Green salad"]),
            ("Dinner", ["Egg curry", "Phulka", "Sauteed greens"]),
        ],
    },
    3: {
        "theme": "Global Kitchen Thursday",
        "chef_special": "Thai green curry",
        "calories": 650,
        "notes": None,
        "dishes": [
            ("Breakfast", ["Pancakes", "Greek yogurt", "Banana"]),
            ("Lunch", ["Thai green curry", "Jasmine rice", "Stir-fried vegetables"]),
            ("Dinner", ["Whole wheat pasta", "Tomato basil soup", "Garlic bread"]),
        ],
    },
    4: {
        "theme": "Festive Friday",
        "chef_special": "Vegetable dum biryani",
        "calories": 760,
        "notes": "Dessert counter open after lunch service.",
        "dishes": [
            ("Breakfast", ["Aloo paratha", "Curd", "Pickle"]),
            ("Lunch", ["Dum biryani", "Mirchi ka salan", "Onion raita", "Gulab jamun"]),
            ("Dinner", ["Jeera pulao", "Paneer butter masala", "Naan"]),
        ],
    },
    5: {
        "theme": "Light Saturday",
        "chef_special": "Millet khichdi with kadhi",
        "calories": 540,
        "notes": "Reduced counters; weekend support teams only.",
        "dishes": [
            ("Breakfast", ["Upma", "Boiled eggs", "Tea"]),
            ("Lunch", ["Millet khichdi", "Kadhi", "Papad"]),
            ("Dinner", ["Chapati", "Dal makhani", "Salad"]),
        ],
    },
    6: {
        "theme": "Comfort Sunday",
        "chef_special": "Chole bhature",
        "calories": 820,
        "notes": "Reduced counters; weekend support teams only.",
        "dishes": [
            ("Breakfast", ["Puri bhaji", "Fruit bowl"]),
            ("Lunch", ["Chole bhature", "Lassi", "Pickled onions"]),
            ("Dinner", ["Vegetable fried rice", "Manchurian", "Clear soup"]),
        ],
    },
}


def menu_for_day(day: date) -> DailyMenu:
    entry = WEEKLY_ROTATION[day.weekday()]
    return DailyMenu(
        date=day,
        theme=entry["theme"],
        chef_special=entry["chef_special"],
        calories=entry["calories"],
        notes=entry["notes"],
        dishes=[DishCategory(category=category, items=list(items)) for category, items in entry["dishes"]],
    )


def list_menu(start: Optional[date] = None, days: Optional[int] = None) -> List[DailyMenu]:
    """Menu for each day of the planning window (today onwards by default)"""
    if days is None:
        days = get_settings().PLANNING_DAYS
    return [menu_for_day(day) for day in planning_window(start, days)]
