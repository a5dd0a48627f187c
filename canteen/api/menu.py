"""
Menu API - rolling planning-window menu
"""
from fastapi import APIRouter
from typing import List
from pydantic import BaseModel

from canteen.models.menu import DailyMenu
from canteen.services.menu import list_menu

router = APIRouter()


class MenuResponse(BaseModel):
    menu: List[DailyMenu]


@router.get("/menu", response_model=MenuResponse)
async def get_menu():
    """Chef's specials, themes and dish highlights for the planning window"""
    return MenuResponse(menu=list_menu())
