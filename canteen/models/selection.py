"""
Meal selection models - one employee's meal choices for one service day
"""
import enum
from datetime import date, datetime
from typing import Any, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from canteen.config import get_settings
from canteen.utils.helpers import utc_now
from canteen.utils.validators import clip_remarks, validate_required_text, validate_shift


class Shift(str, enum.Enum):
    MORNING = "morning"   # 7 AM - 3 PM
    GENERAL = "general"   # 9 AM - 6 PM
    EVENING = "evening"   # 1 PM - 9 PM


class CamelModel(BaseModel):
    """Base for models exchanged with the web client (camelCase on the wire)"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class MealSlot(CamelModel):
    breakfast: bool = False
    lunch: bool = False
    dinner: bool = False

    @field_validator("breakfast", "lunch", "dinner", mode="before")
    @classmethod
    def _truthy(cls, value: Any) -> bool:
        return bool(value)


class SelectionInput(CamelModel):
    """A submitted entry, decoded and normalized at the request boundary"""
    employee: str
    department: str
    shift: Shift
    date: date
    meals: MealSlot
    remarks: Optional[str] = None

    @field_validator("employee", "department", mode="before")
    @classmethod
    def _required_text(cls, value: Any, info) -> str:
        return validate_required_text(value, info.field_name)

    @field_validator("shift", mode="before")
    @classmethod
    def _shift(cls, value: Any) -> str:
        return validate_shift(value)

    @field_validator("date", mode="before")
    @classmethod
    def _date(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("date must not be empty")
            return date.fromisoformat(value)
        return value

    @field_validator("meals", mode="before")
    @classmethod
    def _meals(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("meals is required")
        return value

    @field_validator("remarks", mode="before")
    @classmethod
    def _remarks(cls, value: Any) -> Optional[str]:
        return clip_remarks(value, get_settings().REMARKS_MAX_LENGTH)


class MealSelection(CamelModel):
    """Stored record; at most one per (employee, date)"""
    id: str = Field(default_factory=lambda: str(uuid4()))
    employee: str
    department: str
    shift: Shift
    date: date
    meals: MealSlot
    remarks: Optional[str] = None
    submitted_at: datetime = Field(default_factory=utc_now)
