"""
Input validation utilities for meal selections
"""
from typing import Any, Optional

VALID_SHIFTS = ("morning", "general", "evening")


def validate_required_text(value: Any, field: str) -> str:
    """Trim a required text field and reject blanks"""
    if value is None:
        raise ValueError(f"{field} is required")
    text = str(value).strip()
    if not text:
        raise ValueError(f"{field} must not be empty")
    return text


def validate_shift(value: Any) -> str:
    """Validate shift is one of the canteen service shifts"""
    shift = validate_required_text(value, "shift")
    if shift not in VALID_SHIFTS:
        raise ValueError(f"Invalid shift. Must be one of: {', '.join(VALID_SHIFTS)}")
    return shift


def clip_remarks(value: Any, max_length: int) -> Optional[str]:
    """Empty remarks count as none; long ones are cut to max_length"""
    if value is None:
        return None
    text = str(value)
    if not text:
        return None
    return text[:max_length]
