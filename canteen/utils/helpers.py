"""
General helper utilities
"""
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional


def utc_now() -> datetime:
    """Timezone-aware current time in UTC"""
    return datetime.now(timezone.utc)


def planning_window(start: Optional[date] = None, days: int = 5) -> List[date]:
    """Consecutive calendar days starting at start (today by default)"""
    first = start or date.today()
    return [first + timedelta(days=offset) for offset in range(max(days, 0))]
