"""
In-memory selection store - one meal selection per (employee, date)

State lives for the lifetime of the process only. The application creates a
single store at startup and hands it to request handlers through
get_selection_store().
"""
import logging
import threading
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from fastapi import Request
from pydantic import ValidationError

from canteen.models.dashboard import DashboardSnapshot
from canteen.models.selection import MealSelection, SelectionInput
from canteen.services.dashboard import build_dashboard
from canteen.utils.helpers import utc_now

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields"

SelectionKey = Tuple[str, date]


class SelectionValidationError(ValueError):
    """A submission is missing a required field or carries an invalid value.

    str() is the client-safe message; detail holds the cause for the logs.
    """

    def __init__(self, detail: str = ""):
        super().__init__(MISSING_FIELDS_MESSAGE)
        self.detail = detail or MISSING_FIELDS_MESSAGE


def decode_selection(entry: Any) -> SelectionInput:
    """Convert a raw request entry into a SelectionInput or raise"""
    if isinstance(entry, SelectionInput):
        return entry
    if not isinstance(entry, dict):
        raise SelectionValidationError(f"Entry must be an object, got {type(entry).__name__}")
    try:
        return SelectionInput.model_validate(entry)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) or "entry" for err in e.errors()
        )
        raise SelectionValidationError(f"Invalid or missing fields: {fields}") from e


def _for_employee(
    records: List[MealSelection], employee: Optional[str]
) -> List[MealSelection]:
    # Blank or missing name means no filter
    name = employee.strip() if employee else ""
    if not name:
        return records
    return [record for record in records if record.employee == name]


class SelectionStore:
    """
    Authoritative set of current meal selections.

    Every upsert and every read copy happens under one lock, so concurrent
    submissions for the same key never interleave and readers always see a
    whole batch or none of it. Records are handed out as copies.
    """

    def __init__(self) -> None:
        self._records: Dict[SelectionKey, MealSelection] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def add_selection(self, entry: Union[SelectionInput, Dict[str, Any]]) -> MealSelection:
        """Insert or replace the selection for (employee, date)"""
        return self.add_selections([entry])[0]

    def add_selections(
        self, entries: Iterable[Union[SelectionInput, Dict[str, Any]]]
    ) -> List[MealSelection]:
        """
        Upsert a batch of selections atomically.

        All entries are validated first; one bad entry rejects the whole
        batch and leaves the store untouched.
        """
        inputs = [decode_selection(entry) for entry in entries]

        created = 0
        updated = 0
        results = []
        with self._lock:
            for data in inputs:
                record, is_new = self._upsert(data)
                if is_new:
                    created += 1
                else:
                    updated += 1
                results.append(record.model_copy(deep=True))

        if results:
            logger.info(f"Stored {len(results)} selection(s): {created} created, {updated} updated")
        return results

    def _upsert(self, data: SelectionInput) -> Tuple[MealSelection, bool]:
        # Caller holds the lock
        key = (data.employee, data.date)
        now = utc_now()
        existing = self._records.get(key)

        if existing:
            existing.department = data.department
            existing.shift = data.shift
            existing.meals = data.meals.model_copy()
            existing.remarks = data.remarks
            existing.submitted_at = max(now, existing.submitted_at)
            return existing, False

        record = MealSelection(
            employee=data.employee,
            department=data.department,
            shift=data.shift,
            date=data.date,
            meals=data.meals.model_copy(),
            remarks=data.remarks,
            submitted_at=now,
        )
        self._records[key] = record
        return record, True

    def list_selections(self, employee: Optional[str] = None) -> List[MealSelection]:
        """All current selections in first-submission order, optionally for one employee"""
        with self._lock:
            records = [record.model_copy(deep=True) for record in self._records.values()]
        return _for_employee(records, employee)

    def dashboard(self) -> DashboardSnapshot:
        return build_dashboard(self.list_selections())

    def snapshot(
        self, employee: Optional[str] = None
    ) -> Tuple[List[MealSelection], DashboardSnapshot]:
        """
        Selections and dashboard computed from the same copy of the store.

        employee narrows the returned selections; the dashboard always
        covers every record.
        """
        selections = self.list_selections()
        return _for_employee(selections, employee), build_dashboard(selections)


def get_selection_store(request: Request) -> SelectionStore:
    """Dependency for getting the application's selection store"""
    return request.app.state.selection_store
