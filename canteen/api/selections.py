"""
Selections API - employee meal submissions and the kitchen demand dashboard
"""
import json
import logging
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from typing import Any, List, Optional
from pydantic import BaseModel

from canteen.models.dashboard import DashboardSnapshot
from canteen.models.selection import MealSelection, SelectionInput
from canteen.services.selection_store import (
    MISSING_FIELDS_MESSAGE,
    SelectionStore,
    SelectionValidationError,
    decode_selection,
    get_selection_store,
)

router = APIRouter()
logger = logging.getLogger(__name__)

ALLOWED_METHODS = "GET,POST,OPTIONS"
ENTRY_FIELDS = ("employee", "department", "shift", "date", "meals", "remarks")


class SelectionsResponse(BaseModel):
    selections: List[MealSelection]
    dashboard: DashboardSnapshot


async def _read_payload(request: Request) -> Any:
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SelectionValidationError(f"Request body is not valid JSON: {e}") from e


def _decode_entries(payload: Any) -> List[SelectionInput]:
    """
    Accept {"entries": [...]} or a single flattened entry.

    Null items in entries are dropped; any other malformed item rejects
    the whole request.
    """
    if not isinstance(payload, dict):
        raise SelectionValidationError("Request body must be a JSON object")

    if isinstance(payload.get("entries"), list):
        raw_entries = [entry for entry in payload["entries"] if entry is not None]
    else:
        raw_entries = [{field: payload.get(field) for field in ENTRY_FIELDS}]

    return [decode_selection(entry) for entry in raw_entries]


@router.get("/selections", response_model=SelectionsResponse)
async def list_selections(
    employee: Optional[str] = None,
    store: SelectionStore = Depends(get_selection_store),
):
    """Raw selections plus the dashboard. employee narrows the list only."""
    selections, dashboard = store.snapshot(employee=employee)
    return SelectionsResponse(selections=selections, dashboard=dashboard)


@router.post("/selections", response_model=SelectionsResponse, status_code=201)
async def create_selections(
    request: Request,
    store: SelectionStore = Depends(get_selection_store),
):
    """Upsert one or more selections; the batch is stored whole or not at all"""
    try:
        payload = await _read_payload(request)
        entries = _decode_entries(payload)
        selections = store.add_selections(entries)
        dashboard = store.dashboard()
    except SelectionValidationError as e:
        logger.warning(f"Rejected selection submission: {e.detail}")
        return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_MESSAGE})
    except Exception as e:
        logger.error(f"Failed to add selection: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to add selection"})

    return SelectionsResponse(selections=selections, dashboard=dashboard)


@router.options("/selections")
async def selections_options():
    return Response(status_code=200)


def method_not_allowed_response() -> JSONResponse:
    """405 for any method on /selections other than GET, POST and OPTIONS"""
    return JSONResponse(
        status_code=405,
        content={"error": "Method Not Allowed"},
        headers={"Allow": ALLOWED_METHODS},
    )
